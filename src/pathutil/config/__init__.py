"""Configuration management for pathutil."""

from pathutil.config.loader import load_config
from pathutil.config.models import (
    Config,
    FilesystemConfig,
    LoggingConfig,
    NormalizationConfig,
    SearchConfig,
)

__all__ = [
    "Config",
    "FilesystemConfig",
    "LoggingConfig",
    "NormalizationConfig",
    "SearchConfig",
    "load_config",
]
