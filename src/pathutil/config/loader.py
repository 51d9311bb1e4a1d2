"""Configuration loading utilities.

Settings come from an optional YAML file; ``PATHUTIL_`` environment
variables are layered on top by the settings model itself.
"""

from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic import ValidationError

from pathutil.config.models import Config
from pathutil.errors import ConfigurationError


def _read_mapping(config_path: Path) -> dict[str, Any]:
    try:
        with config_path.open() as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"{config_path}: top level must be a mapping of sections, not {type(data).__name__}"
        )
    return data


def _describe(error: ValidationError) -> str:
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "config"
        problems.append(f"{location}: {item['msg']}")
    return "; ".join(problems)


def load_config(config_path: Path | None) -> Config:
    """
    Build the configuration from a YAML file and the environment.

    Args:
        config_path: YAML file with ``normalization``, ``search``,
            ``filesystem`` and ``logging`` sections, or None to use
            defaults and environment variables only.

    Returns:
        Validated Config object.

    Raises:
        FileNotFoundError: If config_path doesn't exist.
        ConfigurationError: If the file is not valid YAML, is not a
            mapping, or holds values the models reject.
    """
    data: dict[str, Any] = {}
    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        data = _read_mapping(config_path)

    try:
        config = Config(**data)
    except ValidationError as e:
        source = config_path or "environment"
        raise ConfigurationError(f"Invalid configuration ({source}): {_describe(e)}") from e

    if config_path is not None:
        logger.debug("Loaded configuration from {}", config_path)
    return config
