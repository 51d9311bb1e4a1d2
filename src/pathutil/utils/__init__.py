"""pathutil utility modules."""

from pathutil.utils.logging import configure_logging
from pathutil.utils.retry import retry_filesystem

__all__ = [
    "configure_logging",
    "retry_filesystem",
]
