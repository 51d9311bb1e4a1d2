"""Retry utilities with exponential backoff.

Uses the backoff library for retrying filesystem calls that fail
transiently. Nothing is retried unless a caller asks for it.
"""

from collections.abc import Callable, Mapping
from typing import Any, TypeVar

import backoff
from loguru import logger

from pathutil.errors import FilesystemError

F = TypeVar("F", bound=Callable[..., Any])


def on_backoff(details: Mapping[str, Any]) -> None:
    """Log retry attempts."""
    logger.warning(
        "Retrying {}: attempt={} wait={}s error={}",
        details["target"].__name__,
        details["tries"],
        details["wait"],
        details["exception"],
    )


def on_giveup(details: Mapping[str, Any]) -> None:
    """Log when retries are exhausted."""
    logger.debug(
        "Gave up on {}: attempts={} error={}",
        details["target"].__name__,
        details["tries"],
        details["exception"],
    )


def _is_permanent(exc: Exception) -> bool:
    return isinstance(exc, FilesystemError) and not exc.retryable


def retry_filesystem(max_tries: int, max_time: float = 5.0) -> Callable[[F], F]:
    """
    Build a decorator retrying FilesystemError with exponential backoff.

    Errors marked as not retryable give up immediately.

    Args:
        max_tries: Total attempts, including the first one.
        max_time: Upper bound in seconds across all attempts.

    Returns:
        A decorator for the filesystem call.
    """
    return backoff.on_exception(  # type: ignore[no-any-return]
        backoff.expo,
        FilesystemError,
        max_tries=max_tries,
        max_time=max_time,
        factor=0.05,
        giveup=_is_permanent,
        on_backoff=on_backoff,
        on_giveup=on_giveup,
    )
