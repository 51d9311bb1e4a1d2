"""Logging setup for the pathutil command line.

Diagnostics go to stderr so that the single line a command prints on
stdout can be consumed by scripts. Console records are kept short;
the optional log file carries timestamps and call sites.
"""

import logging
import sys

from loguru import logger

from pathutil.config.models import LoggingConfig

CONSOLE_FORMAT = "<level>{level: <8}</level> <cyan>{name}</cyan> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"


class _InterceptHandler(logging.Handler):
    """Forward standard library log records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore[assignment]
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(config: LoggingConfig) -> None:
    """
    Replace loguru's sinks with the ones described by config.

    The stderr sink is colorized only when stderr is a terminal. With
    ``format: json`` both sinks emit one serialized record per line.
    """
    logger.remove()
    serialize = config.format == "json"

    logger.add(
        sys.stderr,
        format="{message}" if serialize else CONSOLE_FORMAT,
        level=config.level,
        serialize=serialize,
        colorize=False if serialize else None,
    )

    if config.file is not None:
        logger.add(
            config.file,
            format="{message}" if serialize else FILE_FORMAT,
            level=config.level,
            serialize=serialize,
            rotation=config.rotation,
            retention=config.retention,
        )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    logger.debug("Logging at {} ({})", config.level, config.format)
