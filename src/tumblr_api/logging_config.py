"""Logging configuration for the tumblr-api CLI."""

import logging
import sys

from loguru import logger


class InterceptHandler(logging.Handler):
    """Forward stdlib log records (requests, urllib3) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(exception=record.exc_info).log(level, "{}: {}", record.name, record.getMessage())


def configure_logging(*, verbose: bool = False) -> None:
    """Send loguru output to stderr; in verbose mode include HTTP connection logs."""
    logger.remove()
    level = "DEBUG" if verbose else "INFO"
    logger.add(sys.stderr, level=level, format="{level.icon} {message}")
    logging.basicConfig(
        handlers=[InterceptHandler()],
        level=logging.DEBUG if verbose else logging.WARNING,
        force=True,
    )
