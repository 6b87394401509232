"""Logging utilities for ephemeral containers."""

import logging
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

from ephemeral_containers.config import get_settings

PACKAGE_LOGGER = "ephemeral_containers"


def setup_logging(log_level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """
    Attach a stdout handler to the package logger.

    Only the ``ephemeral_containers`` logger is configured; the root logger
    is left untouched.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to ``Settings.log_level``.
        log_format: Format type (json or text). Defaults to ``Settings.log_format``.
    """
    settings = get_settings()
    level = getattr(logging, (log_level or settings.log_level).upper())
    fmt = (log_format or settings.log_format).lower()

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for existing in list(logger.handlers):
        logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    if fmt == "json":
        formatter = JsonFormatter(
            "%(timestamp)s %(levelname)s %(name)s %(message)s",
            rename_fields={"levelname": "level"},
            timestamp=True,
        )
    else:
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    handler.setFormatter(formatter)
    logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name (typically __name__)."""
    return logging.getLogger(name)
