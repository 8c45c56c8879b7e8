"""Logging setup for textual-store.

The library only creates module loggers under ``textual_store``. Applications
that want to see render and dispatch traces call ``setup_logging``.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

PACKAGE_LOGGER = "textual_store"
DEFAULT_LOG_LEVEL = logging.WARNING
DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marker so repeated setup calls only replace handlers we installed
_HANDLER_ATTR = "_textual_store_handler"


def setup_logging(
    *,
    level: int | str = DEFAULT_LOG_LEVEL,
    stream: TextIO | None = None,
    fmt: str = DEFAULT_LOG_FORMAT,
) -> logging.Logger:
    """Configure the package logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        stream: Stream for output. Defaults to stderr.
        fmt: Log record format.

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), DEFAULT_LOG_LEVEL)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(fmt, DEFAULT_DATE_FORMAT))
    setattr(handler, _HANDLER_ATTR, True)
    logger.addHandler(handler)

    return logger
