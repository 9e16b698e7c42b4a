"""
Logging configuration and utilities.

bemkit never configures handlers on import (the package only attaches a
NullHandler to the ``bemkit`` logger). Applications and test sessions call
``setup_logging`` to see the debug records emitted by BemBase mutations.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import BemSettings

__all__ = [
    "LOG_FORMAT",
    "setup_logging",
    "get_logger",
]

ROOT_LOGGER_NAME = "bemkit"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LEVEL = "WARNING"


def setup_logging(level: str | None = None, settings: BemSettings | None = None) -> logging.Logger:
    """
    Configure the ``bemkit`` logger with a single console handler.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL). When None,
            ``settings.log_level`` is used, then ``BEMKIT_LOG_LEVEL``, then WARNING.
        settings: Optional loaded settings.

    Returns:
        The configured ``bemkit`` logger.
    """
    if level is None:
        level = settings.log_level if settings is not None else os.environ.get("BEMKIT_LOG_LEVEL", DEFAULT_LEVEL)

    log_level = getattr(logging, level.upper(), None)
    if not isinstance(log_level, int):
        log_level = getattr(logging, DEFAULT_LEVEL)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)

    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the ``bemkit`` namespace.

    Args:
        name: Logger name, typically ``__name__``; prefixed with ``bemkit.`` unless
            it already lives in that namespace.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
