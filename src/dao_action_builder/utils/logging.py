"""
Structured logging helpers for the DAO action builder.

The package logger ships with a NullHandler, so nothing is printed until the
host application configures logging (or calls configure_logging()).

Example:
    >>> from dao_action_builder.utils.logging import configure_logging, get_logger
    >>> configure_logging("DEBUG")
    >>> logger = get_logger(__name__)
    >>> logger.info("Fetched ABI", extra={"address": "0xabc..."})
"""

from __future__ import annotations

import logging
from typing import Optional, Union

ROOT_LOGGER_NAME = "dao_action_builder"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger inside the package namespace.

    Args:
        name: Module name (usually ``__name__``). Names outside the package
            namespace are nested under it.

    Returns:
        Configured logger instance.
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(
    level: Union[int, str] = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Calling this more than once replaces the previously attached handler.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def set_level(level: Union[int, str]) -> None:
    """Set the package log level."""
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(level)


def disable_logging() -> None:
    """Silence all package logging."""
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(logging.CRITICAL + 1)


def enable_debug() -> None:
    """Shortcut for configure_logging("DEBUG")."""
    configure_logging(logging.DEBUG)
