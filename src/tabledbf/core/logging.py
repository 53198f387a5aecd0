"""Package logging on top of the standard library.

Usage:
    from tabledbf.core.logging import get_logger

    log = get_logger(__name__)
    log.debug("parsed header")
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "tabledbf"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``tabledbf`` namespace."""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def set_log_level(level: int | str) -> None:
    """Set the level of the package logger.

    Args:
        level: A ``logging`` level number or name such as ``"DEBUG"``.
    """
    if isinstance(level, str):
        level = level.upper()
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(level)
