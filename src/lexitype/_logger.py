"""Package logger.

Every lexitype module logs through ``_logger.logger``; embedders can swap
it out or change its level.
"""

import logging

logger: logging.Logger = logging.getLogger("lexitype")
logger.setLevel(logging.WARNING)


def set_logger(custom_logger: logging.Logger) -> None:
    """Route lexitype log records to *custom_logger*."""
    global logger
    logger = custom_logger


def set_log_level(level: int) -> None:
    """Set the level of the current package logger (``logging.DEBUG`` etc.)."""
    logger.setLevel(level)
