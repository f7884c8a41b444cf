"""
Logging setup for cardwar.

Every module logs through ``logging.getLogger(__name__)``; this module only
decides where those records go and at which level. Narration is not logging:
it goes through an IOInterface.
"""

import logging
import os
from typing import Union

LOGGER_NAME = "cardwar"
LOG_LEVEL_ENV = "CARDWAR_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_level(level: Union[str, int, None] = None) -> int:
    """
    Turn a level name or number into a logging level.

    Falls back to the ``CARDWAR_LOG_LEVEL`` environment variable, then WARNING.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def configure_logging(level: Union[str, int, None] = None) -> logging.Logger:
    """Configure the package logger and return it."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolve_level(level))

    # Add a stderr handler if none exists
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
