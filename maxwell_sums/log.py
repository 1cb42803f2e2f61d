"""Logging setup for the maxwell_sums package."""

import logging
import sys
from typing import Union

LOGGER_NAME = "maxwell_sums"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_level: Union[str, int] = "WARNING") -> logging.Logger:
    """
    Set up the package logger.

    Log records go to stderr so that the report on stdout stays clean.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ...) or number

    Returns:
        Configured package logger

    Raises:
        ValueError: If the level name is unknown
    """
    if isinstance(log_level, str):
        level = logging.getLevelName(log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {log_level}")
    else:
        level = log_level

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    return logger
