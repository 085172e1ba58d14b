"""Logging setup for the command line tools."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Send ``sprite_atlas`` log records to stderr.

    Args:
        level: Level name or number.

    Returns:
        The package logger.
    """
    logger = logging.getLogger("sprite_atlas")
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
