"""
Logger setup for the package.

Modules log through `logging.getLogger(__name__)`, so every logger lives under
the "src" namespace. configure_logging() attaches one stdout handler to that
namespace logger; calling it again only adjusts the level.
"""

import logging
import sys
from typing import Optional

from src.config.settings import get_settings

PACKAGE_LOGGER_NAME = "src"
LOG_FORMAT = "%(asctime)s - %(name)s - [%(levelname)s] - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger once and return it.

    Args:
        level: Level name to apply. Defaults to DATES_LOG_LEVEL from settings.

    Returns:
        The configured package logger.
    """
    if level is None:
        level = get_settings().logging.level

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(level.upper())

    if not getattr(logger, "_configured", False):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(handler)
        setattr(logger, "_configured", True)
        logger.debug("Logger configured with level: %s", level.upper())

    return logger
