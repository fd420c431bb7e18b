"""Logging setup for applications embedding the slug control."""

import logging
from typing import Optional

from .config import SlugSettings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None, settings: Optional[SlugSettings] = None) -> logging.Logger:
    """Configure the form_slug logger.

    Args:
        level: Log level name, wins over ``settings.log_level``
        settings: Settings to take the level from

    Returns:
        The package logger
    """
    if level is None:
        level = settings.log_level if settings is not None else "INFO"

    package_logger = logging.getLogger("form_slug")
    package_logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)

    return package_logger
