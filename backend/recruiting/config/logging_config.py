"""
Logging setup for applications hosting the recruiting engine.

The engine modules only create module loggers; call configure_logging()
once at startup to attach handlers.
"""

import logging
from typing import Optional

from recruiting.config.settings import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Apply the configured level and format to the root logger.

    Args:
        settings: Settings to use. If None, uses the cached settings.

    Returns:
        The "recruiting" package logger.
    """
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.log_level_value,
        format=settings.log_format,
        force=True,
    )

    logger = logging.getLogger("recruiting")
    logger.setLevel(logging.DEBUG if settings.debug else settings.log_level_value)
    logger.debug(f"[CONFIG] Logging configured for {settings.environment} environment")
    return logger
