"""
Application logger.

Configures the standard library root handler once and exposes a shared
``logger`` for the rest of the package.
"""

import logging

from contextchat.core.config import get_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure root logging (idempotent) and return the package logger."""
    level_name = (level or get_settings().LOG_LEVEL).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)

    if not logging.getLogger().handlers:
        logging.basicConfig(format=LOG_FORMAT, level=numeric_level)

    package_logger = logging.getLogger("contextchat")
    package_logger.setLevel(numeric_level)
    return package_logger


logger = setup_logging()
