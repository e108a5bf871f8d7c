"""
Logging configuration helpers.
Application records use a pipe-separated layout; access lines on `ACCESS_LOGGER_NAME` are
already formatted in the combined layout and are written as-is on their own handler.
"""

from __future__ import annotations

import logging
import sys

from neuralink_backend.common.settings import get_settings

APP_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
ACCESS_LOG_FORMAT = "%(message)s"
ACCESS_LOGGER_NAME = "neuralink_backend.api.access"

_LOGGING_CONFIGURED = False


def resolve_log_level(level_name: str) -> int:
    level = logging.getLevelName(level_name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    """Configure process-wide logging from environment settings."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    level = resolve_log_level(get_settings().LOG_LEVEL)
    logging.basicConfig(level=level, format=APP_LOG_FORMAT)

    access_handler = logging.StreamHandler(sys.stdout)
    access_handler.setFormatter(logging.Formatter(ACCESS_LOG_FORMAT))
    access_logger = logging.getLogger(ACCESS_LOGGER_NAME)
    access_logger.handlers.clear()
    access_logger.addHandler(access_handler)
    access_logger.setLevel(level)
    access_logger.propagate = False

    _LOGGING_CONFIGURED = True
