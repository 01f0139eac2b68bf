"""Structured logging setup for applications embedding the validation engine."""

import logging
from typing import Optional

import structlog

from common_validation.config import get_settings


def configure_logging(debug: Optional[bool] = None, level: Optional[str] = None) -> None:
    """Configure structlog the same way for every consumer.

    Args:
        debug: Use the console renderer instead of JSON. Defaults to settings.DEBUG.
        level: Minimum log level name. Defaults to settings.LOG_LEVEL.
    """
    settings = get_settings()
    if debug is None:
        debug = settings.DEBUG
    level_name = (level or settings.LOG_LEVEL).upper()
    min_level = logging.getLevelName(level_name)
    if not isinstance(min_level, int):
        min_level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
    )
