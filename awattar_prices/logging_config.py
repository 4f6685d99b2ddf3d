"""
Structured logging setup using structlog.
Key/value events rendered as JSON lines or as colored console output.
"""

import logging

import structlog

from awattar_prices.config import settings


def setup_logging() -> None:
    """
    Configure structlog from the current settings.

    Safe to call more than once; the last call wins.
    """
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    
    if settings.log_format.lower() == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()
    
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str = None):
    """Return a lazily configured structlog logger tagged with ``name``."""
    if name is None:
        return structlog.get_logger()
    return structlog.get_logger(logger_name=name)
