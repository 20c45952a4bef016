"""
Structured Logging (structlog).

Registries and tools log key/value events through loggers obtained here.
"""

import logging
import sys

import structlog

from relay_config.settings import Settings


def setup_logging(settings: Settings) -> None:
    """
    Configure structlog on top of stdlib logging.

    LOG_FORMAT selects JSON lines or the console renderer; LOG_LEVEL is
    applied to the root logger.
    """
    logging.basicConfig(
        format="%(message)s", stream=sys.stdout, level=settings.LOG_LEVEL.upper()
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.LOG_FORMAT == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger bound to ``name``."""
    return structlog.get_logger(name)
