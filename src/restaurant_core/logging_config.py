"""
Structlog-based logging for restaurant-core.

All modules obtain loggers through get_logger(); structured fields are passed
as keyword arguments:

    from restaurant_core.logging_config import get_logger
    logger = get_logger(__name__)
    logger.info("Order placed", order_id="ORD-12345")

log_error() is the sink the exercise demonstrations report rejections to.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from typing import Any

import structlog
from structlog.stdlib import BoundLogger, LoggerFactory

from restaurant_core.config import Settings, get_settings

EXERCISE_LOGGER_NAME = "restaurant_core.exercises"


def configure_logging(settings: Settings | None = None) -> None:
    """Configure stdlib logging and structlog from settings.

    Args:
        settings: Settings to apply. Defaults to get_settings().
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(level)

    renderer: Any
    if settings.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=BoundLogger,
        # Reconfiguration must reach loggers that were already handed out.
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> BoundLogger:
    """Return a structlog logger bound to the given name."""
    return structlog.get_logger(name)


def log_error(
    exercise_number: int,
    message: str,
    details: Mapping[str, Any] | None = None,
) -> None:
    """Record a rejected input for an exercise.

    Args:
        exercise_number: Which exercise the rejection belongs to.
        message: Human-readable summary of what was blocked.
        details: Optional structured context (raw input, issue, kind...).
    """
    get_logger(EXERCISE_LOGGER_NAME).error(
        message,
        exercise=exercise_number,
        details=dict(details) if details is not None else None,
    )
