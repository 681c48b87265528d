"""Structured logging utilities for the technical levels engine.

Level computations log through structlog so that callers embedding the engine
(HTTP services, batch jobs) get key/value events they can filter and parse.
JSON output is the default; a console renderer is available for local work.
"""
import logging
import sys

import structlog

from technical_levels.core.config import get_settings


def configure_structured_logging(log_level: str | None = None, json_logs: bool = True) -> None:
    """Configure structured logging for the engine.

    Sets up structlog with:
    - JSON formatting (default) or console formatting for development
    - Timestamp inclusion
    - Log level filtering

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL);
            defaults to the configured LOG_LEVEL
        json_logs: Render events as JSON lines; False switches to the console renderer
    """
    log_level = log_level or get_settings().log_level
    level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        BoundLogger instance for structured logging
    """
    return structlog.get_logger(name)
