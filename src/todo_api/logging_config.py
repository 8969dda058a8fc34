"""
Structured logging setup: structlog with contextvars so request ids bound by
the middleware show up on every log line.
- console format: coloured key/value output for development
- json format: one JSON object per line for log shippers
"""
from __future__ import annotations

import logging
import sys

import structlog

from .settings import Settings


def setup_logging(settings: Settings) -> None:
    """Configure structlog and the stdlib root logger from settings."""
    level = getattr(logging, settings.log_level, logging.INFO)

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if settings.log_format == "json":
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )

    # uvicorn and other stdlib loggers go to stdout at the same level
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )
