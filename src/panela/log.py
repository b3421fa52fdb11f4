"""Structured logging setup (structlog over the standard logging module)."""

import logging
import sys

import structlog
from structlog.types import Processor

from panela.config import Settings


def get_processors(settings: Settings) -> list[Processor]:
    """structlog processor chain; JSON in production, console otherwise."""
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if settings.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=settings.debug))
    return processors


def configure_logging(settings: Settings) -> None:
    """Configure logging once at application startup."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=settings.log_level.upper(),
    )
    structlog.configure(
        processors=get_processors(settings),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Logger for a module, e.g. get_logger(__name__)."""
    return structlog.get_logger(name)
