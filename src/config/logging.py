"""
Structured logging configuration using structlog.

Every event carries the request id and caller bound by the logging
middleware. Output is JSON lines unless ``LOG_FORMAT=console`` or the
app runs in development with no format set.
"""

import logging
import sys
from decimal import Decimal
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from src.config.settings import Settings, get_settings

QUIET_LOGGERS = ("aiosqlite", "fontTools", "fpdf", "uvicorn.access")


def add_service(logger: logging.Logger, method_name: str, event_dict: EventDict) -> EventDict:
    """Stamp events with the service name, version and environment."""
    settings = get_settings()
    event_dict.setdefault("service", settings.app_name)
    event_dict.setdefault("version", settings.app_version)
    event_dict.setdefault("environment", settings.environment)
    return event_dict


def stringify_decimals(logger: logging.Logger, method_name: str, event_dict: EventDict) -> EventDict:
    """Render money as plain strings instead of ``Decimal('...')`` reprs."""
    for key, value in event_dict.items():
        if isinstance(value, Decimal):
            event_dict[key] = str(value)
    return event_dict


def resolve_format(settings: Settings) -> str:
    """``console`` or ``json``, falling back on the environment."""
    if settings.log_format:
        return settings.log_format
    return "console" if settings.environment == "development" else "json"


def build_processors(log_format: str) -> list[Processor]:
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_service,
        stringify_decimals,
    ]
    if log_format == "json":
        processors += [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))
    return processors


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog and the stdlib root logger."""
    settings = settings or get_settings()

    structlog.configure(
        processors=build_processors(resolve_format(settings)),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level),
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
