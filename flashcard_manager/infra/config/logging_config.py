"""
Structlog configuration for the flashcard service.

Every event carries the service name and environment. Request handling binds
request_id/path/method (see RequestContextMiddleware) and each command binds
its operation name, so a single line can be traced back to the RPC that
produced it.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

import structlog

RENDERERS = ("json", "console")

# Library loggers and the level they run at unless DEBUG is on
_LIBRARY_LEVELS = {
    "uvicorn.access": logging.WARNING,
    "aiosqlite": logging.WARNING,
    "asyncio": logging.WARNING,
}


def add_service_context(service: str, environment: str):
    """Processor stamping service and environment on every event."""

    def processor(logger, method_name: str, event_dict: dict) -> dict:
        event_dict.setdefault("service", service)
        event_dict.setdefault("environment", environment)
        return event_dict

    return processor


def build_renderer(log_format: str):
    fmt = log_format.lower()
    if fmt not in RENDERERS:
        raise ValueError(f"LOG_FORMAT must be one of {RENDERERS}, got {log_format!r}")
    if fmt == "json":
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer()


def setup_logging(
    log_level: Optional[str] = None, log_format: Optional[str] = None
) -> None:
    """Configure structlog and the stdlib loggers the service depends on.

    Args:
        log_level: Level name overriding LOG_LEVEL.
        log_format: "json" or "console", overriding LOG_FORMAT.
    """
    from flashcard_manager.infra.config.settings import get_settings

    settings = get_settings()
    level = getattr(logging, (log_level or settings.log_level).upper(), logging.INFO)

    logging.basicConfig(level=level)
    for name, library_level in _LIBRARY_LEVELS.items():
        logging.getLogger(name).setLevel(logging.DEBUG if settings.debug else library_level)
    # SQL echo is controlled by DATABASE_ECHO, not by the service log level
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug_sql else logging.WARNING
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            add_service_context(settings.app_name, settings.environment),
            structlog.processors.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            build_renderer(log_format or settings.log_format),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> Any:
    return structlog.get_logger(name) if name else structlog.get_logger()


def bind_context(**kwargs) -> None:
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


@contextmanager
def operation_context(operation: str, **fields: Any) -> Iterator[None]:
    """Bind the command name and entity ids for the duration of one command."""
    with structlog.contextvars.bound_contextvars(operation=operation, **fields):
        yield
