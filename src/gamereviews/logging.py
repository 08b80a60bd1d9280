"""
Structured logging for the Game Reviews API.

Log lines are rendered by structlog: JSON in production, colored console
output in debug. Per-request fields such as ``request_id`` are bound with
structlog's contextvars support and merged into every event logged while the
request is being handled.
"""

import logging
import secrets
import sys

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, get_contextvars


def configure_logging(debug: bool = False, level: str | None = None) -> None:
    """Configure stdlib logging and structlog.

    Args:
        debug: Console rendering and DEBUG level.
        level: Level name for non-debug runs; ``settings.log_level`` when None.
    """
    if debug:
        log_level = logging.DEBUG
    else:
        if level is None:
            from .config import settings

            level = settings.log_level
        log_level = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)

    logging.basicConfig(level=log_level, stream=sys.stdout, format="%(message)s", force=True)

    renderer = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Random 12-character url-safe request id."""
    return secrets.token_urlsafe(9)


def set_request_context(request_id: str | None = None) -> str:
    """Bind a request id (generated when None) to the current context and return it."""
    request_id = request_id or generate_request_id()
    bind_contextvars(request_id=request_id)
    return request_id


def clear_request_context() -> None:
    clear_contextvars()


def get_request_id() -> str | None:
    return get_contextvars().get("request_id")
