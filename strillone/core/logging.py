"""Structured logging for the relay and the server running it.

Application code logs through structlog; records from the standard library
(uvicorn in particular, which is started without its own log config) are
rendered by the same ``ProcessorFormatter`` so every line has one shape.
"""

import logging
import sys
from typing import Optional

import structlog
from structlog.typing import EventDict, Processor

from strillone.core.config import Settings, get_settings

# Server loggers that would otherwise print through their own handlers.
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

_handler: Optional[logging.Handler] = None


def app_context(settings: Settings) -> Processor:
    """Processor adding the application name and environment to entries."""

    def add_app_context(logger: logging.Logger, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict["app"] = settings.app_name
        event_dict["env"] = settings.app_env
        return event_dict

    return add_app_context


def build_formatter(settings: Settings, shared_processors: list[Processor]) -> logging.Formatter:
    """Formatter rendering both structlog and plain stdlib records."""
    if settings.debug:
        renderers: list[Processor] = [structlog.dev.ConsoleRenderer(colors=True)]
    else:
        renderers = [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *renderers],
    )


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Configure logging for the application.

    Safe to call more than once; the handler installed by a previous call
    is replaced rather than stacked.

    Args:
        settings: Settings providing level, debug mode and app context
    """
    global _handler
    settings = settings or get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        app_context(settings),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter(settings, shared_processors))

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    root.addHandler(handler)
    root.setLevel(log_level)
    _handler = handler

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],  # type: ignore
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)
