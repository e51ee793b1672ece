"""
Structured logging for petclinic.

Provides a standardized structlog configuration plus the correlation context
that ties log events to the entity being worked on.

Manifesto:
    - **Structures:** every event is an event name plus key/value context
    - **Correlates:** values bound with ``bind_context`` / ``LogContext`` are
      merged into every event emitted by the same thread of control
    - **Scopes:** ``LogContext`` guarantees bound values are released when the
      block exits, whichever way it exits
    - **Flexes:** console output for development, JSON for production

Architecture:
    ::

        configure_logging(level="INFO", json_format=True, service="petclinic")

        structlog processor chain:
          1. filter_by_level
          2. merge_contextvars        <- correlation context (pet_id, ...)
          3. add_log_level
          4. add_logger_name
          5. TimeStamper(iso, utc)
          6. StackInfoRenderer
          7. format_exc_info          <- full traceback for error events
          8. add_service_metadata
          9. JSONRenderer | ConsoleRenderer

        Rendered events go through stdlib logging to stderr.

Context scoping:
    Correlation values live in ``contextvars``. A thread sees its own copy of
    the context, so a value bound on one thread is never visible on another.

Examples:
    >>> from petclinic.core.logging import LogContext, configure_logging, get_logger
    >>> configure_logging(level="INFO", json_format=True)
    >>> log = get_logger(__name__)
    >>> with LogContext(pet_id="42"):
    ...     log.info("pet_update_started")   # includes pet_id="42"
    >>> log.info("unrelated_event")          # no pet_id

Tags:
    logging, structlog, contextvars, correlation, petclinic
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from contextvars import Token
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

# Store service name for metadata
_SERVICE_NAME = "petclinic"

# Track if logging has been configured
_configured = False


def _add_service_metadata(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add service-level metadata to all logs."""
    event_dict.setdefault("service", _SERVICE_NAME)
    return event_dict


def configure_logging(
    level: str = "INFO",
    json_format: bool | None = None,
    service: str = "petclinic",
    force: bool = False,
) -> None:
    """Configure structured logging for the application.

    Should be called once at application startup (CLI entry, app factory).
    Subsequent calls are no-ops unless ``force=True``.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: True for JSON, False for console, None for auto (JSON if not tty)
        service: Service name to include in logs
        force: Reconfigure even if already configured
    """
    global _SERVICE_NAME, _configured

    if _configured and not force:
        return

    _SERVICE_NAME = service
    log_level = getattr(logging, level.upper())

    if json_format is None:
        json_format = not sys.stderr.isatty()

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _add_service_metadata,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Configure standard library logging to match
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
        force=True,
    )
    logging.getLogger("petclinic").setLevel(log_level)

    _configured = True


def is_configured() -> bool:
    """Check if logging has been configured."""
    return _configured


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger.

    Args:
        name: Logger name (usually __name__)

    Returns:
        structlog bound logger proxy
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> Mapping[str, Token[Any]]:
    """Bind values into the correlation context of the current thread.

    Returns the tokens needed to restore the previous values, see
    ``reset_context``.

    Example:
        bind_context(pet_id="42")
        logger.info("pet_update_started")  # includes pet_id
    """
    return structlog.contextvars.bind_contextvars(**kwargs)


def reset_context(tokens: Mapping[str, Token[Any]]) -> None:
    """Restore the values that were current before ``bind_context``."""
    structlog.contextvars.reset_contextvars(**tokens)


def unbind_context(*keys: str) -> None:
    """Remove specific keys from the correlation context."""
    structlog.contextvars.unbind_contextvars(*keys)


def get_context() -> dict[str, Any]:
    """Return a copy of the correlation context of the current thread."""
    return structlog.contextvars.get_contextvars()


def clear_context() -> None:
    """Clear all bound context."""
    structlog.contextvars.clear_contextvars()


class LogContext:
    """Scoped correlation context.

    Binds the given values on enter and restores the previous state on exit.
    A key that was not bound before the block is removed again, on normal
    exit and when an exception (of any kind) leaves the block.

    Example:
        with LogContext(pet_id="42"):
            logger.info("pet_update_started")
            logger.info("pet_updated")
        # pet_id no longer bound here
    """

    def __init__(self, **kwargs: Any):
        self._context = kwargs
        self._tokens: Mapping[str, Token[Any]] = {}

    def __enter__(self) -> LogContext:
        self._tokens = bind_context(**self._context)
        return self

    def __exit__(self, *args: Any) -> None:
        reset_context(self._tokens)
        self._tokens = {}

    @property
    def values(self) -> dict[str, Any]:
        return dict(self._context)


__all__ = [
    "configure_logging",
    "is_configured",
    "get_logger",
    "bind_context",
    "reset_context",
    "unbind_context",
    "get_context",
    "clear_context",
    "LogContext",
]
