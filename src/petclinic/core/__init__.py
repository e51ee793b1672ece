"""Petclinic Core -- errors, results, logging, settings and protocols.

Architecture::

    errors.py      Structured error hierarchy (PetclinicError, PersistenceError)
    result.py      Result[T] envelope (Ok / Err / try_result)
    logging.py     structlog configuration + correlation context (LogContext)
    settings.py    PetclinicSettings (pydantic-settings, PETCLINIC_ prefix)
    protocols.py   DataManager / EntityStates collaborator contracts
"""

from petclinic.core.errors import (
    ConfigError,
    DuplicateEntityError,
    EntityNotFoundError,
    ErrorCategory,
    PersistenceError,
    PetclinicError,
    ValidationError,
)
from petclinic.core.logging import (
    LogContext,
    bind_context,
    clear_context,
    configure_logging,
    get_context,
    get_logger,
    unbind_context,
)
from petclinic.core.protocols import DataManager, EntityStates
from petclinic.core.result import Err, Ok, Result, from_optional, try_result

__all__ = [
    # errors
    "ErrorCategory",
    "PetclinicError",
    "PersistenceError",
    "EntityNotFoundError",
    "DuplicateEntityError",
    "ValidationError",
    "ConfigError",
    # result
    "Ok",
    "Err",
    "Result",
    "try_result",
    "from_optional",
    # logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "unbind_context",
    "get_context",
    "clear_context",
    "LogContext",
    # protocols
    "DataManager",
    "EntityStates",
]
