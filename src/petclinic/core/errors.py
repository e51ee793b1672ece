"""
Error hierarchy for petclinic.

Provides a small, structured exception hierarchy so that every failure the
package produces carries a category, an optional cause and free-form context
that can be dropped straight into a structured log event.

Manifesto:
    - **Single base class:** All petclinic errors inherit from PetclinicError
    - **Error chaining:** The original exception is kept as ``cause`` and
      ``__cause__`` so tracebacks stay intact
    - **Serialization-ready:** ``to_dict()`` for logging/JSON
    - **No classification at the service boundary:** the service only ever
      produces ``PersistenceError``; finer categories belong to collaborators

Architecture:
    ::

        PetclinicError (INTERNAL)
        ├── PersistenceError (PERSISTENCE)
        │   ├── EntityNotFoundError
        │   └── DuplicateEntityError
        ├── ValidationError (VALIDATION)
        └── ConfigError (CONFIG)

Examples:
    >>> error = PersistenceError("Pet could not be saved", cause=OSError("disk full"))
    >>> error.category
    <ErrorCategory.PERSISTENCE: 'PERSISTENCE'>
    >>> error.to_dict()["cause"]
    'disk full'

Tags:
    exception, error-hierarchy, error-context, petclinic
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Coarse classification of errors for logging and routing."""

    PERSISTENCE = "PERSISTENCE"   # Storage did not complete the save
    VALIDATION = "VALIDATION"     # Entity failed a field check
    CONFIG = "CONFIG"             # Missing or invalid settings
    INTERNAL = "INTERNAL"         # Bugs, unexpected state
    UNKNOWN = "UNKNOWN"


class PetclinicError(Exception):
    """
    Base exception for all petclinic errors.

    Every instance carries:
    - **message:** human readable description
    - **category:** ErrorCategory used for classification
    - **cause:** optional underlying exception (also set as ``__cause__``)
    - **context:** dict of extra metadata for structured logs

    Subclasses set ``default_category``.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context: dict[str, Any] = dict(context or {})
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> PetclinicError:
        """
        Add context to this error (fluent API).

        Usage:
            raise PersistenceError("Failed").with_context(pet_id="42")
        """
        self.context.update(kwargs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        if self.context:
            result["context"] = dict(self.context)
        if self.cause is not None:
            result["cause"] = str(self.cause)
            result["cause_type"] = type(self.cause).__name__
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


class PersistenceError(PetclinicError):
    """The persistence collaborator did not complete the save."""

    default_category = ErrorCategory.PERSISTENCE


class EntityNotFoundError(PersistenceError):
    """An update targeted an entity the store does not hold."""

    def __init__(self, entity_id: Any, **kwargs: Any):
        super().__init__(f"Entity not found: {entity_id}", **kwargs)
        self.entity_id = entity_id


class DuplicateEntityError(PersistenceError):
    """Another stored entity already uses the same identification number."""

    def __init__(self, identification_number: str, **kwargs: Any):
        super().__init__(f"Duplicate identification number: {identification_number}", **kwargs)
        self.identification_number = identification_number


class ValidationError(PetclinicError):
    """Entity field validation failed."""

    default_category = ErrorCategory.VALIDATION

    def __init__(self, message: str, *, field: str | None = None, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.field = field
        if field is not None:
            self.context.setdefault("field", field)


class ConfigError(PetclinicError):
    """Configuration error."""

    default_category = ErrorCategory.CONFIG


__all__ = [
    "ErrorCategory",
    "PetclinicError",
    "PersistenceError",
    "EntityNotFoundError",
    "DuplicateEntityError",
    "ValidationError",
    "ConfigError",
]
