"""
Operation result envelope.

A persistence call either hands back the persisted entity or it does not.
``Result[T]`` makes that explicit: ``Ok[T]`` wraps the value, ``Err[T]`` is
the empty result and keeps the contained error so callers *can* inspect the
cause, while callers that only care about presence treat every ``Err`` the
same way.

Manifesto:
    - **Explicit over Implicit:** No hidden exceptions that callers might miss
    - **Presence first:** ``is_ok()`` / ``to_optional()`` answer "was it saved?"
    - **Cause preserved:** ``Err.error`` keeps the detail that was logged

Architecture:
    ::

        Result[T] = Ok[T] | Err[T]

        Ok[T]                     Err[T]
        • value: T                • error: Exception
        • map() / flat_map()      • map_err()
        • unwrap()                • unwrap() raises error
        • to_optional() -> value  • to_optional() -> None

Usage:
    from petclinic.core.result import Ok, Err, Result

    match pet_service.save_pet(pet):
        case Ok(saved):
            show(saved)
        case Err():
            notify("Pet could not be saved")

Tags:
    result-pattern, error-handling, optional, petclinic
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from petclinic.core.errors import PetclinicError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """
    Successful result containing a value.

    Examples:
        >>> Ok(42).unwrap()
        42
        >>> Ok(10).map(lambda x: x * 2).unwrap()
        20
        >>> Ok("rex").to_optional()
        'rex'
    """

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Get the value. Safe for Ok."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, f: Callable[[Exception], T]) -> T:
        return self.value

    def to_optional(self) -> T | None:
        """Return the value (the non-empty optional view)."""
        return self.value

    def map(self, f: Callable[[T], U]) -> Result[U]:
        """Transform the value if Ok."""
        return Ok(f(self.value))

    def flat_map(self, f: Callable[[T], Result[U]]) -> Result[U]:
        """Chain to another Result-returning function."""
        return f(self.value)

    def map_err(self, f: Callable[[Exception], Exception]) -> Result[T]:
        return self

    def inspect(self, f: Callable[[T], None]) -> Result[T]:
        """Call f with value for side effects, return self."""
        f(self.value)
        return self

    def inspect_err(self, f: Callable[[Exception], None]) -> Result[T]:
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"ok": True, "value": self.value}

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[T]):
    """
    Failed (empty) result containing the error.

    map() and flat_map() pass the Err through unchanged; unwrap() raises the
    contained error.

    Examples:
        >>> err = Err(ValueError("connection refused"))
        >>> err.is_err()
        True
        >>> err.unwrap_or("default")
        'default'
        >>> err.to_optional() is None
        True
    """

    error: Exception

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> T:
        """Raise the error. Use only when you're sure it's Ok."""
        raise self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, f: Callable[[Exception], T]) -> T:
        """Call f with error to get value."""
        return f(self.error)

    def to_optional(self) -> T | None:
        """Return None (the empty optional view)."""
        return None

    def map(self, f: Callable[[T], U]) -> Result[U]:
        return Err(self.error)

    def flat_map(self, f: Callable[[T], Result[U]]) -> Result[U]:
        return Err(self.error)

    def map_err(self, f: Callable[[Exception], Exception]) -> Result[T]:
        """Transform the error."""
        return Err(f(self.error))

    def inspect(self, f: Callable[[T], None]) -> Result[T]:
        return self

    def inspect_err(self, f: Callable[[Exception], None]) -> Result[T]:
        """Call f with error for side effects, return self."""
        f(self.error)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        if isinstance(self.error, PetclinicError):
            return {"ok": False, "error": self.error.to_dict()}
        return {
            "ok": False,
            "error": {
                "error_type": type(self.error).__name__,
                "message": str(self.error),
            },
        }

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


# Type alias for Result
Result = Ok[T] | Err[T]


def try_result(f: Callable[[], T]) -> Result[T]:
    """
    Execute a zero-argument function and wrap the outcome.

    Returns Ok with the return value, or Err with any ``Exception`` raised.

    Example:
        >>> try_result(lambda: int("7")).unwrap()
        7
        >>> try_result(lambda: int("x")).is_err()
        True
    """
    try:
        return Ok(f())
    except Exception as e:
        return Err(e)


def from_optional(value: T | None, error: Exception) -> Result[T]:
    """Convert an optional value to Result: ``None`` becomes ``Err(error)``."""
    if value is None:
        return Err(error)
    return Ok(value)


__all__ = [
    "Ok",
    "Err",
    "Result",
    "try_result",
    "from_optional",
]
