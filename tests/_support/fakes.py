"""
Fake collaborators for petclinic tests.

Usage::

    from tests._support.fakes import RecordingDataManager, events

    store = RecordingDataManager(error=ConnectionError("connection refused"))
    PetService(store).update_pet(pet)
    assert store.context_during_save == {"pet_id": "42"}
"""

from __future__ import annotations

import threading
from typing import Any

import structlog
from structlog.testing import LogCapture


class RecordingDataManager:
    """Data manager that records calls and the correlation context seen by ``save``.

    Returns ``result`` (or the entity itself) unless ``error`` is set, in
    which case ``error`` is raised.
    """

    def __init__(self, result: Any = None, error: BaseException | None = None) -> None:
        self.result = result
        self.error = error
        self.calls: list[Any] = []
        self.context_during_save: dict[str, Any] = {}

    def save(self, entity: Any) -> Any:
        self.calls.append(entity)
        self.context_during_save = structlog.contextvars.get_contextvars()
        if self.error is not None:
            raise self.error
        return self.result if self.result is not None else entity


class BlockingDataManager:
    """Data manager whose ``save`` waits until ``release`` is set.

    ``entered`` is set once ``save`` has been called, so a test can act
    while the save is in flight.
    """

    def __init__(self, timeout: float = 5.0) -> None:
        self.entered = threading.Event()
        self.release = threading.Event()
        self.timeout = timeout

    def save(self, entity: Any) -> Any:
        self.entered.set()
        if not self.release.wait(self.timeout):
            raise TimeoutError("save was never released")
        return entity


def events(capture: LogCapture, level: str | None = None) -> list[dict[str, Any]]:
    """Return captured entries, optionally filtered by log level."""
    if level is None:
        return list(capture.entries)
    return [e for e in capture.entries if e["log_level"] == level]
