"""
Structural protocols for the collaborators of the pet service.

Protocols define contracts without inheritance: any object with a matching
``save`` works as a data manager, which keeps the service decoupled from the
storage that actually persists pets and lets tests pass plain fakes.

Architecture:
    ::

        protocols.py
        ├── DataManager    — save(entity) -> persisted entity
        └── EntityStates   — is_new(entity) -> bool

    Consumers:
        service/pet_service.py, views/pet_detail.py
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

E = TypeVar("E")


@runtime_checkable
class DataManager(Protocol):
    """Persistence collaborator.

    ``save`` persists the entity and returns the persisted form, which may
    differ from the argument (generated id, bumped version). It may raise
    any exception on failure.
    """

    def save(self, entity: E) -> E: ...


@runtime_checkable
class EntityStates(Protocol):
    """Answers whether an entity has been persisted before."""

    def is_new(self, entity: object) -> bool: ...


__all__ = ["DataManager", "EntityStates"]
