"""In-memory data manager.

Reference implementation of the ``DataManager`` protocol used by tests and
examples. Saved pets are deep-copied on the way in and on the way out, so the
returned persisted form is a distinct object from the argument.
"""

from __future__ import annotations

import copy
import threading
import uuid
from uuid import UUID

from petclinic.core.errors import DuplicateEntityError, EntityNotFoundError
from petclinic.domain.pet import Pet


class InMemoryDataManager:
    """Dict-backed pet store."""

    def __init__(self) -> None:
        self._pets: dict[UUID, Pet] = {}
        self._lock = threading.Lock()

    def save(self, pet: Pet) -> Pet:
        """Persist *pet* and return the persisted copy.

        New pets (``id is None``) get a fresh UUID. Every save bumps
        ``version``. Updating an unknown id raises EntityNotFoundError, reusing
        another pet's identification number raises DuplicateEntityError.
        """
        pet.validate()
        stored = copy.deepcopy(pet)
        with self._lock:
            if stored.id is None:
                stored.id = uuid.uuid4()
            elif stored.id not in self._pets:
                raise EntityNotFoundError(stored.id)
            if any(
                p.identification_number == stored.identification_number and p.id != stored.id
                for p in self._pets.values()
            ):
                raise DuplicateEntityError(stored.identification_number)
            stored.version += 1
            self._pets[stored.id] = stored
        return copy.deepcopy(stored)

    def load(self, pet_id: UUID) -> Pet | None:
        with self._lock:
            pet = self._pets.get(pet_id)
        return copy.deepcopy(pet) if pet is not None else None

    def list(self) -> list[Pet]:
        with self._lock:
            pets = list(self._pets.values())
        return [copy.deepcopy(p) for p in sorted(pets, key=lambda p: p.identification_number)]

    def __len__(self) -> int:
        with self._lock:
            return len(self._pets)


__all__ = ["InMemoryDataManager"]
