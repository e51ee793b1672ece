"""SQLite data manager.

Persists pets in a single ``pet`` table. Updates use optimistic locking on
the ``version`` column: saving a pet whose version no longer matches the
stored row raises ``PersistenceError``, and a clash on the unique
identification number raises ``DuplicateEntityError``.

Usage::

    from petclinic.data.sqlite import SqliteDataManager

    store = SqliteDataManager("pets.db")
    saved = store.save(Pet(identification_number="42", name="Rex"))
    store.close()
"""

from __future__ import annotations

import sqlite3
import threading
import uuid
from dataclasses import replace
from datetime import date
from pathlib import Path
from typing import Any
from uuid import UUID

from petclinic.core.errors import DuplicateEntityError, EntityNotFoundError, PersistenceError
from petclinic.domain.pet import Owner, Pet, PetType

PET_DDL = """
CREATE TABLE IF NOT EXISTS pet (
    id TEXT PRIMARY KEY,
    identification_number TEXT NOT NULL UNIQUE,
    name TEXT NOT NULL,
    birthdate TEXT,
    type_name TEXT,
    owner_first_name TEXT,
    owner_last_name TEXT,
    version INTEGER NOT NULL
)
"""

_COLUMNS = (
    "id, identification_number, name, birthdate, type_name, "
    "owner_first_name, owner_last_name, version"
)


class SqliteDataManager:
    """``DataManager`` backed by ``sqlite3``.

    Keeps one connection (``check_same_thread=False``) guarded by a lock, so
    the manager can be shared between threads.
    """

    def __init__(self, path: str | Path = ":memory:") -> None:
        if str(path) != ":memory:":
            Path(path).parent.mkdir(parents=True, exist_ok=True)
        self._conn = sqlite3.connect(str(path), check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        self._lock = threading.Lock()
        with self._lock:
            self._conn.execute(PET_DDL)
            self._conn.commit()

    # -- DataManager protocol ----------------------------------------------

    def save(self, pet: Pet) -> Pet:
        pet.validate()
        with self._lock:
            try:
                if pet.id is None:
                    saved = replace(pet, id=uuid.uuid4(), version=1)
                    self._conn.execute(
                        f"INSERT INTO pet ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
                        _to_row(saved),
                    )
                else:
                    saved = replace(pet, version=pet.version + 1)
                    cursor = self._conn.execute(
                        "UPDATE pet SET identification_number = ?, name = ?, birthdate = ?, "
                        "type_name = ?, owner_first_name = ?, owner_last_name = ?, version = ? "
                        "WHERE id = ? AND version = ?",
                        _to_row(saved)[1:] + (str(pet.id), pet.version),
                    )
                    if cursor.rowcount == 0:
                        self._raise_update_conflict(pet)
                self._conn.commit()
            except sqlite3.IntegrityError as e:
                self._conn.rollback()
                raise DuplicateEntityError(pet.identification_number, cause=e) from e
            except BaseException:
                self._conn.rollback()
                raise
        return saved

    # -- queries -----------------------------------------------------------

    def load(self, pet_id: UUID) -> Pet | None:
        with self._lock:
            row = self._conn.execute(
                f"SELECT {_COLUMNS} FROM pet WHERE id = ?", (str(pet_id),)
            ).fetchone()
        return _from_row(row) if row else None

    def find_by_identification_number(self, identification_number: str) -> Pet | None:
        with self._lock:
            row = self._conn.execute(
                f"SELECT {_COLUMNS} FROM pet WHERE identification_number = ?",
                (identification_number,),
            ).fetchone()
        return _from_row(row) if row else None

    def list(self) -> list[Pet]:
        with self._lock:
            rows = self._conn.execute(
                f"SELECT {_COLUMNS} FROM pet ORDER BY identification_number"
            ).fetchall()
        return [_from_row(r) for r in rows]

    def close(self) -> None:
        self._conn.close()

    # -- internals ---------------------------------------------------------

    def _raise_update_conflict(self, pet: Pet) -> None:
        row = self._conn.execute(
            "SELECT version FROM pet WHERE id = ?", (str(pet.id),)
        ).fetchone()
        if row is None:
            raise EntityNotFoundError(pet.id)
        raise PersistenceError(
            "Pet was modified concurrently",
            context={"expected_version": pet.version, "stored_version": row["version"]},
        )


def _to_row(pet: Pet) -> tuple[Any, ...]:
    return (
        str(pet.id),
        pet.identification_number,
        pet.name,
        pet.birthdate.isoformat() if pet.birthdate else None,
        pet.type.name if pet.type else None,
        pet.owner.first_name if pet.owner else None,
        pet.owner.last_name if pet.owner else None,
        pet.version,
    )


def _from_row(row: sqlite3.Row) -> Pet:
    owner = None
    if row["owner_first_name"] is not None or row["owner_last_name"] is not None:
        owner = Owner(row["owner_first_name"] or "", row["owner_last_name"] or "")
    return Pet(
        id=UUID(row["id"]),
        identification_number=row["identification_number"],
        name=row["name"],
        birthdate=date.fromisoformat(row["birthdate"]) if row["birthdate"] else None,
        type=PetType(row["type_name"]) if row["type_name"] else None,
        owner=owner,
        version=row["version"],
    )


__all__ = ["SqliteDataManager", "PET_DDL"]
