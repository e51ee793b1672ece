"""Tests for petclinic.data.sqlite."""

import sqlite3
import uuid
from dataclasses import replace
from datetime import date

import pytest

from petclinic.core.errors import DuplicateEntityError, EntityNotFoundError, PersistenceError
from petclinic.data.sqlite import SqliteDataManager
from petclinic.domain.pet import Pet


@pytest.fixture
def store():
    manager = SqliteDataManager(":memory:")
    yield manager
    manager.close()


class TestSqliteDataManager:
    def test_save_new_round_trips_fields(self, store, pet):
        pet.birthdate = date(2020, 5, 1)

        saved = store.save(pet)
        loaded = store.load(saved.id)

        assert loaded == saved
        assert loaded.type.name == "Dog"
        assert loaded.owner.full_name == "Ash Ketchum"
        assert loaded.birthdate == date(2020, 5, 1)
        assert loaded.version == 1

    def test_update(self, store, pet):
        saved = store.save(pet)
        saved.name = "Rex II"

        updated = store.save(saved)

        assert updated.version == 2
        assert store.find_by_identification_number("42").name == "Rex II"

    def test_stale_version_raises(self, store, pet):
        saved = store.save(pet)
        store.save(replace(saved, name="first"))

        with pytest.raises(PersistenceError, match="concurrently"):
            store.save(replace(saved, name="second"))

    def test_unknown_id_raises(self, store, pet):
        pet.id = uuid.uuid4()
        pet.version = 1
        with pytest.raises(EntityNotFoundError):
            store.save(pet)

    def test_duplicate_identification_number_raises(self, store, pet):
        store.save(pet)
        with pytest.raises(DuplicateEntityError, match="42") as exc_info:
            store.save(Pet(identification_number="42", name="Other"))
        assert isinstance(exc_info.value.cause, sqlite3.IntegrityError)
        assert len(store.list()) == 1

    def test_update_to_taken_identification_number_raises(self, store, pet):
        store.save(pet)
        other = store.save(Pet(identification_number="43", name="Other"))
        other.identification_number = "42"

        with pytest.raises(DuplicateEntityError):
            store.save(other)
        assert store.load(other.id).identification_number == "43"

    def test_file_database_persists(self, tmp_path, pet):
        path = tmp_path / "nested" / "pets.db"
        first = SqliteDataManager(path)
        first.save(pet)
        first.close()

        second = SqliteDataManager(path)
        try:
            assert [p.name for p in second.list()] == ["Rex"]
        finally:
            second.close()
