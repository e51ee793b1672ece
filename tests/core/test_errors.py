"""Tests for petclinic.core.errors module."""

from petclinic.core.errors import (
    ConfigError,
    EntityNotFoundError,
    ErrorCategory,
    PersistenceError,
    PetclinicError,
    ValidationError,
)


class TestPetclinicError:
    def test_defaults(self):
        error = PetclinicError("Something went wrong")
        assert error.message == "Something went wrong"
        assert error.category == ErrorCategory.INTERNAL
        assert error.cause is None
        assert error.context == {}

    def test_cause_is_chained(self):
        cause = ConnectionError("connection refused")
        error = PersistenceError("Pet could not be saved", cause=cause)
        assert error.cause is cause
        assert error.__cause__ is cause

    def test_with_context_is_fluent(self):
        error = PersistenceError("Failed").with_context(pet_id="42")
        assert isinstance(error, PersistenceError)
        assert error.context == {"pet_id": "42"}

    def test_to_dict(self):
        error = PersistenceError("Failed", cause=OSError("disk full")).with_context(pet_id="42")
        assert error.to_dict() == {
            "error_type": "PersistenceError",
            "message": "Failed",
            "category": "PERSISTENCE",
            "context": {"pet_id": "42"},
            "cause": "disk full",
            "cause_type": "OSError",
        }

    def test_repr(self):
        assert repr(ConfigError("bad")) == "ConfigError('bad', category=CONFIG)"


class TestSubclasses:
    def test_entity_not_found_is_persistence_error(self):
        error = EntityNotFoundError("abc")
        assert isinstance(error, PersistenceError)
        assert error.entity_id == "abc"
        assert "abc" in str(error)

    def test_validation_error_records_field(self):
        error = ValidationError("Pet name is required", field="name")
        assert error.category == ErrorCategory.VALIDATION
        assert error.field == "name"
        assert error.context == {"field": "name"}

