"""Tests for petclinic.views.pet_detail."""

import uuid

from petclinic.data.memory import InMemoryDataManager
from petclinic.service.pet_service import PetService
from petclinic.views.pet_detail import PetDetailView
from tests._support.fakes import RecordingDataManager


class FixedStates:
    def __init__(self, new: bool) -> None:
        self.new = new

    def is_new(self, entity: object) -> bool:
        return self.new


class TestSaveDelegate:
    def test_new_pet_goes_through_save_pet(self, log_output, pet):
        view = PetDetailView(PetService(InMemoryDataManager()))

        saved = view.save_delegate(pet)

        assert len(saved) == 1
        assert saved[0].id is not None
        assert [e["event"] for e in log_output.entries] == ["pet_saved"]

    def test_existing_pet_goes_through_update_pet(self, log_output, pet):
        store = InMemoryDataManager()
        view = PetDetailView(PetService(store))
        saved = view.save_delegate(pet)[0]

        updated = view.save_delegate(saved)

        assert updated[0].version == 2
        assert [e["event"] for e in log_output.entries][-2:] == [
            "pet_update_started",
            "pet_updated",
        ]

    def test_failure_returns_empty_list(self, log_output, pet):
        view = PetDetailView(
            PetService(RecordingDataManager(error=ConnectionError("connection refused"))),
            entity_states=FixedStates(new=False),
        )

        assert view.save_delegate(pet) == []

    def test_custom_entity_states_are_used(self, log_output, pet):
        pet.id = uuid.uuid4()
        store = RecordingDataManager()
        view = PetDetailView(PetService(store), entity_states=FixedStates(new=True))

        view.save_delegate(pet)

        assert [e["event"] for e in log_output.entries] == ["pet_saved"]
