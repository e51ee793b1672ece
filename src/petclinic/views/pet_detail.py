"""Pet detail view save handling.

The detail view decides whether the edited pet is new and routes it to
``PetService.save_pet`` or ``PetService.update_pet``. It only branches on
presence of the result; the cause of a failure lives in the logs.
"""

from __future__ import annotations

from petclinic.core.protocols import EntityStates
from petclinic.data.states import DefaultEntityStates
from petclinic.domain.pet import Pet
from petclinic.service.pet_service import PetService


class PetDetailView:
    """Save delegate of the pet detail screen."""

    def __init__(self, pet_service: PetService, entity_states: EntityStates | None = None) -> None:
        self.pet_service = pet_service
        self.entity_states = entity_states or DefaultEntityStates()

    def save_delegate(self, pet: Pet) -> list[Pet]:
        """Save *pet* and return the saved entities (empty if nothing was saved)."""
        if self.entity_states.is_new(pet):
            result = self.pet_service.save_pet(pet)
        else:
            result = self.pet_service.update_pet(pet)

        saved = result.to_optional()
        return [saved] if saved is not None else []


__all__ = ["PetDetailView"]
