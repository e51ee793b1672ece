"""Domain entities."""

from petclinic.domain.pet import Owner, Pet, PetType

__all__ = ["Pet", "PetType", "Owner"]
