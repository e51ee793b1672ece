"""Application services."""

from petclinic.service.pet_service import PET_ID_KEY, PetService

__all__ = ["PetService", "PET_ID_KEY"]
