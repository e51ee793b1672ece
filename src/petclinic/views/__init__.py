"""Callers of the pet service."""

from petclinic.views.pet_detail import PetDetailView

__all__ = ["PetDetailView"]
