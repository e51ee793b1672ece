"""Pet domain entities.

``Pet`` is a plain mutable dataclass. Storage assigns ``id`` on the first
save and bumps ``version`` on every save; ``identification_number`` is the
stable business key used to correlate log events.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any
from uuid import UUID

from petclinic.core.errors import ValidationError


@dataclass
class PetType:
    name: str
    id: UUID | None = None


@dataclass
class Owner:
    first_name: str
    last_name: str
    id: UUID | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass
class Pet:
    """A pet record."""

    identification_number: str
    name: str
    birthdate: date | None = None
    type: PetType | None = None
    owner: Owner | None = None
    id: UUID | None = None
    version: int = 0

    def validate(self) -> None:
        """Raise ValidationError if required fields are blank."""
        if not self.identification_number or not self.identification_number.strip():
            raise ValidationError(
                "Pet identification number is required", field="identification_number"
            )
        if not self.name or not self.name.strip():
            raise ValidationError("Pet name is required", field="name")
        if self.birthdate is not None and self.birthdate > date.today():
            raise ValidationError("Pet birthdate lies in the future", field="birthdate")

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id) if self.id else None,
            "identification_number": self.identification_number,
            "name": self.name,
            "birthdate": self.birthdate.isoformat() if self.birthdate else None,
            "type": self.type.name if self.type else None,
            "owner": self.owner.full_name if self.owner else None,
            "version": self.version,
        }

    def __str__(self) -> str:
        return f"Pet(name={self.name!r}, identification_number={self.identification_number!r})"
