"""
CLI: ``petclinic pets`` — create, update and list pet records.
"""

from __future__ import annotations

from datetime import date

import typer

from petclinic.cli.utils import fail, make_view, open_store, output_pets
from petclinic.domain.pet import Owner, Pet, PetType

app = typer.Typer(no_args_is_help=True)


def _parse_date(value: str | None) -> date | None:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise typer.BadParameter(f"Expected YYYY-MM-DD, got {value!r}") from e


def _parse_owner(value: str | None) -> Owner | None:
    if value is None:
        return None
    first, _, last = value.strip().partition(" ")
    return Owner(first_name=first, last_name=last)


@app.command("create")
def create_pet(
    identification_number: str = typer.Option(..., "--identification-number", "-i"),
    name: str = typer.Option(..., "--name", "-n"),
    pet_type: str | None = typer.Option(None, "--type", "-t"),
    birthdate: str | None = typer.Option(None, "--birthdate", "-b", help="YYYY-MM-DD"),
    owner: str | None = typer.Option(None, "--owner", "-o", help='"First Last"'),
    database: str | None = typer.Option(None, "--database", "-d"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Create a new pet."""
    pet = Pet(
        identification_number=identification_number,
        name=name,
        birthdate=_parse_date(birthdate),
        type=PetType(pet_type) if pet_type else None,
        owner=_parse_owner(owner),
    )
    store = open_store(database)
    try:
        saved = make_view(store).save_delegate(pet)
    finally:
        store.close()

    if not saved:
        fail("Pet could not be saved. See logs for details.")
    output_pets(saved, as_json=json_out, title="Created")


@app.command("update")
def update_pet(
    identification_number: str = typer.Argument(..., help="Identification number"),
    name: str | None = typer.Option(None, "--name", "-n"),
    pet_type: str | None = typer.Option(None, "--type", "-t"),
    birthdate: str | None = typer.Option(None, "--birthdate", "-b", help="YYYY-MM-DD"),
    owner: str | None = typer.Option(None, "--owner", "-o", help='"First Last"'),
    database: str | None = typer.Option(None, "--database", "-d"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Update an existing pet."""
    store = open_store(database)
    try:
        pet = store.find_by_identification_number(identification_number)
        if pet is None:
            fail(f"No pet with identification number {identification_number!r}")

        if name is not None:
            pet.name = name
        if pet_type is not None:
            pet.type = PetType(pet_type)
        if birthdate is not None:
            pet.birthdate = _parse_date(birthdate)
        if owner is not None:
            pet.owner = _parse_owner(owner)

        saved = make_view(store).save_delegate(pet)
    finally:
        store.close()

    if not saved:
        fail("Pet could not be updated. See logs for details.")
    output_pets(saved, as_json=json_out, title="Updated")


@app.command("list")
def list_pets(
    database: str | None = typer.Option(None, "--database", "-d"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """List all pets."""
    store = open_store(database)
    try:
        pets = store.list()
    finally:
        store.close()
    output_pets(pets, as_json=json_out, title="Pets")
