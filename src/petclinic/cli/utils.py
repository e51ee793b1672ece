"""
CLI utility helpers — output formatting and service wiring.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, NoReturn

import typer
from rich.console import Console
from rich.table import Table

from petclinic.core.settings import get_settings
from petclinic.data.sqlite import SqliteDataManager
from petclinic.service.pet_service import PetService
from petclinic.views.pet_detail import PetDetailView

console = Console()
err_console = Console(stderr=True)


# ── Wiring ───────────────────────────────────────────────────────────────


def open_store(database: str | None = None) -> SqliteDataManager:
    """Open the pet store.  Defaults to ``settings.database_path``."""
    db_path = Path(database) if database else get_settings().database_path
    return SqliteDataManager(db_path)


def make_view(store: SqliteDataManager) -> PetDetailView:
    """Wire store → service → detail view."""
    return PetDetailView(PetService(store))


# ── Output helpers ───────────────────────────────────────────────────────


def output_pets(pets: list[Any], *, as_json: bool = False, title: str = "") -> None:
    """Render pets as a Rich table or JSON."""
    rows = [p.to_dict() for p in pets]

    if as_json:
        console.print_json(json.dumps(rows, default=str))
        return

    if not rows:
        console.print("[dim]No items.[/dim]")
        return

    table = Table(title=title or None, show_lines=False, pad_edge=False)
    for col in rows[0]:
        table.add_column(col, overflow="fold")
    for row in rows:
        table.add_row(*("" if v is None else str(v) for v in row.values()))
    console.print(table)


def fail(message: str) -> NoReturn:
    """Print an error and exit with status 1."""
    err_console.print(f"[bold red]Error[/bold red]: {message}")
    raise typer.Exit(code=1)
