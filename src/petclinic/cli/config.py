"""
CLI: ``petclinic config`` — configuration inspection.
"""

from __future__ import annotations

import typer
from rich.table import Table

from petclinic.cli.utils import console

app = typer.Typer(no_args_is_help=True)

_FORMATS = ("table", "json", "env")


@app.command("show")
def show_config(
    format: str = typer.Option("table", "--format", "-f", help="Output format: table, json, env"),
) -> None:
    """Show current configuration."""
    if format not in _FORMATS:
        raise typer.BadParameter(
            f"Unknown format {format!r}, expected one of: {', '.join(_FORMATS)}",
            param_hint="--format",
        )

    from petclinic.core.settings import get_settings

    settings = get_settings()

    if format == "json":
        console.print_json(settings.model_dump_json())
        return

    if format == "env":
        for key, value in sorted(settings.model_dump().items()):
            console.print(f"PETCLINIC_{key.upper()}={value}")
        return

    table = Table(title="Settings")
    table.add_column("Setting")
    table.add_column("Value")
    for key, value in sorted(settings.model_dump().items()):
        table.add_row(key, str(value))
    console.print(table)
