"""
Root Typer application for the petclinic CLI.
"""

from __future__ import annotations

import typer
from typer import Typer

from petclinic.cli.utils import fail
from petclinic.core.errors import ConfigError
from petclinic.core.logging import configure_logging
from petclinic.core.settings import get_settings

app = Typer(
    name="petclinic",
    help="petclinic — pet record management.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from petclinic import __version__

        typer.echo(f"petclinic {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Override PETCLINIC_LOG_LEVEL."),
) -> None:
    """petclinic CLI — create, update and list pets."""
    try:
        settings = get_settings()
    except ConfigError as e:
        fail(e.message)
    level = (log_level or settings.log_level).upper()
    if level not in _LOG_LEVELS:
        raise typer.BadParameter(f"Unknown log level {log_level!r}", param_hint="--log-level")
    configure_logging(
        level=level,
        json_format=settings.json_logs,
        service=settings.service_name,
        force=True,
    )


# ── Sub-command registration ─────────────────────────────────────────────

from petclinic.cli.config import app as config_app  # noqa: E402
from petclinic.cli.pets import app as pets_app  # noqa: E402

app.add_typer(pets_app, name="pets", help="Pet records.")
app.add_typer(config_app, name="config", help="Configuration.")


if __name__ == "__main__":
    app()
