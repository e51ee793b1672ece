"""Settings for petclinic.

``PetclinicSettings`` reads its values from ``PETCLINIC_*`` environment
variables and an optional ``.env`` file.

Manifesto:
    Configuration should be explicit, validated, and environment-driven.

    - **Pydantic validation:** Type-checked at startup, not runtime
    - **Environment-driven:** Reads from env vars and .env files
    - **Sensible defaults:** Works out of the box for development

Examples:
    >>> from petclinic.core.settings import get_settings
    >>> settings = get_settings()
    >>> settings.log_level
    'INFO'

Tags:
    settings, configuration, pydantic, environment, petclinic
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from petclinic.core.errors import ConfigError


class PetclinicSettings(BaseSettings):
    """Settings shared by the service, the CLI and the reference stores.

    Fields
    ──────
    log_level     : Structlog log level
    log_format    : ``console`` or ``json``
    service_name  : Value of the ``service`` field on every log event
    database_path : SQLite file used by the CLI
    """

    model_config = SettingsConfigDict(
        env_prefix="PETCLINIC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"
    service_name: str = "petclinic"

    # ── Storage ──────────────────────────────────────────────────
    database_path: Path = Field(
        default_factory=lambda: Path.home() / ".petclinic" / "petclinic.db",
        description="SQLite database used by the CLI",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {value}")
        return level

    @property
    def json_logs(self) -> bool:
        return self.log_format == "json"


@lru_cache(maxsize=1)
def get_settings() -> PetclinicSettings:
    """Return the process-wide settings (cached).

    Raises:
        ConfigError: If a PETCLINIC_* value fails validation
    """
    try:
        return PetclinicSettings()
    except ValidationError as e:
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
        raise ConfigError(
            f"Invalid settings: {', '.join(fields)}", context={"fields": fields}, cause=e
        ) from e


__all__ = ["PetclinicSettings", "get_settings"]
