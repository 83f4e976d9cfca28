"""Mini README: Centralised configuration models and helpers for Ledgerlite.

Structure:
    * LedgerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read environment variables, choose where the
    transaction snapshot lives, and specify service ports. The configuration
    is cached so the cost of validation is incurred only once per process.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class LedgerSettings(BaseSettings):
    """Runtime configuration for the Ledgerlite service and CLI."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    data_directory: Path = Field(
        Path("data"),
        description="Directory holding the file-backed blob store.",
    )
    storage_key: str = Field(
        "transactions",
        description="Blob store key under which the transaction snapshot is saved.",
        pattern=r"^[A-Za-z0-9_.-]+$",
    )
    date_format: str = Field(
        "%m/%d/%Y",
        description="strftime pattern used to stamp the display date of new entries.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level applied by the CLI and web application.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the HTTP service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Default port the HTTP service exposes.",
        ge=1,
        le=65535,
    )

    class Config:
        env_prefix = "LEDGERLITE_"
        env_file = ".env"
        case_sensitive = False

    @validator("data_directory", pre=True)
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Ensure configured paths expand user directories and exist."""

        path = Path(value).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @validator("log_level")
    def _normalise_level(cls, value: str) -> str:
        """Accept any casing for the logging level name."""

        return value.strip().upper()


@lru_cache()
def get_settings() -> LedgerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return LedgerSettings()
