"""Application settings and configuration."""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from healthreport.core.types import DosagePolicy


class DatabaseSettings(BaseModel):
    """Store connection configuration."""

    path: str = "healthcare.db"
    query_timeout: float | None = Field(default=30.0, gt=0)
    busy_timeout: float = Field(default=5.0, ge=0)


class ReportSettings(BaseModel):
    """Defaults for report queries."""

    dosage_policy: DosagePolicy = DosagePolicy.ZERO
    recent_window_days: int = Field(default=30, ge=0)
    top_patients_limit: int = Field(default=10, ge=0)


class Settings(BaseSettings):
    """Application configuration.

    Settings are loaded from ``HEALTHREPORT_``-prefixed environment variables
    or a .env file, e.g. ``HEALTHREPORT_DATABASE__PATH=clinic.db``.
    """

    model_config = SettingsConfigDict(
        env_prefix="HEALTHREPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    # Store
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)

    # Report defaults
    reports: ReportSettings = Field(default_factory=ReportSettings)

    # Logging
    log_level: str = "INFO"

    def __init__(self, **data: Any) -> None:
        """Initialize settings with environment variable overrides."""
        super().__init__(**data)
        self._load_env_overrides()

    def _load_env_overrides(self) -> None:
        """Load short-form environment variable overrides."""
        if path := os.getenv("HEALTHCARE_DB"):
            self.database.path = path
