"""Configuration models.

All sections have defaults, so an empty or missing config file still
produces a usable ``AppConfig``.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class StorageConfig(BaseModel):
    """Storage configuration."""

    db_path: str | None = Field(
        default=None, description="SQLite file path (default: user data dir)"
    )

    @field_validator("db_path")
    @classmethod
    def validate_db_path(cls, v: str | None) -> str | None:
        if v is None:
            return None
        if not v.strip():
            raise ValueError("db_path cannot be empty")
        return v.strip()


class OutputConfig(BaseModel):
    """Output configuration."""

    format: Literal["pretty", "table", "json", "yaml"] = Field(default="pretty")
    color: bool = Field(default=True)


class UIConfig(BaseModel):
    """UI configuration."""

    date_format: str = Field(default="%Y-%m-%d")
    confirm_changes: bool = Field(default=True)
    warn_past_deadline: bool = Field(default=True)


class AppConfig(BaseModel):
    """Main TaskDesk configuration"""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
