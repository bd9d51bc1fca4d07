"""Configuration models for TaskVault.

The configuration selects the storage backend and controls how the CLI
renders output and how verbose the log file is.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class StorageConfig(BaseModel):
    """Storage backend configuration."""

    backend: Literal["sqlite", "memory"] = Field(default="sqlite")
    path: str | None = Field(
        default=None, description="SQLite database path (None = data dir default)"
    )

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str | None) -> str | None:
        """Treat blank paths as unset."""
        if v is None or not v.strip():
            return None
        return v.strip()


class OutputConfig(BaseModel):
    """Output configuration."""

    format: Literal["table", "json"] = Field(default="table")
    color: bool = Field(default=True)


class LoggingConfig(BaseModel):
    """Log file configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")


class AppConfig(BaseModel):
    """Main TaskVault configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
