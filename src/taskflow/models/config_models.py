"""Configuration models for TaskFlow.

The configuration is stored as JSON under the platform config directory and
validated through these models on load.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

DEFAULT_STORAGE_KEY = "taskflow-tasks"


class StorageConfig(BaseModel):
    """Where and under which key the task list is persisted."""

    data_file: str | None = Field(
        default=None, description="Path of the JSON store file (None = platform default)"
    )
    key: str = Field(default=DEFAULT_STORAGE_KEY, description="Store entry name")

    @field_validator("key")
    @classmethod
    def validate_key(cls, v: str) -> str:
        """Reject blank store keys."""
        if not v or not v.strip():
            raise ValueError("key cannot be empty")
        return v.strip()


class OutputConfig(BaseModel):
    """Output configuration."""

    format: Literal["table", "json", "yaml", "quiet"] = Field(default="table")
    color: bool = Field(default=True)


class AppConfig(BaseModel):
    """Main TaskFlow configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
