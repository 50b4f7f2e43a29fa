"""
Configuration Schema Validation

Pydantic models for validating todo list profile configurations.
Provides clear error messages with file and field context.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from todolist.core.domain.todo_store import MAX_NUMBER_OF_ITEMS


class PersistenceConfigSchema(BaseModel):
    """Where and how the task list document is stored."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["file", "memory"] = Field(
        "file",
        description="Store backend: 'file' (JSON on disk) or 'memory'",
    )
    work_dir: str = Field(
        ".todolist",
        description="Directory for the document, version stamp and height counter",
    )


class ClockConfigSchema(BaseModel):
    """Source of the logical height stamped on tasks."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["counter", "system"] = Field(
        "counter",
        description="'counter' (persisted block-like counter) or 'system' (UNIX seconds)",
    )


class StoreConfigSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    max_items: int = Field(
        MAX_NUMBER_OF_ITEMS,
        ge=0,
        description="Adds are rejected once the list holds more than this many tasks",
    )


class LoggingConfigSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: str = Field("WARNING", description="Python logging level name")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class ProfileConfigSchema(BaseModel):
    """Schema for a complete profile (``configs/{profile}.yaml``)."""

    model_config = ConfigDict(extra="forbid")

    persistence: PersistenceConfigSchema = Field(default_factory=PersistenceConfigSchema)
    clock: ClockConfigSchema = Field(default_factory=ClockConfigSchema)
    store: StoreConfigSchema = Field(default_factory=StoreConfigSchema)
    logging: LoggingConfigSchema = Field(default_factory=LoggingConfigSchema)


class ConfigValidationError(Exception):
    """
    Error raised when configuration validation fails.

    Includes file path and detailed error message.
    """

    def __init__(
        self,
        message: str,
        file_path: Optional[Path] = None,
        field_path: Optional[str] = None,
    ):
        self.file_path = file_path
        self.field_path = field_path

        parts = []
        if file_path:
            parts.append(f"File: {file_path}")
        if field_path:
            parts.append(f"Field: {field_path}")
        parts.append(message)

        super().__init__(" | ".join(parts))


def validate_profile_config(
    data: dict[str, Any] | None,
    file_path: Optional[Path] = None,
) -> ProfileConfigSchema:
    """
    Validate profile configuration data.

    Args:
        data: Configuration dictionary (None is treated as empty)
        file_path: Optional file path for error messages

    Returns:
        Validated ProfileConfigSchema

    Raises:
        ConfigValidationError: If validation fails
    """
    try:
        return ProfileConfigSchema(**(data or {}))
    except Exception as e:
        raise ConfigValidationError(
            str(e),
            file_path=file_path,
        ) from e
