"""Configuration models for Smart ToDo."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from .filters import ALL_TASKS, COMPLETION_CHOICES


class StorageConfig(BaseModel):
    """Task storage configuration."""

    path: str | None = Field(
        default=None, description="Task file path (defaults to the user data dir)"
    )


class UIConfig(BaseModel):
    """UI configuration."""

    theme: str = Field(default="textual-dark")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {v}")
        return level


class FilterConfig(BaseModel):
    """Initial filter selections."""

    default_completion: str = Field(default=ALL_TASKS)

    @field_validator("default_completion")
    @classmethod
    def validate_completion(cls, v: str) -> str:
        if v not in COMPLETION_CHOICES:
            raise ValueError(
                f"default_completion must be one of {', '.join(COMPLETION_CHOICES)}"
            )
        return v


class AppConfig(BaseModel):
    """Main Smart ToDo configuration"""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
    filters: FilterConfig = Field(default_factory=FilterConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
