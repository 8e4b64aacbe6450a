"""Configuration settings for andorsearch."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or overrides."""

    model_config = SettingsConfigDict(
        env_prefix="", case_sensitive=False, populate_by_name=True
    )

    log_level: LogLevel = Field(default="INFO", validation_alias="ANDOR_LOG_LEVEL")
    recursion_limit: int = Field(
        default=10000, ge=100, validation_alias="ANDOR_RECURSION_LIMIT"
    )
    trace_dir: str | None = Field(default=None, validation_alias="ANDOR_TRACE_DIR")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value
