"""Application settings loaded from environment variables and ``.env`` files."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Primary settings for the video sitemap CLI."""

    log_level: LogLevel = Field(default="WARNING", alias="VIDEO_SITEMAP_LOG_LEVEL")
    strict: bool = Field(default=False, alias="VIDEO_SITEMAP_STRICT")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached instance of the application settings."""

    return Settings()


__all__ = ["LogLevel", "Settings", "get_settings"]
