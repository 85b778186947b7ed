"""Configuration for floatstats.

Uses pydantic-settings for type-safe environment variable loading.
"""
from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``FLOATSTATS_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FLOATSTATS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Root logger level name",
    )
    log_format: str = Field(
        default="[%(asctime)s] [%(process)d] [%(levelname)s] %(name)s - %(message)s",
        description="logging.Formatter format string",
    )
    log_datefmt: str = Field(
        default="%Y-%m-%d %H:%M:%S %z",
        description="logging.Formatter date format",
    )

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v!r}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
