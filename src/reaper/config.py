"""Centralized configuration using Pydantic Settings with .env support.

Usage:
    from reaper.config import get_settings
    settings = get_settings()
    print(settings.segments.count)

Environment variables are loaded from:
1. .env file in the project root
2. System environment variables (override .env)
3. CLI arguments (override env vars when passed to CLIs)
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="REAPER_")

    log: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )


class StorageSettings(BaseSettings):
    """Storage paths configuration."""

    model_config = SettingsConfigDict(env_prefix="REAPER_")

    log_dir: str = Field(
        default="~/.reaper/logs",
        description="Log files directory",
    )


class SegmentSettings(BaseSettings):
    """Repair segment generation defaults."""

    model_config = SettingsConfigDict(env_prefix="REAPER_SEGMENT_")

    count: int = Field(
        default=100,
        ge=1,
        description="Approximate number of segments per ring",
    )
    partitioner: str = Field(
        default="org.apache.cassandra.dht.RandomPartitioner",
        description="Partitioner class name of the cluster",
    )


class ReaperSettings(BaseSettings):
    """Main reaper settings, loads from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Nested settings (each reads its own env vars)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    segments: SegmentSettings = Field(default_factory=SegmentSettings)


@lru_cache
def get_settings() -> ReaperSettings:
    """Get cached settings instance."""
    return ReaperSettings()


# Export all settings classes for introspection (used by generate_env_example.py)
__all__ = [
    "ReaperSettings",
    "get_settings",
    "LoggingSettings",
    "StorageSettings",
    "SegmentSettings",
]
