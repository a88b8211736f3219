"""Application-wide configuration loaded from the environment."""

from __future__ import annotations

from functools import cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class BackendSettings(BaseSettings):
    """Centralized settings for the user CRUD service."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    mongo_uri: str = "mongodb://localhost:27017/usercrud"
    api_host: str = "0.0.0.0"
    api_port: int = 3000
    log_level: str = "INFO"
    cors_allow_origins: list[str] = ["http://localhost:3000"]


@cache
def get_settings() -> BackendSettings:
    """Return the cached settings instance."""

    return BackendSettings()


__all__ = ["BackendSettings", "get_settings"]
