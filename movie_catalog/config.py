"""
Configuration settings for the movie catalog.

Uses Pydantic Settings to load environment variables for logging, the
simulated movie website used by discovery, and export defaults.
"""
from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Discovery
    api_base_url: str = Field("https://fake-movie-database.com", alias="MOVIE_API_BASE_URL")
    discovery_batch_size: int = Field(10, ge=1, alias="DISCOVERY_BATCH_SIZE")

    # Export
    export_path: str = Field("results/movies.json", alias="EXPORT_PATH")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
