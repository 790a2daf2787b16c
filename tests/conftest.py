"""
Pytest configuration for the movie catalog.

Provides fixtures for:
- Settings isolation (environment overrides and cache reset)
- Direct access to the fixture store
"""

from __future__ import annotations

from typing import Generator

import pytest

from movie_catalog.config import Settings, get_settings
from movie_catalog.store import FixtureMovieStore, default_store

SETTINGS_ENV_VARS = (
    "APP_ENV",
    "LOG_LEVEL",
    "LOG_JSON",
    "MOVIE_API_BASE_URL",
    "DISCOVERY_BATCH_SIZE",
    "EXPORT_PATH",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path) -> Generator[None, None, None]:
    """
    Clear settings-related env vars and the settings cache around each test.

    Runs from a temporary directory so a developer's `.env` is never read.
    """
    for var in SETTINGS_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    return get_settings()


@pytest.fixture
def store() -> FixtureMovieStore:
    return default_store()
