"""
Movie Catalog - hand-authored sample movie records for recommendation demos.

This package provides:

- A frozen `MovieRecord` model
- A read-only store over ten fixture records
- A simulated discovery crawl that hands out record batches
- Rich table and JSON export reporting
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from movie_catalog.config import Settings, get_settings
from movie_catalog.discovery import BatchSummary, DiscoveryBatch, discover_movie_batch
from movie_catalog.domain.models import MovieRecord
from movie_catalog.store import FixtureMovieStore, MovieRecordStore, get_all
from movie_catalog.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Data
    "MovieRecord",
    "MovieRecordStore",
    "FixtureMovieStore",
    "get_all",
    # Discovery
    "BatchSummary",
    "DiscoveryBatch",
    "discover_movie_batch",
    # Logging
    "configure_logging",
    "get_logger",
]
