"""
Domain package for the movie catalog.

Exports the core record type used across the store, discovery and reporting.
Keep this package focused on data definitions and validation concerns.
"""

from movie_catalog.domain.models import MovieRecord

__all__ = [
    "MovieRecord",
]
