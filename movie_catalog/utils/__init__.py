"""
Utilities package for the movie catalog.

Exports shared helpers for logging and other cross-cutting concerns.
Keep this package lightweight and free of domain-specific logic.
"""

from movie_catalog.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
