"""
Movie discovery over the fixture store.

Simulates the crawl of a movie website: one search request followed by one
detail request per film. No network traffic happens; the URLs are recorded so
callers can log or display them, and the records come from the store in
declaration order.

Usage:
    from movie_catalog.discovery import discover_movie_batch

    batch = discover_movie_batch(batch_size=5, search_terms=["space"])
    print(batch.summary.average_rating)
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple
from urllib.parse import urlencode

from pydantic import BaseModel, Field

from movie_catalog.config import get_settings
from movie_catalog.domain.models import MovieRecord
from movie_catalog.store import MovieRecordStore, default_store
from movie_catalog.utils.logging import get_logger

log = get_logger(__name__)

DEFAULT_SEARCH_TERM = "sci-fi"


class BatchSummary(BaseModel):
    count: int = Field(..., ge=0, description="Number of movies in the batch.")
    average_rating: float = Field(..., description="Mean rating, one decimal place.")
    genre_distribution: Tuple[str, ...] = Field(
        ..., description="Unique genre labels in first-seen order."
    )

    model_config = {"frozen": True}


class DiscoveryBatch(BaseModel):
    search_url: str
    detail_urls: Tuple[str, ...]
    movies: Tuple[MovieRecord, ...]
    summary: BatchSummary

    model_config = {"frozen": True}


def build_api_url(endpoint: str, params: Optional[Dict[str, str]] = None) -> str:
    """
    Build a URL on the configured movie website.

    Parameters
    ----------
    endpoint : str
        Path starting with '/', e.g. '/search'.
    params : dict[str, str] | None
        Query parameters, URL-encoded in insertion order.
    """
    base_url = get_settings().api_base_url.rstrip("/")
    query = f"?{urlencode(params)}" if params else ""
    return f"{base_url}{endpoint}{query}"


def summarize_batch(movies: Sequence[MovieRecord]) -> BatchSummary:
    genres: Dict[str, None] = {}
    for movie in movies:
        for label in movie.genre:
            genres.setdefault(label, None)

    average = round(sum(m.rating for m in movies) / len(movies), 1) if movies else 0.0
    return BatchSummary(
        count=len(movies),
        average_rating=average,
        genre_distribution=tuple(genres),
    )


def discover_movie_batch(
    batch_size: Optional[int] = None,
    search_terms: Optional[Iterable[str]] = None,
    store: Optional[MovieRecordStore] = None,
) -> DiscoveryBatch:
    """
    Discover a batch of movies from the store.

    Parameters
    ----------
    batch_size : int | None
        Maximum number of movies to return. Defaults to settings.discovery_batch_size.
    search_terms : iterable[str] | None
        Terms joined with '+' into the search URL. Defaults to 'sci-fi'.
    store : MovieRecordStore | None
        Source of records. Defaults to the fixture store.

    Returns
    -------
    DiscoveryBatch
        The first `min(batch_size, len(store))` records with their URLs and summary.

    Raises
    ------
    ValueError
        If `batch_size` is less than 1.
    """
    size = batch_size if batch_size is not None else get_settings().discovery_batch_size
    if size < 1:
        raise ValueError(f"batch_size must be at least 1, got {size}")

    source = store if store is not None else default_store()
    terms = [t for t in (search_terms or []) if t.strip()]
    search_query = "+".join(terms) if terms else DEFAULT_SEARCH_TERM

    search_url = build_api_url("/search", {"genre": search_query, "limit": str(size)})
    log.info(
        "Starting movie discovery",
        extra={"store": source.name, "search_url": search_url, "batch_size": size},
    )

    records = source.get_all()
    selected: List[MovieRecord] = []
    detail_urls: List[str] = []
    limit = min(size, len(records))
    for position, movie in enumerate(records[:limit], start=1):
        detail_urls.append(build_api_url(f"/movie/{movie.slug}"))
        selected.append(movie)
        log.debug(
            "Movie data fetched",
            extra={
                "title": movie.title,
                "year": movie.year,
                "genre_count": len(movie.genre),
                "progress": f"{position}/{limit}",
            },
        )

    summary = summarize_batch(selected)
    log.info(
        "Movie batch discovery completed",
        extra={
            "movies": summary.count,
            "average_rating": summary.average_rating,
            "genres": list(summary.genre_distribution),
        },
    )

    return DiscoveryBatch(
        search_url=search_url,
        detail_urls=tuple(detail_urls),
        movies=tuple(selected),
        summary=summary,
    )


__all__ = [
    "BatchSummary",
    "DiscoveryBatch",
    "build_api_url",
    "discover_movie_batch",
    "summarize_batch",
]
