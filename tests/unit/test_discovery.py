from __future__ import annotations

import logging

import pytest

from movie_catalog.discovery import build_api_url, discover_movie_batch, summarize_batch
from movie_catalog.store import FixtureMovieStore, get_all


def test_build_api_url_without_params() -> None:
    assert build_api_url("/movie/arrival") == "https://fake-movie-database.com/movie/arrival"


def test_build_api_url_encodes_params() -> None:
    url = build_api_url("/search", {"genre": "space+drama", "limit": "15"})
    assert url == "https://fake-movie-database.com/search?genre=space%2Bdrama&limit=15"


def test_build_api_url_honors_configured_base(monkeypatch) -> None:
    from movie_catalog.config import get_settings

    monkeypatch.setenv("MOVIE_API_BASE_URL", "http://localhost:8080/")
    get_settings.cache_clear()
    assert build_api_url("/search") == "http://localhost:8080/search"


def test_default_batch_returns_whole_dataset_in_order() -> None:
    batch = discover_movie_batch()
    assert batch.movies == get_all()
    assert batch.search_url == "https://fake-movie-database.com/search?genre=sci-fi&limit=10"
    assert len(batch.detail_urls) == 10
    assert batch.detail_urls[0] == "https://fake-movie-database.com/movie/blade-runner-2049"


def test_batch_size_is_capped_by_store_size() -> None:
    batch = discover_movie_batch(batch_size=14)
    assert len(batch.movies) == 10
    assert "limit=14" in batch.search_url


def test_small_batch_takes_leading_records() -> None:
    batch = discover_movie_batch(batch_size=3, search_terms=["space", "robots"])
    assert [m.title for m in batch.movies] == ["Blade Runner 2049", "Arrival", "Interstellar"]
    assert "genre=space%2Brobots" in batch.search_url
    assert batch.summary.count == 3


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_batch_size_raises(size: int) -> None:
    with pytest.raises(ValueError):
        discover_movie_batch(batch_size=size)


def test_batch_size_default_comes_from_settings(monkeypatch) -> None:
    from movie_catalog.config import get_settings

    monkeypatch.setenv("DISCOVERY_BATCH_SIZE", "4")
    get_settings.cache_clear()
    assert len(discover_movie_batch().movies) == 4


def test_custom_store_is_used() -> None:
    store = FixtureMovieStore(records=get_all()[7:])
    batch = discover_movie_batch(store=store)
    assert [m.title for m in batch.movies] == ["The Matrix", "WALL-E", "Gravity"]


def test_summarize_full_dataset() -> None:
    summary = summarize_batch(get_all())
    assert summary.count == 10
    assert summary.average_rating == 8.1
    assert summary.genre_distribution == (
        "Science Fiction",
        "Drama",
        "Thriller",
        "Adventure",
        "Action",
        "Fantasy",
        "Animation",
        "Family",
    )


def test_summarize_empty_batch() -> None:
    summary = summarize_batch(())
    assert summary.count == 0
    assert summary.average_rating == 0.0
    assert summary.genre_distribution == ()


def test_discovery_logs_summary(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="movie_catalog.discovery"):
        discover_movie_batch(batch_size=2)

    messages = [r.getMessage() for r in caplog.records]
    assert messages.count("Movie data fetched") == 2
    completed = [r for r in caplog.records if r.getMessage() == "Movie batch discovery completed"]
    assert completed and completed[0].movies == 2
