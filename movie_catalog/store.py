"""
Read-only movie record store.

The store exposes the fixture dataset to consumers. `MovieRecordStore` is the
interface a consumer should depend on; `FixtureMovieStore` is the concrete
implementation backed by the in-memory literal records. There is no writer,
so concurrent readers need no synchronization.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, Tuple, runtime_checkable

from movie_catalog.data.fake_movies import FAKE_MOVIE_DATABASE
from movie_catalog.domain.models import MovieRecord


@runtime_checkable
class MovieRecordStore(Protocol):
    """
    Common interface for movie record stores.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    description : str
        A human-friendly summary of where the records come from.
    """

    name: str
    description: str

    def get_all(self) -> Sequence[MovieRecord]:
        """
        Return every record in a stable order.

        Returns
        -------
        Sequence[MovieRecord]
            The same records, in the same order, on every call.
        """
        ...


class FixtureMovieStore:
    name = "fixture"
    description = "Hand-authored sample records loaded at import time."

    def __init__(self, records: Tuple[MovieRecord, ...] = FAKE_MOVIE_DATABASE) -> None:
        self._records = records

    def get_all(self) -> Tuple[MovieRecord, ...]:
        return self._records

    def count(self) -> int:
        return len(self._records)

    def get(self, index: int) -> MovieRecord:
        """Return the record at `index`; raises IndexError when out of range."""
        return self._records[index]

    def find_by_title(self, title: str) -> Optional[MovieRecord]:
        """Case-insensitive exact title lookup."""
        wanted = title.strip().casefold()
        for record in self._records:
            if record.title.casefold() == wanted:
                return record
        return None


_DEFAULT_STORE = FixtureMovieStore()


def default_store() -> FixtureMovieStore:
    return _DEFAULT_STORE


def get_all() -> Tuple[MovieRecord, ...]:
    """
    Return all fixture records in declaration order.

    Infallible and idempotent: every call returns the same immutable tuple.
    """
    return _DEFAULT_STORE.get_all()


__all__ = [
    "MovieRecordStore",
    "FixtureMovieStore",
    "default_store",
    "get_all",
]
