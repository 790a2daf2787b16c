"""
Domain models for the movie catalog.

Defines the record schema shared by the fixture dataset, the store, discovery
and the reporter. Records are frozen so the dataset can be handed out without
defensive copies.
"""
from __future__ import annotations

import re
from typing import Any, Dict, Tuple

from pydantic import BaseModel, Field

_WHITESPACE = re.compile(r"\s+")
DIRECTOR_SEPARATOR = ", "


class MovieRecord(BaseModel):
    """
    Metadata for a single film.
    """

    title: str = Field(..., min_length=1, description="Film title.")
    year: int = Field(..., ge=1000, le=9999, description="Four-digit release year.")
    genre: Tuple[str, ...] = Field(..., min_length=1, description="Genre labels, in order.")
    rating: float = Field(..., ge=0.0, le=10.0, description="Audience rating out of 10.")
    director: str = Field(..., min_length=1, description="Director(s), comma separated.")
    description: str = Field(..., min_length=1, description="One or two sentence synopsis.")
    family_rating: str = Field(
        ...,
        min_length=1,
        alias="familyRating",
        description="Content rating such as G, PG, PG-13 or R.",
    )
    themes: Tuple[str, ...] = Field(..., min_length=1, description="Narrative motifs.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    @property
    def directors(self) -> Tuple[str, ...]:
        return tuple(self.director.split(DIRECTOR_SEPARATOR))

    @property
    def slug(self) -> str:
        """Lowercase title with whitespace runs collapsed into dashes."""
        return _WHITESPACE.sub("-", self.title.lower())

    def genre_as_string(self) -> str:
        return ", ".join(self.genre)

    def themes_as_string(self) -> str:
        return ", ".join(self.themes)

    def to_payload(self) -> Dict[str, Any]:
        """
        Serialize using the exchange field names (`familyRating`), lists for sequences.
        """
        return self.model_dump(mode="json", by_alias=True)


__all__ = ["MovieRecord"]
