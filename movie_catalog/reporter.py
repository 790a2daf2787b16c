from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from movie_catalog.domain.models import MovieRecord
from movie_catalog.utils.logging import get_logger

log = get_logger(__name__)


def build_export_payload(movies: Sequence[MovieRecord]) -> Dict[str, Any]:
    """
    Build the JSON exchange document for a sequence of movies.

    Field names follow the exchange format (`familyRating`), sequences become lists.
    """
    return {
        "count": len(movies),
        "movies": [movie.to_payload() for movie in movies],
    }


def write_export(movies: Sequence[MovieRecord], path: Path | str) -> Path:
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    with output.open("w", encoding="utf-8") as f:
        json.dump(build_export_payload(movies), f, indent=2, ensure_ascii=False)
        f.write("\n")

    log.info("Movies exported", extra={"path": str(output), "movies": len(movies)})
    return output


def print_movies(
    movies: Sequence[MovieRecord],
    console: Optional[Console] = None,
    title: str = "Movie Catalog",
) -> None:
    """
    Render movies as a rich table, in the order given.
    """
    console = console or Console()

    if not movies:
        console.print("[yellow]No movies to display.[/yellow]")
        return

    table = Table(
        title=title,
        box=box.ROUNDED,
        caption=f"{len(movies)} movie(s)",
    )

    table.add_column("#", justify="right", style="dim")
    table.add_column("Title", style="cyan", no_wrap=True)
    table.add_column("Year", justify="right", style="magenta")
    table.add_column("Genre", style="blue")
    table.add_column("Rating", justify="right", style="bold green")
    table.add_column("Director", style="yellow")
    table.add_column("Family", justify="center", style="red")

    for index, movie in enumerate(movies):
        table.add_row(
            str(index),
            movie.title,
            str(movie.year),
            movie.genre_as_string(),
            f"{movie.rating:.1f}",
            movie.director,
            movie.family_rating,
        )

    console.print(table)


__all__ = ["build_export_payload", "print_movies", "write_export"]
