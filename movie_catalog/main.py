from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import List, Optional

import typer

from movie_catalog.config import get_settings
from movie_catalog.discovery import discover_movie_batch
from movie_catalog.reporter import print_movies, write_export
from movie_catalog.store import default_store
from movie_catalog.utils.logging import configure_logging

app = typer.Typer(help="Movie catalog fixtures CLI.")


@app.callback()
def setup() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    store = default_store()
    typer.echo(
        f"env={settings.app_env} | store={store.name} ({store.count()} movies) | "
        f"api={settings.api_base_url} batch={settings.discovery_batch_size} "
        f"export={settings.export_path}"
    )


@app.command("list")
def list_movies() -> None:
    """
    Print every movie as a table, in declaration order.
    """
    print_movies(default_store().get_all())


@app.command()
def show(index: int = typer.Argument(..., help="Position of the movie, starting at 0.")) -> None:
    """
    Print one movie as JSON.
    """
    store = default_store()
    if index < 0 or index >= store.count():
        typer.secho(
            f"No movie at index {index}; valid range is 0..{store.count() - 1}.",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)
    typer.echo(json.dumps(store.get(index).to_payload(), indent=2, ensure_ascii=False))


@app.command()
def export(
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Destination JSON file (default from settings).",
    ),
) -> None:
    """
    Write all movies to a JSON file.
    """
    destination = output or Path(get_settings().export_path)
    path = write_export(default_store().get_all(), destination)
    typer.echo(f"Exported {default_store().count()} movies to {path}")


@app.command()
def discover(
    size: Optional[int] = typer.Option(
        None,
        "--size",
        "-n",
        help="Batch size (default from settings).",
    ),
    terms: Optional[List[str]] = typer.Option(
        None,
        "--term",
        "-t",
        help="Search term; repeat for several.",
    ),
) -> None:
    """
    Run a simulated discovery crawl and print its summary.
    """
    try:
        batch = discover_movie_batch(batch_size=size, search_terms=terms)
    except ValueError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    report = {
        "search_url": batch.search_url,
        "titles": [movie.title for movie in batch.movies],
        "detail_urls": list(batch.detail_urls),
        "summary": batch.summary.model_dump(mode="json"),
    }
    typer.echo(json.dumps(report, indent=2, ensure_ascii=False))


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
