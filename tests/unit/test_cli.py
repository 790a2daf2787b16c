from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from movie_catalog.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Keep INFO logs out of command output and restore root handlers afterwards."""
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_info_shows_configuration() -> None:
    result = runner.invoke(app, ["info"])
    assert result.exit_code == 0
    assert "store=fixture (10 movies)" in result.output
    assert "batch=10" in result.output


def test_list_prints_all_titles() -> None:
    result = runner.invoke(app, ["list"], env={"COLUMNS": "200"})
    assert result.exit_code == 0
    assert "Blade Runner 2049" in result.output
    assert "Gravity" in result.output


def test_show_prints_record_json() -> None:
    result = runner.invoke(app, ["show", "2"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["title"] == "Interstellar"
    assert payload["director"] == "Christopher Nolan"


def test_show_out_of_range_exits_with_error() -> None:
    result = runner.invoke(app, ["show", "10"])
    assert result.exit_code == 1


def test_export_writes_file(tmp_path: Path) -> None:
    target = tmp_path / "out" / "movies.json"
    result = runner.invoke(app, ["export", "--output", str(target)])
    assert result.exit_code == 0
    assert json.loads(target.read_text(encoding="utf-8"))["count"] == 10


def test_export_defaults_to_settings_path(tmp_path: Path) -> None:
    # conftest runs every test from tmp_path
    result = runner.invoke(app, ["export"])
    assert result.exit_code == 0
    assert (tmp_path / "results" / "movies.json").exists()


def test_discover_prints_summary() -> None:
    result = runner.invoke(app, ["discover", "--size", "2", "--term", "space"])
    assert result.exit_code == 0
    report = json.loads(result.stdout)
    assert report["titles"] == ["Blade Runner 2049", "Arrival"]
    assert report["summary"]["count"] == 2
    assert report["summary"]["average_rating"] == 8.0


def test_discover_rejects_zero_size() -> None:
    result = runner.invoke(app, ["discover", "--size", "0"])
    assert result.exit_code == 1
