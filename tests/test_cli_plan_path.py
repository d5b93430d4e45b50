# tests/test_cli_plan_path.py
"""
Tests for the plan_path command-line entry point.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import pytest

from cli.plan_path import main, parse_coord, render_grid
from nav import PathGrid


def run_json(capsys: pytest.CaptureFixture, *argv: str) -> dict:
    assert main([*argv, "--json"]) == 0
    return json.loads(capsys.readouterr().out)


def test_parse_coord() -> None:
    assert parse_coord("3,4") == (3, 4)
    with pytest.raises(argparse.ArgumentTypeError):
        parse_coord("3;4")


def test_open_board_json(capsys: pytest.CaptureFixture) -> None:
    data = run_json(
        capsys, "--width", "5", "--height", "5", "--from", "0,0", "--to", "4,0"
    )

    assert data["status"] == "found"
    assert data["path"] == [[1, 0], [2, 0], [3, 0], [4, 0]]
    assert data["cost"] == 4


def test_stone_wall_json(capsys: pytest.CaptureFixture) -> None:
    args = ["--width", "3", "--height", "3", "--from", "0,1", "--to", "2,1"]
    args += ["--stone", "1,0", "--stone", "1,1", "--stone", "1,2"]

    assert run_json(capsys, *args)["status"] == "no_path"

    crossed = run_json(capsys, *args, "--passable-stones")
    assert crossed["status"] == "found"
    assert crossed["crosses_obstacle"] is True


def test_body_json(capsys: pytest.CaptureFixture) -> None:
    data = run_json(
        capsys,
        "--width", "3", "--height", "1",
        "--body", "1,0",
        "--from", "0,0", "--to", "2,0",
    )

    assert data["path"] == [[1, 0], [2, 0]]


def test_rich_output(capsys: pytest.CaptureFixture) -> None:
    code = main(["--width", "4", "--height", "2", "--from", "0,0", "--to", "3,0"])

    out = capsys.readouterr().out
    assert code == 0
    assert "found" in out
    assert "S**G" in out


def test_out_of_range_start(capsys: pytest.CaptureFixture) -> None:
    code = main(["--width", "3", "--height", "3", "--from", "5,5", "--to", "0,0"])

    assert code == 2
    assert "outside" in capsys.readouterr().err


def test_bad_config(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    config = tmp_path / "bad.yaml"
    config.write_text("grid:\n  width: -1\n", encoding="utf-8")

    code = main(["--config", str(config), "--from", "0,0", "--to", "1,0"])

    assert code == 2
    assert "Invalid settings" in capsys.readouterr().err


def test_config_events_path_writes_log(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    events = tmp_path / "logs" / "events.log"
    config = tmp_path / "settings.yaml"
    config.write_text(
        f"grid:\n  width: 4\n  height: 4\nlogging:\n  events_path: {events.as_posix()}\n",
        encoding="utf-8",
    )

    data = run_json(capsys, "--config", str(config), "--from", "0,0", "--to", "3,3")

    assert data["status"] == "found"
    lines = events.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line)["event_type"] for line in lines] == [
        "PATH_SEARCH_STARTED",
        "PATH_FOUND",
    ]


def test_render_grid_marks_cells() -> None:
    grid = PathGrid(3, 2, stones=[(1, 1)], snake_body=[(2, 1)])

    text = render_grid(grid, (0, 0), (2, 0), [(1, 0), (2, 0)]).plain

    assert text == "S*G\n.#o"


@pytest.mark.parametrize(
    "dims",
    [
        ["--width", "0", "--height", "1"],
        ["--width", "3", "--height", "-1"],
    ],
)
def test_non_positive_dimensions_rejected(dims: list, capsys: pytest.CaptureFixture) -> None:
    code = main([*dims, "--from", "0,0", "--to", "1,0", "--json"])

    captured = capsys.readouterr()
    assert code == 2
    assert captured.out == ""
    assert "positive" in captured.err


def test_no_passable_stones_overrides_config(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    config = tmp_path / "settings.yaml"
    config.write_text("search:\n  stones_passable: true\n", encoding="utf-8")
    args = ["--config", str(config), "--width", "3", "--height", "3"]
    args += ["--from", "0,1", "--to", "2,1"]
    args += ["--stone", "1,0", "--stone", "1,1", "--stone", "1,2"]

    assert run_json(capsys, *args)["status"] == "found"
    assert run_json(capsys, *args, "--no-passable-stones")["status"] == "no_path"
