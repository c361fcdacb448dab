"""Command-line interface, driven through typer's test runner."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from gridslide.main import app
from gridslide.models.puzzle import Puzzle

runner = CliRunner()


@pytest.fixture
def puzzle_file(tmp_path: Path) -> Path:
    path = tmp_path / "puzzle.json"
    Puzzle(input=[["A", "B"], ["", "C"]], output=[["A", "B"], ["C", ""]]).save(path)
    return path


@pytest.fixture
def no_blank_file(tmp_path: Path) -> Path:
    path = tmp_path / "no_blank.json"
    Puzzle(input=[["X", "Y"]], output=[["Y", "X"]]).save(path)
    return path


def test_renders_path(puzzle_file: Path) -> None:
    result = runner.invoke(app, [str(puzzle_file)])
    assert result.exit_code == 0, result.output
    assert "input" in result.output
    assert "step 1" in result.output
    assert "Solved in 1 moves!" in result.output


def test_json_path(puzzle_file: Path) -> None:
    result = runner.invoke(app, [str(puzzle_file), "--json"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload == {
        "path": [[["A", "B"], ["", "C"]], [["A", "B"], ["C", ""]]],
        "moves": 1,
    }


def test_failure_exits_with_status_1(no_blank_file: Path) -> None:
    result = runner.invoke(app, [str(no_blank_file)])
    assert result.exit_code == 1
    assert "CODE2:" in result.output


def test_json_failure(no_blank_file: Path) -> None:
    result = runner.invoke(app, [str(no_blank_file), "--json"])
    assert result.exit_code == 1
    payload = json.loads(result.output)
    assert payload["code"] == "CODE2"
    assert payload["error"].startswith("CODE2:")


def test_hint(puzzle_file: Path) -> None:
    result = runner.invoke(app, [str(puzzle_file), "--hint"])
    assert result.exit_code == 0, result.output
    assert "Hint:" in result.output
    assert "left" in result.output


def test_hint_json(puzzle_file: Path) -> None:
    result = runner.invoke(app, [str(puzzle_file), "--hint", "--json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {
        "hint": {"label": "C", "from": [1, 1], "to": [1, 0], "direction": "left"}
    }


def test_malformed_puzzle_is_usage_error(tmp_path: Path) -> None:
    path = tmp_path / "ragged.json"
    path.write_text(json.dumps({"input": [["A", ""], ["B"]], "output": [["A"]]}))
    result = runner.invoke(app, [str(path)])
    assert result.exit_code == 2


def test_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, [str(tmp_path / "nope.json")])
    assert result.exit_code == 2


def test_non_utf8_puzzle_is_usage_error(tmp_path: Path) -> None:
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"input": [["\xff", ""]], "output": [["", "\xff"]]}')
    result = runner.invoke(app, [str(path)])
    assert result.exit_code == 2
    assert not isinstance(result.exception, UnicodeDecodeError)


def test_verbose_run_succeeds(puzzle_file: Path) -> None:
    result = runner.invoke(app, [str(puzzle_file), "-v"])
    assert result.exit_code == 0, result.output
    assert "Solved in 1 moves!" in result.output


@pytest.fixture
def unsolvable_file(tmp_path: Path) -> Path:
    path = tmp_path / "unsolvable.json"
    Puzzle(input=[["1", "2"], ["3", ""]], output=[["2", "1"], ["3", ""]]).save(path)
    return path


def test_hint_unsolvable_exits_with_status_1(unsolvable_file: Path) -> None:
    result = runner.invoke(app, [str(unsolvable_file), "--hint"])
    assert result.exit_code == 1
    assert "No hint available" in result.output


def test_hint_json_unsolvable(unsolvable_file: Path) -> None:
    result = runner.invoke(app, [str(unsolvable_file), "--hint", "--json"])
    assert result.exit_code == 1
    assert json.loads(result.output) == {"hint": None}


def test_hint_already_solved_exits_cleanly(tmp_path: Path) -> None:
    path = tmp_path / "solved.json"
    Puzzle(input=[["A", ""]], output=[["A", ""]]).save(path)
    result = runner.invoke(app, [str(path), "--hint"])
    assert result.exit_code == 0, result.output
    assert "Already solved!" in result.output
