"""Puzzle files: an input grid and the output grid it should become."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from gridslide.models.grid import BLANK, LabelGrid, copy_grid


class PuzzleFormatError(ValueError):
    """Raised when a puzzle file or mapping does not describe two grids."""


def _parse_grid(name: str, raw: Any) -> LabelGrid:
    if not isinstance(raw, list) or not raw:
        raise PuzzleFormatError(f"'{name}' must be a non-empty list of rows.")

    grid: LabelGrid = []
    width: int | None = None
    for r, row in enumerate(raw):
        if not isinstance(row, list) or not row:
            raise PuzzleFormatError(f"'{name}' row {r} must be a non-empty list.")
        if width is None:
            width = len(row)
        elif len(row) != width:
            raise PuzzleFormatError(
                f"'{name}' is ragged: row {r} has {len(row)} cells, "
                f"expected {width}."
            )
        cells: list[str] = []
        for c, value in enumerate(row):
            if value is None:
                value = BLANK
            if not isinstance(value, str):
                raise PuzzleFormatError(
                    f"'{name}' cell ({r}, {c}) must be a string, "
                    f"got {type(value).__name__}."
                )
            cells.append(value)
        grid.append(cells)
    return grid


@dataclass
class Puzzle:
    """A pair of equal-shape label grids."""

    input: LabelGrid
    output: LabelGrid

    @property
    def shape(self) -> tuple[int, int]:
        return len(self.input), len(self.input[0])

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_dict(cls, data: Any) -> Puzzle:
        if not isinstance(data, dict):
            raise PuzzleFormatError("Puzzle must be a JSON object.")
        for key in ("input", "output"):
            if key not in data:
                raise PuzzleFormatError(f"Puzzle is missing '{key}'.")

        source = _parse_grid("input", data["input"])
        target = _parse_grid("output", data["output"])

        src_shape = (len(source), len(source[0]))
        dst_shape = (len(target), len(target[0]))
        if src_shape != dst_shape:
            raise PuzzleFormatError(
                f"Grid shapes differ: input is {src_shape[0]}×{src_shape[1]}, "
                f"output is {dst_shape[0]}×{dst_shape[1]}."
            )
        return cls(input=source, output=target)

    @classmethod
    def load(cls, filepath: Path) -> Puzzle:
        try:
            data = json.loads(Path(filepath).read_text(encoding="utf-8"))
        except UnicodeDecodeError as exc:
            raise PuzzleFormatError(f"{filepath}: not UTF-8 text ({exc.reason}).") from exc
        except json.JSONDecodeError as exc:
            raise PuzzleFormatError(f"{filepath}: invalid JSON ({exc}).") from exc
        return cls.from_dict(data)

    # -- persistence ----------------------------------------------------------

    def to_dict(self) -> dict[str, LabelGrid]:
        return {"input": copy_grid(self.input), "output": copy_grid(self.output)}

    def save(self, filepath: Path) -> None:
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        filepath.write_text(
            json.dumps(self.to_dict(), indent=2) + "\n", encoding="utf-8"
        )
