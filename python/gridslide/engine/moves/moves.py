"""Describes the slide between two consecutive snapshots of a solution."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from gridslide.models.grid import BLANK, LabelGrid


class Direction(StrEnum):
    """Direction the *tile* travels (the blank goes the opposite way)."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


_DELTAS: dict[tuple[int, int], Direction] = {
    (-1, 0): Direction.UP,
    (1, 0): Direction.DOWN,
    (0, -1): Direction.LEFT,
    (0, 1): Direction.RIGHT,
}


@dataclass(frozen=True)
class Move:
    label: str
    source: tuple[int, int]
    target: tuple[int, int]
    direction: Direction

    def __str__(self) -> str:
        return f"{self.label!r} {self.direction.value}"


def describe_move(before: LabelGrid, after: LabelGrid) -> Move | None:
    """Return the single blank slide turning *before* into *after*.

    Returns ``None`` if the grids differ in shape, are identical, or are
    not exactly one tile-for-blank swap apart.
    """
    if len(before) != len(after):
        return None
    changed: list[tuple[int, int]] = []
    for r, (row_a, row_b) in enumerate(zip(before, after)):
        if len(row_a) != len(row_b):
            return None
        for c, (a, b) in enumerate(zip(row_a, row_b)):
            if a != b:
                changed.append((r, c))

    if len(changed) != 2:
        return None
    (r1, c1), (r2, c2) = changed
    if abs(r1 - r2) + abs(c1 - c2) != 1:
        return None
    if before[r1][c1] != after[r2][c2] or before[r2][c2] != after[r1][c1]:
        return None

    if before[r1][c1] == BLANK:
        blank, tile = (r1, c1), (r2, c2)
    elif before[r2][c2] == BLANK:
        blank, tile = (r2, c2), (r1, c1)
    else:
        return None

    direction = _DELTAS[(blank[0] - tile[0], blank[1] - tile[1])]
    return Move(
        label=before[tile[0]][tile[1]],
        source=tile,
        target=blank,
        direction=direction,
    )


def describe_path(path: list[LabelGrid]) -> list[Move]:
    """Return the moves along *path*; raise ``ValueError`` on a bad step."""
    moves: list[Move] = []
    for i in range(len(path) - 1):
        move = describe_move(path[i], path[i + 1])
        if move is None:
            raise ValueError(f"Step {i} -> {i + 1} is not a single blank slide.")
        moves.append(move)
    return moves
