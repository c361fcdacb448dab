"""Distance estimate between a state and the goal."""

from __future__ import annotations

from gridslide.models.grid import IdGrid


def occurrences(grid: IdGrid) -> dict[int, list[tuple[int, int]]]:
    """Map each id to the cells holding it, in row-major order."""
    found: dict[int, list[tuple[int, int]]] = {}
    for r, row in enumerate(grid):
        for c, v in enumerate(row):
            found.setdefault(v, []).append((r, c))
    return found


def nearest_manhattan(state: IdGrid, goal: IdGrid) -> int:
    """Sum, over every goal cell, of the distance to the nearest matching id.

    Every cell counts, blanks included.  With duplicate ids two goal cells
    may claim the same occurrence, so the estimate is a guide rather than a
    strict lower bound.
    """
    positions = occurrences(state)
    total = 0
    for i, row in enumerate(goal):
        for j, v in enumerate(row):
            best: int | None = None
            for x, y in positions[v]:
                d = abs(x - i) + abs(y - j)
                if best is None or d < best:
                    best = d
            total += best
    return total
