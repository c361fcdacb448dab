"""Canonical state keys and single-slide successor generation."""

from __future__ import annotations

from gridslide.models.grid import IdGrid

StateKey = str

ROW_SEP = ";"
CELL_SEP = ","

# (d_row, d_col) in the order right, up, left, down.
DIRECTIONS: tuple[tuple[int, int], ...] = ((0, 1), (-1, 0), (0, -1), (1, 0))


# -- serialisation ------------------------------------------------------------


def serialize(grid: IdGrid) -> StateKey:
    """Return the canonical key for *grid*, e.g. ``"1,2;3,0"``."""
    return ROW_SEP.join(CELL_SEP.join(str(v) for v in row) for row in grid)


def deserialize(key: StateKey) -> IdGrid:
    return [[int(v) for v in row.split(CELL_SEP)] for row in key.split(ROW_SEP)]


# -- successors ---------------------------------------------------------------


def blank_positions(grid: IdGrid, blank_id: int) -> list[tuple[int, int]]:
    return [
        (r, c)
        for r, row in enumerate(grid)
        for c, v in enumerate(row)
        if v == blank_id
    ]


def neighbors(key: StateKey, blank_id: int) -> list[StateKey]:
    """Return every distinct state one blank slide away from *key*.

    Each blank cell moves independently.  Swapping a blank with another
    blank leaves the grid unchanged; that key is kept once like any other.
    """
    grid = deserialize(key)
    rows = len(grid)
    seen: dict[StateKey, None] = {}

    for br, bc in blank_positions(grid, blank_id):
        for dr, dc in DIRECTIONS:
            tr, tc = br + dr, bc + dc
            if not (0 <= tr < rows and 0 <= tc < len(grid[tr])):
                continue
            grid[br][bc], grid[tr][tc] = grid[tr][tc], grid[br][bc]
            seen[serialize(grid)] = None
            grid[br][bc], grid[tr][tc] = grid[tr][tc], grid[br][bc]

    return list(seen)
