"""Rich rendering for grids and solution paths."""

from __future__ import annotations

import rich.box
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gridslide.engine.moves import Move
from gridslide.models.grid import BLANK, LabelGrid


# -- grid rendering -----------------------------------------------------------


def render_grid(
    grid: LabelGrid,
    target: LabelGrid | None = None,
    moved: tuple[int, int] | None = None,
) -> Table:
    """Return a Rich Table for *grid*.

    Cells already matching *target* are green; the cell at *moved* is cyan.
    """
    width = max((len(v) for row in grid for v in row), default=1)
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(len(grid[0]) if grid else 0):
        table.add_column(width=max(width, 1), justify="center")

    for r, row in enumerate(grid):
        cells: list[Text] = []
        for c, val in enumerate(row):
            if val == BLANK:
                cells.append(Text("·", style="dim"))
            elif moved == (r, c):
                cells.append(Text(val, style="bold cyan"))
            elif target is not None and target[r][c] == val:
                cells.append(Text(val, style="bold green"))
            else:
                cells.append(Text(val, style="bold white"))
        table.add_row(*cells)

    return table


# -- path rendering -----------------------------------------------------------


def render_path(path: list[LabelGrid], moves: list[Move]) -> list[Panel]:
    """One panel per snapshot: ``input`` then ``step 1``, ``step 2``, ..."""
    target = path[-1]
    panels = [
        Panel(
            render_grid(path[0], target),
            title="[bold]input[/bold]",
            border_style="bright_blue",
            expand=False,
        )
    ]
    for i, (grid, move) in enumerate(zip(path[1:], moves), 1):
        caption = Text()
        caption.append(move.label, style="bold cyan")
        caption.append(f" moves {move.direction.value}", style="dim")
        panels.append(
            Panel(
                Group(render_grid(grid, target, moved=move.target), caption),
                title=f"[bold]step {i}[/bold]",
                border_style="cyan",
                expand=False,
            )
        )
    return panels


def print_path(console: Console, path: list[LabelGrid], moves: list[Move]) -> None:
    for panel in render_path(path, moves):
        console.print(panel)
    console.print(f"[bold green]Solved in {len(moves)} moves![/bold green]")
