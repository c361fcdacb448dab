"""Grid slide solver.

Usage::

    gridslide puzzle.json            # render every step
    gridslide puzzle.json --hint     # only the next move
    gridslide puzzle.json --json     # machine-readable result
    python -m gridslide puzzle.json -v

A puzzle file is a JSON object with two equal-shape grids of strings;
``""`` (or ``null``) marks a blank cell::

    {"input": [["A", "B"], ["", "C"]], "output": [["A", "B"], ["C", ""]]}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from gridslide.engine.moves import describe_path
from gridslide.engine.solver import Solver, failure_code
from gridslide.frontend.render import print_path, render_grid
from gridslide.models.puzzle import Puzzle, PuzzleFormatError

console = Console()
logger = logging.getLogger(__name__)


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load(path: Path) -> Puzzle:
    try:
        return Puzzle.load(path)
    except PuzzleFormatError as exc:
        raise typer.BadParameter(str(exc), param_hint="PUZZLE") from exc


def _print_hint(puzzle: Puzzle, as_json: bool) -> bool:
    """Print the next move; return False when no solution exists."""
    move = Solver.hint(puzzle.input, puzzle.output)
    solvable = move is not None or puzzle.input == puzzle.output
    if as_json:
        payload = None if move is None else {
            "label": move.label,
            "from": list(move.source),
            "to": list(move.target),
            "direction": move.direction.value,
        }
        typer.echo(json.dumps({"hint": payload}))
        return solvable

    if move is None:
        if solvable:
            console.print("[green]Already solved![/green]")
        else:
            console.print("[red]No hint available (unsolvable).[/red]")
        return solvable
    console.print(render_grid(puzzle.input, puzzle.output, moved=move.source))
    console.print(
        f"[cyan]Hint:[/cyan] move [bold]{escape(move.label)}[/bold] "
        f"{move.direction.value}"
    )
    return True


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    puzzle: Path = typer.Argument(
        ...,
        exists=True, dir_okay=False, readable=True,
        help="JSON file holding the input and output grids.",
    ),
    as_json: bool = typer.Option(
        False, "--json",
        help="Print the result as JSON.",
    ),
    hint: bool = typer.Option(
        False, "--hint",
        help="Show only the next move.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Find the shortest blank-slide sequence turning input into output."""
    _configure_logging(verbose)
    data = _load(puzzle)
    rows, cols = data.shape
    logger.debug("loaded %s (%d×%d)", puzzle, rows, cols)

    if hint:
        if not _print_hint(data, as_json):
            raise typer.Exit(code=1)
        return

    result = Solver.solve(data.input, data.output)
    code = failure_code(result)

    if as_json:
        if code is not None:
            typer.echo(json.dumps({"error": result, "code": code.value}))
        else:
            typer.echo(json.dumps({"path": result, "moves": len(result) - 1}))
    elif code is not None:
        console.print(f"[bold red]{escape(result)}[/bold red]")
    else:
        print_path(console, result, describe_path(result))

    if code is not None:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
