"""Grid transformation solver."""

from __future__ import annotations

import logging
from collections import Counter
from enum import StrEnum
from functools import partial

from gridslide.engine.heuristic import nearest_manhattan
from gridslide.engine.moves import Move, describe_move
from gridslide.engine.search import best_first
from gridslide.engine.state import deserialize, neighbors, serialize
from gridslide.models.grid import LabelGrid, SymbolCodec

logger = logging.getLogger(__name__)

SolveResult = list[LabelGrid] | str


class FailureCode(StrEnum):
    MISMATCH = "CODE1"
    NO_BLANK = "CODE2"
    UNREACHABLE = "CODE3"

    @property
    def message(self) -> str:
        return f"{self.value}: {_MESSAGES[self]}"


_MESSAGES: dict[FailureCode, str] = {
    FailureCode.MISMATCH: "The input Grid and output Grid do not match",
    FailureCode.NO_BLANK: "The current game doesn't support this yet",
    FailureCode.UNREACHABLE: "The code cannot resolve the answer",
}


def is_failure(result: SolveResult) -> bool:
    return isinstance(result, str)


def failure_code(result: SolveResult) -> FailureCode | None:
    """Return the code tagging a failure message, or ``None`` for a path."""
    if not isinstance(result, str):
        return None
    tag, _, _ = result.partition(":")
    try:
        return FailureCode(tag)
    except ValueError:
        return None


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(source: LabelGrid, target: LabelGrid) -> SolveResult:
        """Return the snapshots from *source* to *target*, or a failure message.

        A successful result starts with *source*, ends with *target*, and
        each consecutive pair is one blank slide apart.
        """
        if not Solver.is_feasible(source, target):
            logger.info("%s: label counts do not match", FailureCode.MISMATCH)
            return FailureCode.MISMATCH.message

        codec, start_grid = SymbolCodec.from_grid(source)
        if not codec.has_blank:
            logger.info("%s: no blank cell in input", FailureCode.NO_BLANK)
            return FailureCode.NO_BLANK.message

        goal_grid = codec.encode(target)
        start = serialize(start_grid)
        goal = serialize(goal_grid)

        result = best_first(
            start,
            goal,
            successors=partial(neighbors, blank_id=codec.blank_id),
            estimate=lambda key: nearest_manhattan(deserialize(key), goal_grid),
        )
        if not result.found:
            logger.info(
                "%s: %d states expanded without reaching goal",
                FailureCode.UNREACHABLE, result.expanded,
            )
            return FailureCode.UNREACHABLE.message

        logger.debug(
            "solved in %d moves (%d states expanded)", result.cost, result.expanded
        )
        return [codec.decode(deserialize(key)) for key in result.path]

    @staticmethod
    def hint(source: LabelGrid, target: LabelGrid) -> Move | None:
        """Return the first move of an optimal solution, or ``None`` if solved / unsolvable."""
        result = Solver.solve(source, target)
        if is_failure(result) or len(result) < 2:
            return None
        return describe_move(result[0], result[1])

    @staticmethod
    def is_feasible(source: LabelGrid, target: LabelGrid) -> bool:
        """Return True if *source* holds at least as many of each label as *target* needs."""
        have = Counter(label for row in source for label in row)
        need = Counter(label for row in target for label in row)
        return all(have[label] >= count for label, count in need.items())
