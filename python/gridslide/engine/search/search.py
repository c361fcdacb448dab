"""Best-first (A*) graph search over state keys."""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass
from typing import Callable, Iterable

from gridslide.engine.state.state import StateKey

logger = logging.getLogger(__name__)

Successors = Callable[[StateKey], Iterable[StateKey]]
Estimate = Callable[[StateKey], int]


@dataclass(frozen=True)
class SearchResult:
    path: list[StateKey] | None
    expanded: int

    @property
    def found(self) -> bool:
        return self.path is not None

    @property
    def cost(self) -> int | None:
        return None if self.path is None else len(self.path) - 1


def reconstruct_path(
    parent: dict[StateKey, StateKey], start: StateKey, goal: StateKey
) -> list[StateKey]:
    path: list[StateKey] = [goal]
    key = goal
    while key != start:
        key = parent[key]
        path.append(key)
    path.reverse()
    return path


def best_first(
    start: StateKey,
    goal: StateKey,
    successors: Successors,
    estimate: Estimate,
) -> SearchResult:
    """Expand the lowest ``g + h`` frontier state until *goal* is selected.

    Every edge costs 1.  The frontier is a heap ordered by ``(f, h, seq)``;
    entries whose ``g`` has since improved are skipped when popped.  A
    closed state is re-opened when a strictly cheaper route to it turns up.
    """
    logger.debug("search start=%s goal=%s", start, goal)

    seq = itertools.count()
    g: dict[StateKey, int] = {start: 0}
    parent: dict[StateKey, StateKey] = {}
    closed: set[StateKey] = set()

    h0 = estimate(start)
    frontier: list[tuple[int, int, int, StateKey]] = [(h0, h0, next(seq), start)]
    expanded = 0

    while frontier:
        f, h, _, key = heapq.heappop(frontier)
        if f - h != g[key]:
            continue  # stale

        if key == goal:
            path = reconstruct_path(parent, start, goal)
            logger.debug(
                "goal reached after %d expansions, %d moves",
                expanded, len(path) - 1,
            )
            return SearchResult(path=path, expanded=expanded)

        closed.add(key)
        expanded += 1
        tentative = g[key] + 1

        for nxt in successors(key):
            known = g.get(nxt)
            if nxt in closed and tentative >= known:
                continue
            if known is None or tentative < known:
                parent[nxt] = key
                g[nxt] = tentative
                closed.discard(nxt)
                nh = estimate(nxt)
                heapq.heappush(frontier, (tentative + nh, nh, next(seq), nxt))

    logger.info("frontier exhausted after %d expansions", expanded)
    return SearchResult(path=None, expanded=expanded)
