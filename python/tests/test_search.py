"""Best-first search on small hand-built graphs."""

from __future__ import annotations

import pytest

from gridslide.engine.search import best_first, reconstruct_path


def _graph(edges: dict[str, list[str]]):
    return lambda key: edges.get(key, [])


def _zero(_key: str) -> int:
    return 0


def test_start_is_goal() -> None:
    result = best_first("a", "a", _graph({"a": ["b"]}), _zero)
    assert result.found
    assert result.path == ["a"]
    assert result.cost == 0
    assert result.expanded == 0


def test_shortest_path_found() -> None:
    edges = {"a": ["b", "x"], "b": ["c"], "c": ["d"], "x": ["d"]}
    result = best_first("a", "d", _graph(edges), _zero)
    assert result.path == ["a", "x", "d"]
    assert result.cost == 2


def test_ties_broken_by_insertion_order() -> None:
    edges = {"a": ["b", "c"], "b": ["d"], "c": ["d"]}
    assert best_first("a", "d", _graph(edges), _zero).path == ["a", "b", "d"]


def test_unreachable_goal() -> None:
    edges = {"a": ["b"], "b": ["a"]}
    result = best_first("a", "z", _graph(edges), _zero)
    assert not result.found
    assert result.path is None
    assert result.cost is None
    assert result.expanded == 2


def test_closed_state_reopened_on_cheaper_route() -> None:
    # The estimate lures the search down s-a-m-c first; b later offers a
    # cheaper route to the already-expanded c.
    edges = {"s": ["a", "b"], "a": ["m"], "m": ["c"], "b": ["c"], "c": ["t"]}
    h = {"s": 0, "a": 0, "m": 0, "b": 2, "c": 0, "t": 5}
    result = best_first("s", "t", _graph(edges), h.__getitem__)
    assert result.path == ["s", "b", "c", "t"]


def test_reconstruct_path() -> None:
    parent = {"b": "a", "c": "b"}
    assert reconstruct_path(parent, "a", "c") == ["a", "b", "c"]
    assert reconstruct_path({}, "a", "a") == ["a"]


@pytest.mark.parametrize("length", [1, 5, 30])
def test_line_graph(length: int) -> None:
    edges = {str(i): [str(i - 1), str(i + 1)] for i in range(length + 1)}
    result = best_first("0", str(length), _graph(edges), _zero)
    assert result.path == [str(i) for i in range(length + 1)]
