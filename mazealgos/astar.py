"""A* search and path reconstruction from a parent map."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping
from typing import Any

from mazealgos.graph import Graph
from mazealgos.priority_queue import PriorityQueue


def a_star(
    graph: Graph,
    start: Hashable,
    goal: Hashable,
    heuristic: Callable[[Hashable], Any],
) -> tuple[dict[Hashable, Any], dict[Hashable, Hashable]]:
    """A* search from ``start`` towards ``goal``.

    Returns ``(g_score, parent)``: the best known cost to each reached vertex
    and the vertex it was reached from (``parent[start] == start``).
    """
    g_score: dict[Hashable, Any] = {start: 0}
    parent: dict[Hashable, Hashable] = {start: start}
    open_set: PriorityQueue[tuple[Any, Hashable]] = PriorityQueue(
        [(heuristic(start), start)]
    )

    while not open_set.is_empty():
        _, current = open_set.pop()
        if current == goal:
            break
        for edge in graph.neighbors(current):
            neighbor = edge.to
            tentative = g_score[current] + edge.w
            if neighbor not in g_score or tentative < g_score[neighbor]:
                parent[neighbor] = current
                g_score[neighbor] = tentative
                open_set.push((tentative + heuristic(neighbor), neighbor))

    return g_score, parent


def reconstruct_path(
    parent: Mapping[Hashable, Hashable], start: Hashable, goal: Hashable
) -> list[Hashable]:
    """Follow ``parent`` back from ``goal`` to ``start``.

    Returns the path from ``start`` to ``goal``, or an empty list when
    ``goal`` cannot be traced back to ``start``.
    """
    path = []
    current = goal
    while current != start:
        path.append(current)
        if current not in parent:
            return []
        current = parent[current]
    path.append(start)
    path.reverse()
    return path