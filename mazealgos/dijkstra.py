"""Dijkstra's single-source shortest paths."""

from __future__ import annotations

import enum
from collections.abc import Callable, Hashable
from typing import Any, Optional

from mazealgos.graph import Graph
from mazealgos.priority_queue import PriorityQueue


class DijkstraState(enum.Enum):
    """Moments at which the Dijkstra callback is invoked."""

    SETTLED = enum.auto()


def dijkstra(
    graph: Graph,
    start: Hashable,
    on_visit: Optional[Callable[[Hashable, DijkstraState], None]] = None,
) -> tuple[dict[Hashable, Any], dict[Hashable, Hashable]]:
    """Shortest paths from ``start`` on a graph with non-negative weights.

    Returns ``(dist, parent)``: the minimum distance to each reached vertex
    and its predecessor on that path (``parent[start] == start``).
    """
    dist: dict[Hashable, Any] = {start: 0}
    parent: dict[Hashable, Hashable] = {start: start}
    pq: PriorityQueue[tuple[Any, Hashable]] = PriorityQueue([(0, start)])

    while not pq.is_empty():
        d, u = pq.pop()
        if d > dist[u]:
            continue  # stale entry
        if on_visit:
            on_visit(u, DijkstraState.SETTLED)
        for edge in graph.neighbors(u):
            v = edge.to
            nd = d + edge.w
            if v not in dist or nd < dist[v]:
                dist[v] = nd
                parent[v] = u
                pq.push((nd, v))

    return dist, parent