"""Breadth-first search over a Graph."""

from __future__ import annotations

import enum
from collections.abc import Callable, Hashable
from typing import Optional

from mazealgos.fifo import Queue
from mazealgos.graph import Graph


class BFSState(enum.Enum):
    """Moments at which the BFS callback is invoked."""

    ENQUEUED = enum.auto()
    DEQUEUED = enum.auto()


def bfs(
    graph: Graph,
    start: Hashable,
    on_visit: Optional[Callable[[Hashable, BFSState], None]] = None,
) -> tuple[dict[Hashable, int], dict[Hashable, Hashable]]:
    """Breadth-first search from ``start``.

    Returns ``(dist, parent)``: the number of edges from ``start`` to each
    reached vertex, and the vertex from which each was first reached
    (``parent[start] == start``).
    """
    dist: dict[Hashable, int] = {start: 0}
    parent: dict[Hashable, Hashable] = {start: start}
    queue: Queue[Hashable] = Queue([start])
    if on_visit:
        on_visit(start, BFSState.ENQUEUED)

    while not queue.is_empty():
        u = queue.dequeue()
        if on_visit:
            on_visit(u, BFSState.DEQUEUED)
        du = dist[u]
        for edge in graph.neighbors(u):
            v = edge.to
            if v not in dist:
                dist[v] = du + 1
                parent[v] = u
                queue.enqueue(v)
                if on_visit:
                    on_visit(v, BFSState.ENQUEUED)

    return dist, parent