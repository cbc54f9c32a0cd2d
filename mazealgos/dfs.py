"""Depth-first search over a Graph."""

from __future__ import annotations

import enum
from collections.abc import Callable, Hashable, Iterator
from typing import Optional

from mazealgos.graph import Edge, Graph


class DFSState(enum.Enum):
    """Moments at which the DFS callback may be invoked."""

    DISCOVER = enum.auto()
    FINISH = enum.auto()


def dfs(
    graph: Graph,
    start: Hashable,
    on_visit: Optional[Callable[[Hashable, DFSState], None]] = None,
) -> dict[Hashable, Hashable]:
    """Depth-first search from ``start``, returning a parent-pointer tree.

    ``parent[start] == start``; every other reached vertex maps to the
    vertex from which it was first discovered. ``on_visit`` is called with
    ``DFSState.DISCOVER`` as each vertex is discovered.
    """
    parent: dict[Hashable, Hashable] = {start: start}
    visited: set[Hashable] = set()

    def discover(u: Hashable) -> Iterator[Edge]:
        visited.add(u)
        if on_visit:
            on_visit(u, DFSState.DISCOVER)
        return iter(graph.neighbors(u))

    stack: list[tuple[Hashable, Iterator[Edge]]] = [(start, discover(start))]
    while stack:
        u, edges = stack[-1]
        for edge in edges:
            v = edge.to
            if v not in visited:
                parent[v] = u
                stack.append((v, discover(v)))
                break
        else:
            stack.pop()

    return parent