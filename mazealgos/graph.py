"""A directed, weighted graph stored as adjacency lists."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Edge:
    """An outgoing edge: the vertex it leads to and its weight."""

    to: Any
    w: Any = 0


class Graph:
    """Directed weighted graph; every endpoint of an edge is a vertex."""

    def __init__(self, edges: Iterable[tuple[Any, Any, Any]] = ()) -> None:
        self._adj: dict[Hashable, list[Edge]] = {}
        self._edge_count = 0
        for u, v, w in edges:
            self.add_edge(u, v, w)

    # modifiers

    def add_edge(self, u: Hashable, v: Hashable, w: Any = 0) -> None:
        """Add a directed edge from ``u`` to ``v`` with weight ``w``."""
        self._adj.setdefault(u, []).append(Edge(v, w))
        self._edge_count += 1
        self._adj.setdefault(v, [])

    def add_undirected_edge(self, u: Hashable, v: Hashable, w: Any = 0) -> None:
        """Add edges in both directions between ``u`` and ``v``."""
        self.add_edge(u, v, w)
        self.add_edge(v, u, w)

    def clear_edges(self) -> None:
        """Remove every edge and every vertex."""
        self._adj.clear()
        self._edge_count = 0

    # accessors

    def neighbors(self, u: Hashable) -> tuple[Edge, ...]:
        """Return the outgoing edges of ``u`` in insertion order."""
        try:
            return tuple(self._adj[u])
        except KeyError:
            raise KeyError(f"Unknown vertex: {u!r}") from None

    def num_vertices(self) -> int:
        return len(self._adj)

    def num_edges(self) -> int:
        return self._edge_count

    def __contains__(self, u: object) -> bool:
        return u in self._adj

    def vertices(self) -> list[Hashable]:
        """Return the vertices in the order they were first seen."""
        return list(self._adj)

    def __repr__(self) -> str:
        return f"Graph(vertices={self.num_vertices()}, edges={self._edge_count})"