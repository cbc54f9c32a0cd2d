"""Turning a maze into a graph and finding a path through it."""

from __future__ import annotations

import enum
from collections.abc import Callable
from typing import Optional

from mazealgos.astar import reconstruct_path
from mazealgos.bfs import bfs
from mazealgos.dfs import dfs
from mazealgos.dijkstra import dijkstra
from mazealgos.graph import Graph
from mazealgos.maze import Maze

Vertex = tuple[int, int]


class SolveMethod(enum.Enum):
    """Search algorithm used to solve a maze."""

    DFS = enum.auto()
    BFS = enum.auto()
    DIJKSTRA = enum.auto()


_STEPS = (
    (-1, 0, "top_wall"),
    (1, 0, "bottom_wall"),
    (0, 1, "right_wall"),
    (0, -1, "left_wall"),
)


def maze_to_graph(maze: Maze) -> Graph:
    """Build a graph with an edge for every open wall between two cells."""
    graph = Graph()
    for i in range(maze.rows):
        for j in range(maze.cols):
            cell = maze.cell(i, j)
            for dr, dc, wall in _STEPS:
                if not getattr(cell, wall) and maze.in_bounds(i + dr, j + dc):
                    graph.add_edge((i, j), (i + dr, j + dc))
    return graph


def solve(
    graph: Graph,
    start: Vertex,
    end: Vertex,
    method: SolveMethod,
    on_visit: Optional[Callable[[Vertex], None]] = None,
) -> list[Vertex]:
    """Find a path from ``start`` to ``end``; empty if ``end`` is unreachable."""
    start, end = tuple(start), tuple(end)
    visit = (lambda v, _state: on_visit(v)) if on_visit else None

    if method is SolveMethod.DFS:
        came_from = dfs(graph, start, visit)
    elif method is SolveMethod.BFS:
        _, came_from = bfs(graph, start, visit)
    elif method is SolveMethod.DIJKSTRA:
        _, came_from = dijkstra(graph, start, visit)
    else:
        raise ValueError(f"Unknown solve method: {method!r}")

    return reconstruct_path(came_from, start, end)


def solve_maze(
    maze: Maze,
    method: SolveMethod,
    on_visit: Optional[Callable[[Vertex], None]] = None,
) -> list[Vertex]:
    """Solve ``maze`` from its start to its end with ``method``."""
    return solve(maze_to_graph(maze), maze.start, maze.end, method, on_visit)