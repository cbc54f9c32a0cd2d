"""Maze generation by randomized depth-first search."""

from __future__ import annotations

import random
from collections.abc import Callable
from typing import NamedTuple, Optional

from mazealgos.maze import Maze
from mazealgos.stack import Stack


class _Direction(NamedTuple):
    dr: int
    dc: int
    wall: str
    opposite: str


_DIRECTIONS = (
    _Direction(-1, 0, "top_wall", "bottom_wall"),
    _Direction(1, 0, "bottom_wall", "top_wall"),
    _Direction(0, 1, "right_wall", "left_wall"),
    _Direction(0, -1, "left_wall", "right_wall"),
)


def gen_maze_dfs(
    maze: Maze,
    start_row: int = 0,
    start_col: int = 0,
    on_step: Optional[Callable[[Maze], None]] = None,
    rng: Optional[random.Random] = None,
) -> None:
    """Carve a perfect maze in place with a randomized depth-first search.

    The maze is reset first. ``on_step`` is called after each wall removal.
    """
    if not maze.in_bounds(start_row, start_col):
        raise IndexError("Start cell out of bounds")
    rng = rng or random.Random()
    maze.reset()

    visited = [[False] * maze.cols for _ in range(maze.rows)]
    stack: Stack[tuple[int, int]] = Stack([(start_row, start_col)])
    visited[start_row][start_col] = True

    while not stack.is_empty():
        r, c = stack.top()
        options = [
            d
            for d in _DIRECTIONS
            if maze.in_bounds(r + d.dr, c + d.dc) and not visited[r + d.dr][c + d.dc]
        ]
        if not options:
            stack.pop()
            continue

        direction = rng.choice(options)
        nr, nc = r + direction.dr, c + direction.dc
        setattr(maze.cell(r, c), direction.wall, False)
        setattr(maze.cell(nr, nc), direction.opposite, False)
        visited[nr][nc] = True
        stack.push((nr, nc))

        if on_step:
            on_step(maze)