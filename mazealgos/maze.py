"""A rectangular grid maze whose cells carry four walls."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Union

_WALL_ORDER = ("top_wall", "bottom_wall", "right_wall", "left_wall")


@dataclass
class Cell:
    """One maze cell; every wall is up until something removes it."""

    top_wall: bool = True
    bottom_wall: bool = True
    right_wall: bool = True
    left_wall: bool = True
    visited: bool = False


def _encode(cell: Cell) -> str:
    return "".join("1" if getattr(cell, wall) else "0" for wall in _WALL_ORDER)


def _decode(code: str, cell: Cell) -> None:
    for wall, flag in zip(_WALL_ORDER, code):
        setattr(cell, wall, flag == "1")


class Maze:
    """A grid of cells with a start and an end position."""

    def __init__(self, rows: int = 0, cols: int = 0) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("rows and cols must not be negative")
        self._rows = rows
        self._cols = cols
        self._grid = [[Cell() for _ in range(cols)] for _ in range(rows)]
        self._start = (0, 0)
        self._end = (rows - 1, cols - 1) if rows or cols else (0, 0)

    # accessors

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def cell(self, row: int, col: int) -> Cell:
        """Return the cell at ``(row, col)``; raise IndexError outside the grid."""
        if not self.in_bounds(row, col):
            raise IndexError("Cell indices out of range!")
        return self._grid[row][col]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._rows and 0 <= col < self._cols

    # start and end

    def set_start(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise IndexError("Start cell out of bounds")
        self._start = (row, col)

    def set_end(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise IndexError("End cell out of bounds")
        self._end = (row, col)

    @property
    def start(self) -> tuple[int, int]:
        return self._start

    @property
    def end(self) -> tuple[int, int]:
        return self._end

    def reset(self) -> None:
        """Restore every wall and put start and end back in the corners."""
        self._grid = [[Cell() for _ in range(self._cols)] for _ in range(self._rows)]
        self._start = (0, 0)
        self._end = (self._rows - 1, self._cols - 1)

    # serialization

    def to_text(self) -> str:
        """Render the maze in its text format."""
        lines = [
            f"{self._rows} {self._cols}",
            f"{self._start[0]} {self._start[1]}",
            f"{self._end[0]} {self._end[1]}",
        ]
        lines.extend(" ".join(_encode(cell) for cell in row) for row in self._grid)
        return "\n".join(lines) + "\n"

    @classmethod
    def from_text(cls, text: str) -> "Maze":
        """Parse a maze from the text produced by :meth:`to_text`."""
        lines = text.splitlines()
        tokens: list[str] = []
        pos = 0
        while len(tokens) < 6 and pos < len(lines):
            tokens.extend(lines[pos].split())
            pos += 1

        try:
            rows, cols = int(tokens[0]), int(tokens[1])
        except (IndexError, ValueError):
            raise ValueError("Invalid file format (rows/cols)") from None
        if rows < 0 or cols < 0:
            raise ValueError("Invalid file format (rows/cols)")
        try:
            sr, sc, er, ec = (int(tok) for tok in tokens[2:6])
        except ValueError:
            raise ValueError("Invalid file format (start/end)") from None

        maze = cls(rows, cols)
        maze._start = (sr, sc)
        maze._end = (er, ec)

        grid_lines = lines[pos:pos + rows]
        if len(grid_lines) < rows:
            raise ValueError("Unexpected end of input reading maze grid")
        for i, line in enumerate(grid_lines):
            codes = line.split()
            for j in range(cols):
                code = codes[j] if j < len(codes) else ""
                if len(code) != 4:
                    raise ValueError(f"Invalid cell encoding at ({i}, {j})")
                _decode(code, maze._grid[i][j])
        return maze

    def save(self, path: Union[str, os.PathLike]) -> None:
        """Write the maze to ``path``."""
        with open(path, "w", encoding="utf-8") as out:
            out.write(self.to_text())

    @classmethod
    def load(cls, path: Union[str, os.PathLike]) -> "Maze":
        """Read a maze from ``path``."""
        with open(path, encoding="utf-8") as src:
            return cls.from_text(src.read())

    def __repr__(self) -> str:
        return f"Maze(rows={self._rows}, cols={self._cols})"