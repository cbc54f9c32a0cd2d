import random

import pytest

from mazealgos.maze import Cell, Maze


def _open(maze, a, b):
    (r1, c1), (r2, c2) = a, b
    first, second = maze.cell(r1, c1), maze.cell(r2, c2)
    if r2 == r1 + 1:
        first.bottom_wall = second.top_wall = False
    elif r2 == r1 - 1:
        first.top_wall = second.bottom_wall = False
    elif c2 == c1 + 1:
        first.right_wall = second.left_wall = False
    else:
        first.left_wall = second.right_wall = False


def test_new_maze_has_all_walls_and_corner_points():
    maze = Maze(3, 4)
    assert maze.rows == 3
    assert maze.cols == 4
    assert maze.start == (0, 0)
    assert maze.end == (2, 3)
    assert all(maze.cell(r, c) == Cell() for r in range(3) for c in range(4))


def test_default_maze_is_empty():
    maze = Maze()
    assert maze.rows == 0
    assert maze.cols == 0
    assert maze.start == (0, 0)
    assert maze.end == (0, 0)


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        Maze(-1, 2)


@pytest.mark.parametrize("row,col", [(-1, 0), (3, 0), (0, 4), (0, -1)])
def test_cell_out_of_bounds_raises(row, col):
    maze = Maze(3, 4)
    assert maze.in_bounds(row, col) is False
    with pytest.raises(IndexError):
        maze.cell(row, col)


def test_set_start_and_end():
    maze = Maze(3, 4)
    maze.set_start(1, 2)
    maze.set_end(2, 0)
    assert maze.start == (1, 2)
    assert maze.end == (2, 0)
    with pytest.raises(IndexError):
        maze.set_start(3, 0)
    with pytest.raises(IndexError):
        maze.set_end(0, 4)
    assert maze.start == (1, 2)


def test_reset_restores_walls_and_points():
    maze = Maze(2, 2)
    _open(maze, (0, 0), (0, 1))
    maze.cell(1, 1).visited = True
    maze.set_start(1, 1)
    maze.set_end(0, 0)
    maze.reset()
    assert all(maze.cell(r, c) == Cell() for r in range(2) for c in range(2))
    assert maze.start == (0, 0)
    assert maze.end == (1, 1)


def test_to_text_format():
    maze = Maze(1, 2)
    _open(maze, (0, 0), (0, 1))
    assert maze.to_text() == "1 2\n0 0\n0 1\n1101 1110\n"


def test_text_round_trip():
    rng = random.Random(7)
    maze = Maze(4, 5)
    for r in range(4):
        for c in range(5):
            cell = maze.cell(r, c)
            cell.top_wall = rng.random() < 0.5
            cell.bottom_wall = rng.random() < 0.5
            cell.right_wall = rng.random() < 0.5
            cell.left_wall = rng.random() < 0.5
    maze.set_start(2, 1)
    maze.set_end(3, 4)
    loaded = Maze.from_text(maze.to_text())
    assert loaded.rows == 4 and loaded.cols == 5
    assert loaded.start == (2, 1)
    assert loaded.end == (3, 4)
    assert all(
        loaded.cell(r, c) == maze.cell(r, c) for r in range(4) for c in range(5)
    )
    assert loaded.to_text() == maze.to_text()


def test_header_may_share_a_line():
    maze = Maze.from_text("1 1 0 0 0 0\n1010\n")
    cell = maze.cell(0, 0)
    assert (cell.top_wall, cell.bottom_wall, cell.right_wall, cell.left_wall) == (
        True,
        False,
        True,
        False,
    )


@pytest.mark.parametrize(
    "text",
    [
        "",
        "x y\n0 0\n0 0\n",
        "2 2\n0 0\n1 1\n1111 1111\n",
        "1 1\n0 0\n0 0\n11\n",
        "1 2\n0 0\n0 1\n1111\n",
    ],
)
def test_from_text_rejects_bad_input(text):
    with pytest.raises(ValueError):
        Maze.from_text(text)


def test_save_and_load(tmp_path):
    maze = Maze(2, 3)
    _open(maze, (0, 0), (1, 0))
    _open(maze, (1, 1), (1, 2))
    path = tmp_path / "out.maze"
    maze.save(path)
    loaded = Maze.load(path)
    assert loaded.to_text() == maze.to_text()
    assert path.read_text() == maze.to_text()


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Maze.load(tmp_path / "missing.maze")