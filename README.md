# mazealgos

A small collection of data structures and graph algorithms, together with
a rectangular maze model, a randomised depth-first maze generator and a maze
solver built on top of them. It has no dependencies outside the standard
library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

Data structures:

- `mazealgos.vector.Vector`: growable array that tracks a capacity, which
  doubles when it fills up (`reserve`, `shrink_fit`, `capacity`).
- `mazealgos.linked_list.LinkedList`: doubly linked list with `prepend`,
  `append`, `insert`, `delete`, `remove` (all occurrences, returns the count)
  and in-place `reverse`.
- `mazealgos.hash_map.HashMap`: separate-chaining hash map that doubles its
  bucket count when its load factor exceeds 2.0. `at` and `[]` raise
  `KeyError` for a missing key; `get_or_insert` adds a default instead.
- `mazealgos.priority_queue.PriorityQueue`: binary min-heap; pass `less` to
  change the ordering.
- `mazealgos.fifo.Queue` and `mazealgos.stack.Stack`: FIFO and LIFO
  containers. Removing from an empty one raises `IndexError`.
- `mazealgos.union_find.UnionFind`: disjoint sets over `0 .. n-1` with union
  by rank and path compression.
- `mazealgos.graph.Graph`: weighted directed graph held as adjacency lists of
  `Edge` values. Adding an edge also adds both endpoints as vertices;
  `neighbors` raises `KeyError` for an unknown vertex.

Algorithms over `Graph`, all returning plain dictionaries:

- `mazealgos.bfs.bfs`: edge-count distances and parents.
- `mazealgos.dfs.dfs`: depth-first parent tree (iterative, so deep graphs do
  not hit the recursion limit).
- `mazealgos.dijkstra.dijkstra`: shortest weighted distances and parents for
  non-negative weights.
- `mazealgos.astar.a_star` and `mazealgos.astar.reconstruct_path`.

In every parent map the start vertex is its own parent. `bfs`, `dfs` and
`dijkstra` take an optional `on_visit(vertex, state)` callback: `bfs` reports
`BFSState.ENQUEUED` and `BFSState.DEQUEUED`, `dfs` reports
`DFSState.DISCOVER` as each vertex is discovered, and `dijkstra` reports
`DijkstraState.SETTLED`.

## Graphs

```python
from mazealgos.graph import Graph
from mazealgos.dijkstra import dijkstra
from mazealgos.astar import a_star, reconstruct_path

g = Graph([(0, 1, 5), (0, 2, 3), (1, 3, 1), (2, 3, 7), (0, 3, 10)])
dist, parent = dijkstra(g, 0)
assert dist[3] == 6
assert parent[3] == 1

g_score, parent = a_star(g, 0, 3, lambda v: 0)
assert reconstruct_path(parent, 0, 3) == [0, 1, 3]
```

`reconstruct_path` returns an empty list when the goal cannot be traced back
to the start.

## Mazes

```python
import random

from mazealgos.maze import Maze
from mazealgos.maze_gen import gen_maze_dfs
from mazealgos.maze_solver import SolveMethod, solve_maze

maze = Maze(20, 40)
gen_maze_dfs(maze, rng=random.Random(7))

path = solve_maze(maze, SolveMethod.BFS)
print(len(path), path[0], path[-1])

maze.save("out.maze")
same = Maze.load("out.maze")
```

A `Maze` has `rows` and `cols` properties and a grid of `Cell` objects, read
with `maze.cell(row, col)` (which raises `IndexError` outside the grid). It
starts at the top-left cell and ends at the bottom-right one; move these with
`set_start` and `set_end` and read them from the `start` and `end`
properties. `reset` puts every wall back and returns start and end to the
corners.

`gen_maze_dfs(maze, start_row=0, start_col=0, on_step=None, rng=None)` resets
the maze and then knocks walls down between neighbouring cells until every
cell is reachable, calling `on_step(maze)` after each removal. Pass a
`random.Random` as `rng` for a repeatable maze.

The file format is plain text: a line with the row and column counts, a line
with the start cell, a line with the end cell, then one line per row with a
four-character code per cell giving its top, bottom, right and left walls as
`1` (present) or `0` (absent). `Maze.to_text` and `Maze.from_text` write and
read the same format without touching the disk; malformed input raises
`ValueError`.

`solve_maze(maze, method, on_visit=None)` turns the maze into a graph with
`maze_to_graph`, runs the chosen `SolveMethod` (`DFS`, `BFS` or `DIJKSTRA`)
from the start cell, and returns the path from start to end as a list of
`(row, col)` pairs, or an empty list when the end cannot be reached.
`solve` does the same on a graph you have built yourself. `on_visit` is
called with each vertex the search visits.

## What it does not do

The package is a library only. It has no command-line program and does not
draw mazes or animate generation and solving on screen; the `on_step` and
`on_visit` callbacks are the place to hook in a display of your own.