import pytest

from mazealgos.dfs import DFSState, dfs
from mazealgos.graph import Graph


def diamond():
    return Graph([(0, 1, 1.0), (0, 2, 1.0), (1, 3, 1.0), (2, 3, 1.0)])


def test_diamond_parents():
    parent = dfs(diamond(), 0)
    assert len(parent) == 4
    assert parent[0] == 0
    assert parent[1] == 0
    assert parent[2] == 0
    assert parent[3] == 1


def test_single_edge():
    parent = dfs(Graph([(10, 11, 2.5)]), 10)
    assert len(parent) == 2
    assert parent[10] == 10
    assert parent[11] == 10


def grid():
    g = Graph()
    g.add_edge((0, 0), (0, 1))
    g.add_edge((0, 0), (1, 0))
    g.add_edge((0, 1), (1, 1))
    g.add_edge((1, 0), (1, 1))
    g.add_edge((0, 1), (0, 0))
    g.add_edge((1, 0), (0, 0))
    g.add_edge((1, 1), (0, 1))
    g.add_edge((1, 1), (1, 0))
    return g


def test_grid_with_tuple_vertices():
    g = grid()
    parent = dfs(g, (0, 0))
    assert len(parent) == 4
    assert parent[(0, 0)] == (0, 0)
    for node in [(0, 1), (1, 0), (1, 1)]:
        assert node in parent
        assert node in [e.to for e in g.neighbors(parent[node])]
    assert parent[(0, 1)] == (0, 0)
    assert parent[(1, 1)] == (0, 1)
    assert parent[(1, 0)] == (1, 1)


def test_discover_order():
    events = []
    dfs(diamond(), 0, lambda v, state: events.append((v, state)))
    assert events == [
        (0, DFSState.DISCOVER),
        (1, DFSState.DISCOVER),
        (3, DFSState.DISCOVER),
        (2, DFSState.DISCOVER),
    ]


def test_long_chain_does_not_overflow():
    n = 5000
    g = Graph((i, i + 1, 1) for i in range(n))
    parent = dfs(g, 0)
    assert len(parent) == n + 1
    assert parent[n] == n - 1


def test_unknown_start_raises():
    with pytest.raises(KeyError):
        dfs(diamond(), 42)