import math

import pytest

from methopts.graph import Graph


def test_new_graph_has_zero_diagonal_and_infinite_edges():
    g = Graph(3)
    assert g.n == 3
    for i in range(3):
        for j in range(3):
            if i == j:
                assert g.cost[i][j] == 0
            else:
                assert math.isinf(g.cost[i][j])


def test_set_cost_is_symmetric():
    g = Graph(4)
    g.set_cost(1, 3, 2.5)
    assert g.cost[1][3] == 2.5
    assert g.cost[3][1] == 2.5
    assert math.isinf(g.cost[1][2])


def test_set_cost_overwrites():
    g = Graph(2)
    g.set_cost(0, 1, 7)
    g.set_cost(1, 0, 3)
    assert g.cost == [[0.0, 3], [3, 0.0]]


def test_empty_graph():
    g = Graph(0)
    assert g.n == 0
    assert g.cost == []


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Graph(-1)