import pytest

from edge_weighted_graph import WeightedGraph, add_edge


def build_graph(num_vertices, edges):
    graph = WeightedGraph(num_vertices)
    for u, v, w in edges:
        add_edge(graph, u, v, w)
    return graph.freeze()


@pytest.fixture
def small_graph():
    """
    (0)A---3---(1)B
     | \\        |
     1  4       2
     |    \\     |
    (2)C---5---(3)D
    """
    return build_graph(
        4, [(0, 1, 3.0), (0, 2, 1.0), (0, 3, 4.0), (1, 3, 2.0), (2, 3, 5.0)]
    )


@pytest.fixture
def disconnected_graph():
    return build_graph(4, [(0, 1, 1.0), (2, 3, 1.0)])


@pytest.fixture
def make_graph():
    return build_graph
