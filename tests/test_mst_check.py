from edge_weighted_graph import Edge
from kruskal_mst import kruskal_mst
from mst_check import (
    check_mst,
    component_partition,
    count_components,
    networkx_mst_weight,
    to_networkx,
)


def pick(graph, *indices):
    edges = graph.all_edges()
    return [edges[i] for i in indices]


def test_valid_forest_passes(small_graph):
    result = kruskal_mst(small_graph)
    verdict = check_mst(small_graph, result.edges, result.weight)
    assert verdict
    assert verdict.reason is None
    assert verdict.describe() == "MST optimality conditions hold"


def test_weight_mismatch(small_graph):
    edges = pick(small_graph, 0, 1, 3)
    verdict = check_mst(small_graph, edges, 6.0 + 1e-6)
    assert not verdict
    assert verdict.reason == "weight mismatch"


def test_weight_within_epsilon(small_graph):
    edges = pick(small_graph, 0, 1, 3)
    assert check_mst(small_graph, edges, 6.0 + 1e-13)


def test_cycle_is_not_a_forest(make_graph):
    graph = make_graph(3, [(0, 1, 1.0), (1, 2, 1.0), (0, 2, 1.0)])
    edges = list(graph.all_edges())
    verdict = check_mst(graph, edges, 3.0)
    assert not verdict
    assert verdict.reason == "not a forest"
    assert verdict.edge is edges[2]


def test_missing_edge_is_not_spanning(small_graph):
    edges = pick(small_graph, 1, 3)
    verdict = check_mst(small_graph, edges, 3.0)
    assert not verdict
    assert verdict.reason == "not a spanning forest"


def test_cut_optimality_violation(small_graph):
    # 0-3 (4.0) in place of 0-1 (3.0); 0-1 crosses the cut of 0-3
    edges = pick(small_graph, 1, 2, 3)
    verdict = check_mst(small_graph, edges, 7.0)
    assert not verdict
    assert verdict.reason == "cut optimality violated"
    assert verdict.edge is edges[1]
    assert "0-1 3.00000" in verdict.describe()


def test_foreign_edge(small_graph):
    edges = pick(small_graph, 1, 3) + [Edge(0, 1, 3.0)]
    verdict = check_mst(small_graph, edges, 6.0)
    assert not verdict
    assert verdict.reason == "edge not in graph"


def test_components(disconnected_graph, small_graph):
    assert count_components(disconnected_graph) == 2
    assert count_components(small_graph) == 1
    assert component_partition(3, []) == {frozenset({0}), frozenset({1}), frozenset({2})}


def test_networkx_oracle(small_graph, disconnected_graph, make_graph):
    assert networkx_mst_weight(small_graph) == 6.0
    assert networkx_mst_weight(disconnected_graph) == 2.0
    parallel = make_graph(2, [(0, 1, 4.0), (0, 1, 1.5)])
    assert networkx_mst_weight(parallel) == 1.5
    G = to_networkx(parallel)
    assert G.number_of_nodes() == 2
    assert G.number_of_edges() == 2
