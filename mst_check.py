"""
Optimality checks for a computed minimum spanning forest

check_mst() validates a forest against its source graph:
 - the edge weights add up to the reported total (within 1e-12)
 - the edges form a forest (no cycles)
 - the forest spans every connected component of the graph
 - cut optimality: removing any forest edge e splits the forest in two,
   and no graph edge crossing that cut is lighter than e

networkx_mst_weight() is an independent oracle computed with NetworkX.
"""

import networkx as nx

from disjoint_set import DisjointSet

FLOATING_POINT_EPSILON = 1.0e-12


class MSTCheck:
    """Verdict of check_mst(); truthy when every condition holds"""

    def __init__(self, ok, reason=None, edge=None, detail=None):
        self.ok = ok
        self.reason = reason
        self.edge = edge
        self.detail = detail

    def __bool__(self):
        return self.ok

    def describe(self):
        if self.ok:
            return "MST optimality conditions hold"
        text = self.reason
        if self.edge is not None:
            text += f": edge {self.edge}"
        if self.detail:
            text += f" ({self.detail})"
        return text

    def __repr__(self):
        return f"MSTCheck(ok={self.ok}, reason={self.reason!r}, edge={self.edge!r})"


def _endpoints(edge):
    v = edge.either()
    return v, edge.other(v)


def check_mst(graph, edges, weight, epsilon=FLOATING_POINT_EPSILON):
    """Check `edges` (reported total `weight`) against `graph`"""
    edges = list(edges)

    # check total weight
    total = 0.0
    for e in edges:
        total += e.weight
    if abs(total - weight) > epsilon:
        return MSTCheck(
            False,
            "weight mismatch",
            detail=f"sum of edges {total:f} vs. reported {weight:f}",
        )

    graph_edges = graph.all_edges()
    known = {id(e) for e in graph_edges}
    for e in edges:
        if id(e) not in known:
            return MSTCheck(False, "edge not in graph", edge=e)

    # check that it is acyclic
    uf = DisjointSet(graph.vertex_count())
    for e in edges:
        v, w = _endpoints(e)
        if uf.connected(v, w):
            return MSTCheck(False, "not a forest", edge=e)
        uf.union(v, w)

    # check that it is a spanning forest
    for e in graph_edges:
        v, w = _endpoints(e)
        if not uf.connected(v, w):
            return MSTCheck(False, "not a spanning forest", edge=e)

    # check minimality
    for e in edges:
        uf = DisjointSet(graph.vertex_count())
        for f in edges:
            if f is not e:
                uf.union(*_endpoints(f))

        for f in graph_edges:
            x, y = _endpoints(f)
            if not uf.connected(x, y) and f.weight < e.weight:
                return MSTCheck(
                    False,
                    "cut optimality violated",
                    edge=e,
                    detail=f"crossing edge {f} is lighter",
                )

    return MSTCheck(True)


def count_components(graph):
    """Number of connected components of `graph`"""
    uf = DisjointSet(graph.vertex_count())
    for e in graph.all_edges():
        uf.union(*_endpoints(e))
    return uf.count()


def component_partition(vertex_count, edges):
    """Partition of 0..vertex_count-1 induced by `edges`, as a set of frozensets"""
    uf = DisjointSet(vertex_count)
    for e in edges:
        uf.union(*_endpoints(e))
    groups = {}
    for v in range(vertex_count):
        groups.setdefault(uf.find(v), set()).add(v)
    return {frozenset(g) for g in groups.values()}


def to_networkx(graph):
    """Copy `graph` into a networkx MultiGraph (parallel edges kept)"""
    G = nx.MultiGraph()
    G.add_nodes_from(range(graph.vertex_count()))
    for e in graph.all_edges():
        v, w = _endpoints(e)
        G.add_edge(v, w, weight=e.weight)
    return G


def networkx_mst_weight(graph):
    """Minimum spanning forest weight computed by NetworkX"""
    mst = nx.minimum_spanning_tree(to_networkx(graph), weight="weight")
    return sum(data["weight"] for _, _, data in mst.edges(data=True))
