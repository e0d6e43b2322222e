"""
Undirected edge-weighted graph over vertices 0..V-1
Built once with add_edge, read-only after freeze()
"""

import operator

from mst_errors import FrozenGraphError, OutOfRangeError


class Edge:
    """Undirected weighted edge between vertices v and w"""

    __slots__ = ("_v", "_w", "_weight")

    def __init__(self, v, w, weight):
        # integer ids only, no truncation of floats
        object.__setattr__(self, "_v", operator.index(v))
        object.__setattr__(self, "_w", operator.index(w))
        object.__setattr__(self, "_weight", float(weight))

    def __setattr__(self, name, value):
        raise AttributeError("Edge is immutable")

    @property
    def weight(self):
        return self._weight

    def either(self):
        """Return one endpoint"""
        return self._v

    def other(self, vertex):
        """Return the endpoint that is not `vertex`"""
        if vertex == self._v:
            return self._w
        if vertex == self._w:
            return self._v
        raise ValueError(f"vertex {vertex} is not an endpoint of edge {self}")

    def endpoints(self):
        return self._v, self._w

    def __repr__(self):
        return f"Edge({self._v}, {self._w}, {self._weight!r})"

    def __str__(self):
        return f"{self._v}-{self._w} {self._weight:.5f}"


class WeightedGraph:
    def __init__(self, num_vertices):
        """
        Create an empty graph with `num_vertices` vertices
        Edges are added with add_edge until freeze() is called
        """
        if num_vertices < 0:
            raise ValueError("Number of vertices must be non-negative")
        self._num_vertices = int(num_vertices)
        self._edges = []
        self._adj = [[] for _ in range(self._num_vertices)]
        self._frozen = False

    def _validate_vertex(self, v):
        if not 0 <= v < self._num_vertices:
            raise OutOfRangeError(v, self._num_vertices)

    def add_edge(self, edge):
        """Add an edge; both endpoints must be in range"""
        if self._frozen:
            raise FrozenGraphError("graph is frozen, no more edges can be added")
        v = edge.either()
        w = edge.other(v)
        # validate both before touching adjacency so a failure leaves no trace
        self._validate_vertex(v)
        self._validate_vertex(w)

        self._edges.append(edge)
        self._adj[v].append(edge)
        if w != v:
            self._adj[w].append(edge)
        return edge

    def freeze(self):
        """End the build phase"""
        self._frozen = True
        return self

    @property
    def frozen(self):
        return self._frozen

    def vertex_count(self):
        return self._num_vertices

    def edge_count(self):
        return len(self._edges)

    def edges_incident_to(self, v):
        self._validate_vertex(v)
        return tuple(self._adj[v])

    def degree(self, v):
        self._validate_vertex(v)
        return len(self._adj[v])

    def all_edges(self):
        """All edges in insertion order"""
        return tuple(self._edges)

    def __repr__(self):
        return f"WeightedGraph(V={self._num_vertices}, E={len(self._edges)})"


def new_graph(vertex_count):
    return WeightedGraph(vertex_count)


def add_edge(graph, u, v, weight):
    """Build an Edge(u, v, weight) and add it to `graph`"""
    return graph.add_edge(Edge(u, v, weight))
