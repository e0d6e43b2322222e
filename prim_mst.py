"""
Prim's algorithm (eager version) for a minimum spanning tree (or forest),
with operation counting

Counts:
 - each incident edge examined while scanning a vertex
 - each edge that strictly improves distTo[w]
 - the insert() or decrease_key() that follows such an improvement
"""

import math

from index_min_pq import IndexMinPQ
from mst_check import check_mst
from mst_errors import MSTCheckError
from mst_result import MSTResult
from operation_counter import OperationCounter


class PrimMST:
    name = "prim"

    def __init__(self, graph, check=False):
        """
        Compute a minimum spanning forest of `graph`, one Prim run per
        component, seeded from the lowest unvisited vertex
        """
        n = graph.vertex_count()
        self._counter = OperationCounter()
        self._edge_to = [None] * n  # shortest edge from tree vertex to non-tree vertex
        self._dist_to = [math.inf] * n  # weight of that edge
        self._marked = [False] * n  # True once the vertex is on the tree
        self._pq = IndexMinPQ(n)

        for v in range(n):
            if not self._marked[v]:
                self._prim(graph, v)

        if check:
            verdict = check_mst(graph, self.edges(), self.weight())
            if not verdict:
                raise MSTCheckError(verdict.describe())

    def _prim(self, graph, s):
        self._dist_to[s] = 0.0
        self._pq.insert(s, self._dist_to[s])
        while not self._pq.is_empty():
            v = self._pq.delete_min()
            self._scan(graph, v)

    def _scan(self, graph, v):
        self._marked[v] = True
        for e in graph.edges_incident_to(v):
            self._counter.increment()  # edge examined
            w = e.other(v)
            if self._marked[w]:
                continue  # v-w is obsolete

            # ties keep the first edge seen
            if e.weight < self._dist_to[w]:
                self._counter.increment()  # distTo improved
                self._dist_to[w] = e.weight
                self._edge_to[w] = e

                if self._pq.contains(w):
                    self._pq.decrease_key(w, self._dist_to[w])
                else:
                    self._pq.insert(w, self._dist_to[w])
                self._counter.increment()  # insert / decrease_key

    def edges(self):
        """Forest edges, ordered by the vertex they were attached to"""
        return tuple(e for e in self._edge_to if e is not None)

    def weight(self):
        total = 0.0
        for e in self.edges():
            total += e.weight
        return total

    @property
    def operation_count(self):
        return self._counter.count

    def result(self):
        return MSTResult(self.name, self.edges(), self.weight(), self._counter.count)


def prim_mst(graph, check=False):
    """Run Prim's algorithm on `graph` and return an MSTResult"""
    return PrimMST(graph, check=check).result()
