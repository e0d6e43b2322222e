"""
Kruskal's algorithm for a minimum spanning tree (or forest), with
operation counting

Counts:
 - each edge processed during the scan
 - the two find() calls made per edge
 - each successful union()
 - each edge added to the forest
The sort is charged a flat E*log2(E) as a rough cost model for the
sorting phase, not as an exact comparison count.
"""

import math

from disjoint_set import DisjointSet
from mst_check import check_mst
from mst_errors import MSTCheckError
from mst_result import MSTResult
from operation_counter import OperationCounter


def sort_cost(num_edges):
    """Estimated cost of sorting `num_edges` edges, floor(E*log2(E))"""
    if num_edges < 2:
        return 0
    return int(num_edges * (math.log(num_edges) / math.log(2)))


class KruskalMST:
    name = "kruskal"

    def __init__(self, graph, check=False):
        """
        Compute a minimum spanning forest of `graph`
        With check=True the result is run through the optimality checker
        """
        self._counter = OperationCounter()
        self._mst = []
        self._weight = 0.0

        # sorted() is stable, equal weights keep insertion order
        edges = sorted(graph.all_edges(), key=lambda e: e.weight)
        self._counter.increment(sort_cost(len(edges)))

        uf = DisjointSet(graph.vertex_count())
        limit = graph.vertex_count() - 1
        i = 0
        while i < len(edges) and len(self._mst) < limit:
            e = edges[i]
            i += 1
            self._counter.increment()  # processing edge
            v = e.either()
            w = e.other(v)

            self._counter.increment(2)  # two find() calls
            if uf.find(v) != uf.find(w):
                uf.union(v, w)
                self._counter.increment()  # union()
                self._mst.append(e)
                self._weight += e.weight
                self._counter.increment()  # edge added

        if check:
            verdict = check_mst(graph, self._mst, self._weight)
            if not verdict:
                raise MSTCheckError(verdict.describe())

    def edges(self):
        """Forest edges in the order they were accepted"""
        return tuple(self._mst)

    def weight(self):
        return self._weight

    @property
    def operation_count(self):
        return self._counter.count

    def result(self):
        return MSTResult(self.name, self._mst, self._weight, self._counter.count)


def kruskal_mst(graph, check=False):
    """Run Kruskal's algorithm on `graph` and return an MSTResult"""
    return KruskalMST(graph, check=check).result()
