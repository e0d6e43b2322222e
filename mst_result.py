"""
Immutable result of one MST solver run
"""


class MSTResult:
    __slots__ = ("algorithm", "edges", "weight", "operation_count", "elapsed_ms")

    def __init__(self, algorithm, edges, weight, operation_count, elapsed_ms=None):
        object.__setattr__(self, "algorithm", algorithm)
        object.__setattr__(self, "edges", tuple(edges))
        object.__setattr__(self, "weight", float(weight))
        object.__setattr__(self, "operation_count", int(operation_count))
        object.__setattr__(self, "elapsed_ms", elapsed_ms)

    def __setattr__(self, name, value):
        raise AttributeError("MSTResult is immutable")

    def with_elapsed(self, elapsed_ms):
        """Copy of this result with the measured wall-clock time attached"""
        return MSTResult(
            self.algorithm, self.edges, self.weight, self.operation_count, elapsed_ms
        )

    def edge_count(self):
        return len(self.edges)

    def edge_tuples(self):
        """Edges as sorted (min endpoint, max endpoint, weight) tuples"""
        pairs = []
        for e in self.edges:
            v = e.either()
            w = e.other(v)
            pairs.append((min(v, w), max(v, w), e.weight))
        return sorted(pairs)

    def __repr__(self):
        return (
            f"MSTResult({self.algorithm!r}, edges={len(self.edges)}, "
            f"weight={self.weight}, operations={self.operation_count})"
        )
