"""
Per-solver counter of elementary algorithm steps
"""


class OperationCounter:
    """Monotonically increasing step counter owned by one solver run"""

    def __init__(self):
        self._count = 0

    def increment(self, amount=1):
        if amount < 0:
            raise ValueError("operation counter can only increase")
        self._count += amount
        return self._count

    @property
    def count(self):
        return self._count

    def __int__(self):
        return self._count

    def __repr__(self):
        return f"OperationCounter({self._count})"
