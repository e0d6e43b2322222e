"""
Union-find over vertices 0..n-1
Path compression in find, union by subtree size
"""

from mst_errors import OutOfRangeError


class DisjointSet:
    def __init__(self, n):
        if n < 0:
            raise ValueError("Number of elements must be non-negative")
        self._parent = list(range(n))
        self._size = [1] * n
        self._count = n

    def _validate(self, v):
        if not 0 <= v < len(self._parent):
            raise OutOfRangeError(v, len(self._parent))

    def find(self, v):
        """Return the representative of v's component"""
        self._validate(v)
        root = v
        while root != self._parent[root]:
            root = self._parent[root]

        # attach every node on the path directly under the root
        while v != root:
            next_v = self._parent[v]
            self._parent[v] = root
            v = next_v
        return root

    def union(self, a, b):
        """Merge the components of a and b, smaller tree under larger root"""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return

        if self._size[root_a] < self._size[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        self._size[root_a] += self._size[root_b]
        self._count -= 1

    def connected(self, a, b):
        return self.find(a) == self.find(b)

    def count(self):
        """Number of components"""
        return self._count

    def size(self, v):
        """Number of elements in v's component"""
        return self._size[self.find(v)]

    def __len__(self):
        return len(self._parent)
