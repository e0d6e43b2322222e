"""
Indexed minimum priority queue over the ids 0..n-1

Binary heap (1-based) with an id -> heap position index, so contains() is
O(1) and decrease_key() is O(log n). Equal keys come out in insertion order.
"""

from mst_errors import (
    DuplicateInsertError,
    EmptyQueueError,
    InvalidKeyUpdateError,
    OutOfRangeError,
)


class IndexMinPQ:
    def __init__(self, max_n):
        if max_n < 0:
            raise ValueError("Capacity must be non-negative")
        self._max_n = max_n
        self._n = 0
        self._pq = [0] * (max_n + 1)  # heap position -> id
        self._qp = [-1] * max_n  # id -> heap position, -1 when absent
        self._keys = [None] * max_n
        self._order = [0] * max_n  # insertion stamp, breaks key ties
        self._stamp = 0

    def _validate(self, i):
        if not 0 <= i < self._max_n:
            raise OutOfRangeError(i, self._max_n)

    def is_empty(self):
        return self._n == 0

    def __len__(self):
        return self._n

    def contains(self, i):
        self._validate(i)
        return self._qp[i] != -1

    def __contains__(self, i):
        return self.contains(i)

    def insert(self, i, key):
        """Associate `key` with id `i`"""
        if self.contains(i):
            raise DuplicateInsertError(f"id {i} is already in the priority queue")
        self._n += 1
        self._qp[i] = self._n
        self._pq[self._n] = i
        self._keys[i] = key
        self._order[i] = self._stamp
        self._stamp += 1
        self._swim(self._n)

    def min_index(self):
        if self._n == 0:
            raise EmptyQueueError("priority queue underflow")
        return self._pq[1]

    def min_key(self):
        return self._keys[self.min_index()]

    def key_of(self, i):
        if not self.contains(i):
            raise KeyError(f"id {i} is not in the priority queue")
        return self._keys[i]

    def delete_min(self):
        """Remove the id with the smallest key and return it"""
        if self._n == 0:
            raise EmptyQueueError("priority queue underflow")
        min_id = self._pq[1]
        self._exch(1, self._n)
        self._n -= 1
        self._sink(1)

        self._qp[min_id] = -1
        self._keys[min_id] = None
        self._pq[self._n + 1] = 0
        return min_id

    def decrease_key(self, i, key):
        """Lower the key of id `i`; the new key must be strictly smaller"""
        if not self.contains(i):
            raise InvalidKeyUpdateError(f"id {i} is not in the priority queue")
        current = self._keys[i]
        if not key < current:
            raise InvalidKeyUpdateError(
                f"new key {key} is not strictly less than current key {current} for id {i}"
            )
        self._keys[i] = key
        self._swim(self._qp[i])

    def _greater(self, a, b):
        i, j = self._pq[a], self._pq[b]
        return (self._keys[i], self._order[i]) > (self._keys[j], self._order[j])

    def _exch(self, a, b):
        pq = self._pq
        pq[a], pq[b] = pq[b], pq[a]
        self._qp[pq[a]] = a
        self._qp[pq[b]] = b

    def _swim(self, k):
        while k > 1 and self._greater(k // 2, k):
            self._exch(k, k // 2)
            k //= 2

    def _sink(self, k):
        while 2 * k <= self._n:
            j = 2 * k
            if j < self._n and self._greater(j, j + 1):
                j += 1
            if not self._greater(k, j):
                break
            self._exch(k, j)
            k = j
