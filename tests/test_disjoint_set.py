import pytest

from disjoint_set import DisjointSet
from mst_errors import OutOfRangeError


def test_initially_disjoint():
    uf = DisjointSet(5)
    assert uf.count() == 5
    assert [uf.find(v) for v in range(5)] == [0, 1, 2, 3, 4]
    assert not uf.connected(0, 1)


def test_union_connects():
    uf = DisjointSet(6)
    uf.union(0, 1)
    uf.union(2, 3)
    assert uf.connected(0, 1)
    assert uf.find(0) == uf.find(1)
    assert not uf.connected(1, 2)
    assert uf.count() == 4

    uf.union(1, 3)
    assert uf.connected(0, 2)
    assert uf.size(3) == 4
    assert uf.count() == 3


def test_union_same_component_is_noop():
    uf = DisjointSet(3)
    uf.union(0, 1)
    uf.union(1, 0)
    assert uf.count() == 2
    assert uf.size(0) == 2


def test_smaller_tree_goes_under_larger_root():
    uf = DisjointSet(5)
    uf.union(0, 1)
    uf.union(0, 2)
    root = uf.find(0)
    uf.union(3, root)
    assert uf.find(3) == root
    uf.union(root, 4)
    assert uf.find(4) == root


def test_find_is_stable_and_compresses_paths():
    uf = DisjointSet(8)
    for v in range(7):
        uf.union(v, v + 1)
    root = uf.find(7)
    assert all(uf.find(v) == root for v in range(8))
    assert all(uf._parent[v] == root for v in range(8))


def test_out_of_range():
    uf = DisjointSet(3)
    with pytest.raises(OutOfRangeError):
        uf.find(3)
    with pytest.raises(OutOfRangeError):
        uf.union(0, -1)
    with pytest.raises(OutOfRangeError):
        uf.connected(5, 0)
