import pytest

from graphseg.disjoint_set import DisjointSet


def test_initial_sets_are_singletons():
    ds = DisjointSet(5)
    assert [ds.find(i) for i in range(5)] == list(range(5))
    assert all(ds.component_size(i) == 1 for i in range(5))
    assert all(ds.internal_difference(i) == 0.0 for i in range(5))
    assert len(ds) == 5


def test_union_joins_and_sums_sizes():
    ds = DisjointSet(4)
    ds.union(0, 1, 2.0)
    ds.union(2, 3, 1.0)
    assert ds.find(0) == ds.find(1)
    assert ds.find(2) == ds.find(3)
    assert ds.find(0) != ds.find(2)
    ds.union(1, 3, 0.5)
    assert len({ds.find(i) for i in range(4)}) == 1
    assert ds.component_size(2) == 4


def test_internal_difference_is_max_weight():
    ds = DisjointSet(4)
    ds.union(0, 1, 2.0)
    ds.union(2, 3, 7.5)
    ds.union(0, 2, 1.0)
    assert ds.internal_difference(1) == 7.5


def test_equal_rank_keeps_first_root():
    ds = DisjointSet(2)
    root = ds.union(0, 1, 1.0)
    assert root == 0
    assert ds.find(1) == 0


def test_union_of_same_set_changes_nothing():
    ds = DisjointSet(3)
    ds.union(0, 1, 1.0)
    ds.union(1, 0, 9.0)
    assert ds.component_size(0) == 2
    assert ds.internal_difference(0) == 1.0


def test_out_of_range_raises():
    ds = DisjointSet(3)
    with pytest.raises(IndexError):
        ds.find(3)
    with pytest.raises(IndexError):
        ds.find(-1)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        DisjointSet(-1)