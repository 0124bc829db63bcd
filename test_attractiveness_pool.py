#!/usr/bin/env python3
"""
Test Attractiveness Pool
========================
Tier access, strict-threshold popping and copy-on-write snapshots.
"""

import pytest

from attractiveness_pool import AttractivenessPool
from tree_builder import build_tree

# attractiveness: 0:6 1:2 2:7 3:5 4:6 5:5 6:2
DEMO_TREE = build_tree([1, 3, 0, 3, 2, 4, 4], [6, 2, 7, 5, 6, 5, 2])


@pytest.fixture
def pool():
    return AttractivenessPool.full(DEMO_TREE)


def test_full_pool(pool):
    assert len(pool) == 7
    assert pool
    assert pool.max_attractiveness() == 7
    assert list(pool) == [2, 0, 4, 3, 5, 1, 6]


def test_top_tier_does_not_remove(pool):
    assert pool.top_tier() == [2]
    assert pool.top_tier() == [2]
    assert len(pool) == 7


def test_top_tier_after_remove(pool):
    pool.remove(2)
    assert pool.top_tier() == [0, 4]
    assert 2 not in pool
    assert len(pool) == 6


def test_pop_greater_is_strict(pool):
    assert pool.pop_greater(5) == [2, 0, 4]
    assert len(pool) == 4
    assert pool.top_tier() == [3, 5]
    assert pool.pop_greater(5) == []


def test_pop_greater_above_max_is_empty(pool):
    assert pool.pop_greater(7) == []
    assert len(pool) == 7


def test_pop_greater_can_empty_the_pool(pool):
    assert len(pool.pop_greater(0)) == 7
    assert not pool
    assert pool.top_tier() == []
    with pytest.raises(IndexError):
        pool.max_attractiveness()


def test_insert_restores_tier(pool):
    pool.remove(2)
    pool.insert(2)
    assert pool.top_tier() == [2]
    assert len(pool) == 7


def test_insert_is_idempotent(pool):
    pool.insert(3)
    assert len(pool) == 7


def test_remove_missing_city(pool):
    pool.remove(6)
    with pytest.raises(KeyError):
        pool.remove(6)


def test_discard_all_skips_missing(pool):
    pool.remove(1)
    pool.discard_all([3, 1, 0, 2])
    assert sorted(pool) == [4, 5, 6]


def test_copy_is_independent(pool):
    snapshot = pool.copy()
    snapshot.remove(2)
    snapshot.pop_greater(4)

    assert pool.top_tier() == [2]
    assert len(pool) == 7
    assert sorted(snapshot) == [1, 6]


def test_source_writes_do_not_leak_into_copy(pool):
    snapshot = pool.copy()
    pool.pop_greater(1)
    pool.insert(2)

    assert len(snapshot) == 7
    assert snapshot.top_tier() == [2]
    assert sorted(pool) == [1, 2, 6]


def test_copy_of_copy(pool):
    first = pool.copy()
    second = first.copy()
    first.remove(0)
    second.remove(4)

    assert 0 in pool and 4 in pool
    assert 0 not in first and 4 in first
    assert 4 not in second and 0 in second


def test_pool_from_subset():
    pool = AttractivenessPool(DEMO_TREE, [1, 6, 3])
    assert pool.top_tier() == [3]
    assert len(pool) == 3
