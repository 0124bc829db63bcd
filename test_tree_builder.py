#!/usr/bin/env python3
"""
Test Tree Builder
=================
Builds the road tree from parent links and checks the precondition errors.
"""

import logging

import numpy as np
import pytest

from tree_builder import TreeBuilder, TreeValidationError, build_tree
from utils import ValidationError

DEMO_C = [1, 3, 0, 3, 2, 4, 4]
DEMO_D = [6, 2, 7, 5, 6, 5, 2]


def test_builds_demo_tree():
    tree = build_tree(DEMO_C, DEMO_D)

    assert tree.size == 7
    assert tree.edge_count == 6
    assert tree.neighbors(0) == (1, 2)
    assert tree.neighbors(4) == (2, 5, 6)
    assert tree.neighbors(3) == (1,)
    assert tree.attractiveness_of(2) == 7
    assert str(tree.cities[5]) == "City(5-5)"


def test_max_tier_is_single_top_city():
    tree = build_tree(DEMO_C, DEMO_D)
    assert tree.max_tier == [2]


def test_max_tier_keeps_every_tied_city():
    tree = build_tree([0, 0, 0, 0], [3, 5, 5, 1])
    assert tree.max_tier == [1, 2]


def test_single_city_tree():
    tree = build_tree([0], [7])
    assert tree.size == 1
    assert tree.edge_count == 0
    assert tree.max_tier == [0]
    assert tree.neighbors(0) == ()


def test_attractiveness_is_copied():
    weights = np.array(DEMO_D)
    tree = build_tree(DEMO_C, weights)
    weights[2] = 100
    assert tree.attractiveness_of(2) == 7
    assert int(tree.attractiveness[2]) == 7


@pytest.mark.parametrize("links, weights, message", [
    ([], [], "at least one city"),
    ([0, 0], [1], "same length"),
    ([0, 5], [1, 1], "out of range"),
    ([0, -1], [1, 1], "out of range"),
    ([0, 1, 1], [1, 1, 1], "needs 2 roads"),
    ([1, 0, 0, 3], [1, 1, 1, 1], "unreachable"),
])
def test_rejects_malformed_input(links, weights, message):
    with pytest.raises(TreeValidationError, match=message):
        TreeBuilder(links, weights).build()


def test_validation_error_hierarchy():
    assert issubclass(TreeValidationError, ValidationError)


@pytest.mark.parametrize("links, weights, name", [
    ([0, 0.9], [1, 2], "C"),
    ([0, 0], [1.9, 1.2], "D"),
    (["0", "0"], [1, 2], "C"),
    ([0, 0], [True, False], "D"),
])
def test_rejects_non_integer_input(links, weights, name):
    with pytest.raises(TreeValidationError, match=f"{name} must hold integers"):
        TreeBuilder(links, weights).build()


def test_accepts_numpy_integer_arrays():
    tree = build_tree(np.array(DEMO_C, dtype=np.int32), np.array(DEMO_D, dtype=np.uint8))
    assert tree.attractiveness.dtype == np.int64
    assert tree.max_tier == [2]


def test_build_logs_tree_summary(caplog):
    caplog.set_level(logging.DEBUG, logger="tree_builder")
    build_tree(DEMO_C, DEMO_D)
    assert "7 cities, 6 roads, max degree 3" in caplog.text
