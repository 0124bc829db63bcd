#!/usr/bin/env python3
"""
Test Tree Generators
====================
Synthetic shapes must always describe valid trees.
"""

import numpy as np
import pytest

from config import Config
from tree_builder import build_tree
from tree_generators import (elevated_endpoint, generate, low_root, random_attractiveness,
                             random_tree, star, straight, uniform_attractiveness)


def test_straight():
    assert straight(5).tolist() == [0, 0, 1, 2, 3]
    assert straight(1).tolist() == [0]


def test_star():
    assert star(4).tolist() == [0, 0, 0, 0]


def test_uniform_attractiveness_default():
    value = Config.GENERATORS['uniform_attractiveness']
    assert uniform_attractiveness(3).tolist() == [value] * 3
    assert uniform_attractiveness(2, 7).tolist() == [7, 7]


def test_low_root():
    weights = low_root(straight(4))
    assert weights[0] < weights[1]
    assert len(set(weights[1:].tolist())) == 1


def test_elevated_endpoint():
    weights = elevated_endpoint(5, base=3, elevated=8)
    assert weights.tolist() == [8, 3, 3, 3, 3]


def test_elevated_endpoint_stays_above_base():
    weights = elevated_endpoint(3, base=10, elevated=2)
    assert weights[0] > weights[1]


def test_random_tree_is_reproducible():
    assert random_tree(12, seed=4).tolist() == random_tree(12, seed=4).tolist()


@pytest.mark.parametrize("seed", range(5))
def test_random_tree_is_a_tree(seed):
    links = random_tree(15, seed=seed)
    assert links[0] == 0
    assert all(links[i] < i for i in range(1, 15))
    tree = build_tree(links, uniform_attractiveness(15))
    assert tree.edge_count == 14


def test_random_attractiveness_range():
    weights = random_attractiveness(200, 2, 4, seed=1)
    assert weights.min() >= 2
    assert weights.max() <= 4
    assert weights.dtype == np.int64


@pytest.mark.parametrize("shape", ["straight", "star", "low-root", "random"])
def test_generate_shapes_build(shape):
    links, weights = generate(shape, 9, seed=2)
    tree = build_tree(links, weights)
    assert tree.size == 9


def test_generate_unknown_shape():
    with pytest.raises(ValueError, match="Unknown tree shape"):
        generate("ring", 5)
