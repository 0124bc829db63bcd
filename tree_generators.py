"""
tree_generators.py - Synthetic Road Trees
=========================================
Parent-link (C) and attractiveness (D) arrays for benchmarking and tests.
City 0 is the root in every generated tree (C[0] == 0).
"""

from typing import Optional, Sequence, Tuple

import numpy as np

from config import Config


def straight(n: int) -> np.ndarray:
    """A line 0 - 1 - ... - (n-1)."""
    links = np.arange(n, dtype=np.int64) - 1
    if n:
        links[0] = 0
    return links


def star(n: int) -> np.ndarray:
    """City 0 in the center, every other city a leaf."""
    return np.zeros(n, dtype=np.int64)


def uniform_attractiveness(n: int, value: Optional[int] = None) -> np.ndarray:
    """Same attractiveness for every city."""
    if value is None:
        value = Config.GENERATORS['uniform_attractiveness']
    return np.full(n, value, dtype=np.int64)


def low_root(links: Sequence[int]) -> np.ndarray:
    """Uniform attractiveness with the root city made the least attractive."""
    weights = uniform_attractiveness(len(links))
    if len(weights):
        weights[0] = Config.GENERATORS['low_root_attractiveness']
    return weights


def elevated_endpoint(n: int, base: Optional[int] = None,
                      elevated: Optional[int] = None) -> np.ndarray:
    """Uniform attractiveness with city 0 raised above the rest."""
    weights = uniform_attractiveness(n, base)
    if elevated is None:
        elevated = Config.GENERATORS['elevated_attractiveness']
    if n:
        weights[0] = max(elevated, int(weights[0]) + 1)
    return weights


def random_tree(n: int, seed: Optional[int] = None) -> np.ndarray:
    """Random tree: each city i > 0 links to a uniformly chosen earlier city."""
    rng = np.random.default_rng(seed)
    links = np.zeros(n, dtype=np.int64)
    for i in range(1, n):
        links[i] = rng.integers(0, i)
    return links


def random_attractiveness(n: int, low: Optional[int] = None, high: Optional[int] = None,
                          seed: Optional[int] = None) -> np.ndarray:
    """Random attractiveness in [low, high] inclusive."""
    default_low, default_high = Config.GENERATORS['random_attractiveness_range']
    low = default_low if low is None else low
    high = default_high if high is None else high
    rng = np.random.default_rng(seed)
    return rng.integers(low, high + 1, size=n, dtype=np.int64)


def generate(shape: str, n: int, seed: Optional[int] = None) -> Tuple[np.ndarray, np.ndarray]:
    """(C, D) for a named shape: straight, star, low-root or random."""
    if shape == 'straight':
        return straight(n), elevated_endpoint(n)
    if shape == 'star':
        links = star(n)
        return links, low_root(links)
    if shape == 'low-root':
        links = straight(n)
        return links, low_root(links)
    if shape == 'random':
        return random_tree(n, seed), random_attractiveness(n, seed=None if seed is None else seed + 1)
    raise ValueError(f"Unknown tree shape: {shape}")
