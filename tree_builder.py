"""
tree_builder.py - Road Tree Construction
========================================
Builds the city table and road adjacency from the parent-link and
attractiveness arrays, and finds the cities of maximum attractiveness.
"""

import logging
from collections import deque
from typing import List, Sequence

import numpy as np

from models import City, TripTree
from utils import ValidationError


logger = logging.getLogger(__name__)


class TreeValidationError(ValidationError):
    """Raised when the input arrays do not describe a tree."""
    pass


class TreeBuilder:
    """
    Builds a TripTree from the arrays C (parent links) and D (attractiveness).

    C[i] == i marks a city with no extra road; any other value adds the
    undirected road (i, C[i]).
    """

    def __init__(self, parent_links: Sequence[int], attractiveness: Sequence[int]):
        self.parent_links = np.asarray(parent_links)
        self.attractiveness = np.asarray(attractiveness)

    @staticmethod
    def _integer_array(values: np.ndarray, name: str) -> np.ndarray:
        """Cast to int64, refusing anything that is not already integral."""
        if not np.issubdtype(values.dtype, np.integer):
            raise TreeValidationError(f"{name} must hold integers, got dtype {values.dtype}")
        return values.astype(np.int64)

    def validate(self):
        """Check the tree preconditions. Raises TreeValidationError."""
        links = self.parent_links
        weights = self.attractiveness

        if links.ndim != 1 or weights.ndim != 1:
            raise TreeValidationError("C and D must be one-dimensional")
        n = len(links)
        if n == 0:
            raise TreeValidationError("The tree must contain at least one city")
        if len(weights) != n:
            raise TreeValidationError(
                f"C and D must have the same length, got {n} and {len(weights)}")

        links = self.parent_links = self._integer_array(links, "C")
        self.attractiveness = self._integer_array(weights, "D")

        bad = np.flatnonzero((links < 0) | (links >= n))
        if bad.size:
            i = int(bad[0])
            raise TreeValidationError(f"C[{i}] = {int(links[i])} is out of range [0, {n})")

        edges = int(np.count_nonzero(links != np.arange(n)))
        if edges != n - 1:
            raise TreeValidationError(f"A tree of {n} cities needs {n - 1} roads, got {edges}")

    def build(self) -> TripTree:
        """Validate the input and build the tree."""
        self.validate()

        n = len(self.parent_links)
        adjacency: List[List[int]] = [[] for _ in range(n)]
        for i, parent in enumerate(self.parent_links.tolist()):
            if parent == i:
                continue
            adjacency[i].append(parent)
            adjacency[parent].append(i)

        self._check_connected(adjacency)

        cities = [
            City(index=i, attractiveness=int(self.attractiveness[i]), neighbors=tuple(adjacency[i]))
            for i in range(n)
        ]
        tree = TripTree(cities=cities, attractiveness=self.attractiveness.copy(),
                        max_tier=self.max_tier())

        logger.debug(f"Built tree: {tree.size} cities, {tree.edge_count} roads, "
                     f"max degree {max(city.degree for city in cities)}, "
                     f"max attractiveness {int(self.attractiveness.max())} "
                     f"shared by {len(tree.max_tier)} cities")

        return tree

    def max_tier(self) -> List[int]:
        """Indices of every city sharing the global maximum attractiveness."""
        top = self.attractiveness.max()
        return np.flatnonzero(self.attractiveness == top).tolist()

    @staticmethod
    def _check_connected(adjacency: List[List[int]]):
        """With N-1 roads, connected is equivalent to acyclic."""
        n = len(adjacency)
        seen = np.zeros(n, dtype=bool)
        seen[0] = True
        queue = deque([0])
        reached = 1

        while queue:
            current = queue.popleft()
            for neighbor in adjacency[current]:
                if not seen[neighbor]:
                    seen[neighbor] = True
                    reached += 1
                    queue.append(neighbor)

        if reached != n:
            missing = int(np.flatnonzero(~seen)[0])
            raise TreeValidationError(
                f"Roads do not connect all cities: city {missing} is unreachable from city 0")


def build_tree(parent_links: Sequence[int], attractiveness: Sequence[int]) -> TripTree:
    """Convenience wrapper around TreeBuilder."""
    return TreeBuilder(parent_links, attractiveness).build()
