"""
models.py - Core Data Models for the Tree Trip Planner
======================================================
Defines the data structures shared by the builder, the path finder
and the search engine.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Tuple

import numpy as np


@dataclass(frozen=True)
class City:
    """A node of the road tree. Immutable once the tree is built."""
    index: int
    attractiveness: int
    neighbors: Tuple[int, ...] = ()

    @property
    def degree(self) -> int:
        """Number of direct roads."""
        return len(self.neighbors)

    def __str__(self) -> str:
        return f"City({self.index}-{self.attractiveness})"


@dataclass
class TripTree:
    """
    The road network: cities indexed 0..N-1, their attractiveness vector,
    and the group of cities sharing the global maximum attractiveness.
    """
    cities: List[City]
    attractiveness: np.ndarray
    max_tier: List[int] = field(default_factory=list)

    @property
    def size(self) -> int:
        """Number of cities."""
        return len(self.cities)

    @property
    def edge_count(self) -> int:
        """Number of undirected roads."""
        return sum(city.degree for city in self.cities) // 2

    def neighbors(self, index: int) -> Tuple[int, ...]:
        """Direct neighbors of a city."""
        return self.cities[index].neighbors

    def attractiveness_of(self, index: int) -> int:
        """Attractiveness of a city as a plain int."""
        return self.cities[index].attractiveness


@dataclass(frozen=True)
class TripPlan:
    """
    A valid trip plan: a connected set of cities closed under the
    attractiveness rule. Search branches return a plan or None (infeasible).
    """
    cities: FrozenSet[int] = frozenset()

    @classmethod
    def of(cls, cities: Iterable[int]) -> 'TripPlan':
        """Build a plan from any iterable of city indices."""
        return cls(frozenset(int(c) for c in cities))

    @property
    def size(self) -> int:
        """Number of cities in the plan."""
        return len(self.cities)

    def sorted_cities(self) -> List[int]:
        """City indices in ascending order."""
        return sorted(self.cities)
