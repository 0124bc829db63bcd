"""
attractiveness_pool.py - Available Cities by Attractiveness
===========================================================
Max-priority structure over the cities not yet in the trip plan.

Cities are bucketed by attractiveness; a sorted list of the levels that
are present gives the top tier in O(1) and keeps level insert/delete
at O(log n) search cost. Copies share their buckets until one side
writes (copy-on-write), so branching the search is cheap.
"""

import bisect
from typing import Dict, Iterable, List, Set

from models import TripTree


class AttractivenessPool:
    """Available cities organized by attractiveness tier."""

    def __init__(self, tree: TripTree, cities: Iterable[int] = ()):
        self.tree = tree
        self._tiers: Dict[int, Set[int]] = {}
        self._levels: List[int] = []
        self._count = 0
        self._owned = True
        for city in cities:
            self.insert(city)

    @classmethod
    def full(cls, tree: TripTree) -> 'AttractivenessPool':
        """Pool holding every city of the tree."""
        return cls(tree, range(tree.size))

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    def __contains__(self, city: int) -> bool:
        tier = self._tiers.get(self.tree.attractiveness_of(city))
        return tier is not None and city in tier

    def __iter__(self):
        for level in reversed(self._levels):
            yield from sorted(self._tiers[level])

    def _ensure_owned(self):
        """Detach shared storage before the first write after a copy."""
        if not self._owned:
            self._tiers = {level: set(members) for level, members in self._tiers.items()}
            self._levels = list(self._levels)
            self._owned = True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def max_attractiveness(self) -> int:
        """Highest attractiveness still available."""
        if not self._levels:
            raise IndexError("max_attractiveness() on an empty pool")
        return self._levels[-1]

    def top_tier(self) -> List[int]:
        """
        Every city sharing the current maximum attractiveness, in index
        order. The pool is left unchanged.
        """
        if not self._levels:
            return []
        return sorted(self._tiers[self._levels[-1]])

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------

    def insert(self, city: int):
        """Make a city available again."""
        self._ensure_owned()
        level = self.tree.attractiveness_of(city)
        tier = self._tiers.get(level)
        if tier is None:
            tier = self._tiers[level] = set()
            bisect.insort(self._levels, level)
        if city not in tier:
            tier.add(city)
            self._count += 1

    def remove(self, city: int):
        """Remove an available city. Raises KeyError if absent."""
        if city not in self:
            raise KeyError(city)
        self._ensure_owned()
        level = self.tree.attractiveness_of(city)
        tier = self._tiers[level]
        tier.remove(city)
        self._count -= 1
        if not tier:
            del self._tiers[level]
            del self._levels[bisect.bisect_left(self._levels, level)]

    def discard_all(self, cities: Iterable[int]):
        """Remove each listed city that is still available."""
        for city in cities:
            if city in self:
                self.remove(city)

    def pop_greater(self, threshold: int) -> List[int]:
        """
        Remove and return every city with attractiveness strictly greater
        than threshold, highest tier first.
        """
        if not self._levels or self._levels[-1] <= threshold:
            return []
        self._ensure_owned()
        popped: List[int] = []
        while self._levels and self._levels[-1] > threshold:
            level = self._levels.pop()
            popped.extend(sorted(self._tiers.pop(level)))
        self._count -= len(popped)
        return popped

    def copy(self) -> 'AttractivenessPool':
        """Independent snapshot sharing storage until either side writes."""
        clone = AttractivenessPool.__new__(AttractivenessPool)
        clone.tree = self.tree
        clone._tiers = self._tiers
        clone._levels = self._levels
        clone._count = self._count
        clone._owned = False
        self._owned = False
        return clone

    def __repr__(self) -> str:
        return f"AttractivenessPool({len(self)} cities, levels={self._levels})"
