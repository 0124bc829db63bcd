"""
selection_set.py - Committed Cities of a Trip Plan
==================================================
The set of cities included in the plan under construction, plus a cache
of city pairs whose connecting path is already fully included.

Min/max contract: add() keeps cached aggregates current, remove()
invalidates them, and the next min()/max() call recomputes them from the
members.
"""

from typing import Iterable, Optional, Sequence, Set, Tuple

from models import TripPlan, TripTree


def pair_key(a: int, b: int) -> Tuple[int, int]:
    """Canonical key for an unordered pair of cities."""
    return (a, b) if a <= b else (b, a)


class PathCache:
    """Symmetric record of city pairs known to be connected inside the set."""

    def __init__(self, pairs: Optional[Set[Tuple[int, int]]] = None):
        self._pairs: Set[Tuple[int, int]] = set(pairs) if pairs else set()

    def __len__(self) -> int:
        return len(self._pairs)

    def mark(self, a: int, b: int):
        self._pairs.add(pair_key(a, b))

    def contains(self, a: int, b: int) -> bool:
        return pair_key(a, b) in self._pairs

    def copy(self) -> 'PathCache':
        return PathCache(self._pairs)


class SelectionSet:
    """Cities committed to the trip plan."""

    def __init__(self, tree: TripTree, cities: Iterable[int] = ()):
        self.tree = tree
        self._members: Set[int] = set()
        self.paths = PathCache()
        self._min: Optional[int] = None
        self._max: Optional[int] = None
        self.update(cities)

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, city: int) -> bool:
        return city in self._members

    def __iter__(self):
        return iter(self._members)

    @property
    def size(self) -> int:
        return len(self._members)

    def add(self, city: int):
        if city in self._members:
            return
        self._members.add(city)
        if self._min is not None:
            level = self.tree.attractiveness_of(city)
            self._min = min(self._min, level)
            self._max = max(self._max, level)

    def update(self, cities: Iterable[int]):
        for city in cities:
            self.add(city)

    def remove(self, city: int):
        self._members.remove(city)
        self._min = None
        self._max = None

    def add_path(self, frm: int, to: int, path: Sequence[int]):
        """
        Merge a path into the set and record every sub-path it makes
        available: adjacent pairs, pairs with either endpoint, and (frm, to).
        """
        self.update(path)
        for i in range(len(path) - 1):
            self.paths.mark(path[i], path[i + 1])
            self.paths.mark(frm, path[i + 1])
            self.paths.mark(path[i], to)
        self.paths.mark(frm, to)

    def contains_path(self, a: int, b: int) -> bool:
        return self.paths.contains(a, b)

    def _aggregate(self):
        if not self._members:
            raise ValueError("min()/max() of an empty selection")
        levels = self.tree.attractiveness[list(self._members)]
        self._min = int(levels.min())
        self._max = int(levels.max())

    def min(self) -> int:
        """Lowest attractiveness among the members."""
        if self._min is None:
            self._aggregate()
        return self._min

    def max(self) -> int:
        """Highest attractiveness among the members."""
        if self._max is None:
            self._aggregate()
        return self._max

    def copy(self) -> 'SelectionSet':
        """Independent membership and path cache."""
        clone = SelectionSet.__new__(SelectionSet)
        clone.tree = self.tree
        clone._members = set(self._members)
        clone.paths = self.paths.copy()
        clone._min = self._min
        clone._max = self._max
        return clone

    def to_plan(self) -> TripPlan:
        return TripPlan.of(self._members)

    def __repr__(self) -> str:
        return f"SelectionSet({sorted(self._members)})"
