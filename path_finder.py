"""
path_finder.py - Unique Path Lookup
===================================
There is exactly one simple path between two distinct cities of a tree.
PathFinder returns it with an iterative depth-first search.
"""

import logging
from typing import List

import numpy as np

from models import TripTree


logger = logging.getLogger(__name__)


class PathNotFoundError(RuntimeError):
    """The destination was unreachable. Only possible if the tree is broken."""
    pass


class PathFinder:
    """Finds the path between two cities of a TripTree."""

    def __init__(self, tree: TripTree):
        self.tree = tree
        self.queries = 0

    def path(self, start: int, dest: int) -> List[int]:
        """
        Ordered list of cities from start to dest, both included.

        Uses an explicit stack so deep trees do not hit the recursion limit.
        """
        self.queries += 1
        if start == dest:
            return [start]

        seen = np.zeros(self.tree.size, dtype=bool)
        seen[start] = True
        # each frame is (city, iterator over its neighbors)
        stack = [(start, iter(self.tree.neighbors(start)))]

        while stack:
            city, neighbors = stack[-1]
            advanced = False
            for neighbor in neighbors:
                if seen[neighbor]:
                    continue
                if neighbor == dest:
                    return [frame[0] for frame in stack] + [dest]
                seen[neighbor] = True
                stack.append((neighbor, iter(self.tree.neighbors(neighbor))))
                advanced = True
                break
            if not advanced:
                stack.pop()

        raise PathNotFoundError(f"No path from city {start} to city {dest}")
