#!/usr/bin/env python3
"""
Search Engine - Tier-by-Tier Backtracking
=========================================
Finds the largest trip plan of at most K cities that is connected and
closed under the attractiveness rule: including a city forces every
city of strictly greater attractiveness into the plan.

The search walks attractiveness tiers from the top down. Each tier
member is proposed in turn on copies of the committed set and the pool;
the proposal pulls in more attractive cities, then the paths that
connect them, repeating until nothing new is forced. Branches that grow
past K are pruned.
"""

import logging
import time
from typing import Dict, List, Optional, Sequence

from attractiveness_pool import AttractivenessPool
from config import Config
from models import TripPlan, TripTree
from path_finder import PathFinder
from selection_set import SelectionSet
from tree_builder import TreeBuilder
from utils import validate_max_cities


logger = logging.getLogger(__name__)


class SearchEngine:
    """
    Backtracking search over a TripTree.

    Branch results are Optional[TripPlan]: None means the branch cannot
    hold a plan within K at all, which is distinct from any plan size.
    """

    def __init__(self, tree: TripTree, progress_interval: Optional[int] = None):
        self.tree = tree
        self.path_finder = PathFinder(tree)
        self.progress_interval = progress_interval or Config.get('SEARCH.progress_interval')

        # Search statistics
        self.cities_proposed = 0
        self.branches_pruned = 0
        self.start_time = time.time()

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def search(self, k: int) -> TripPlan:
        """Best plan of at most k cities, seeded with the max-attractiveness tier."""
        self.cities_proposed = 0
        self.branches_pruned = 0
        self.start_time = time.time()

        pool = AttractivenessPool.full(self.tree)
        selection = SelectionSet(self.tree)
        plan = self.try_tier(self.tree.max_tier, k, selection, pool)

        # a lone max-attractiveness city always fits because k >= 1
        return plan if plan is not None else selection.to_plan()

    # ------------------------------------------------------------------
    # Recursive search
    # ------------------------------------------------------------------

    def try_tier(self, tier: Sequence[int], k: int, selection: SelectionSet,
                 pool: AttractivenessPool) -> Optional[TripPlan]:
        """
        Propose each city of a same-attractiveness tier in turn and keep the
        largest result. Stops at the first plan of exactly k cities.
        """
        best: Optional[TripPlan] = None
        for city in tier:
            pool.remove(city)
            try:
                plan = self.try_city(city, k, selection, pool)
            finally:
                pool.insert(city)
            if plan is None:
                continue
            if plan.size == k:
                return plan
            if best is None or plan.size > best.size:
                best = plan
        return best

    def try_city(self, start: int, k: int, selection: SelectionSet,
                 pool: AttractivenessPool) -> Optional[TripPlan]:
        """Propose adding start to a copy of the selection and resolve it."""
        self.cities_proposed += 1
        if self.cities_proposed % self.progress_interval == 0:
            elapsed = time.time() - self.start_time
            logger.info(f"  Proposed {self.cities_proposed} cities in {elapsed:.1f}s, "
                        f"pruned: {self.branches_pruned}")

        available = pool.copy()
        proposed = selection.copy()
        proposed.add(start)

        # Every more attractive city must come along, connected or not yet
        higher = available.pop_greater(self.tree.attractiveness_of(start))
        proposed.update(higher)
        if len(proposed) > k:
            self.branches_pruned += 1
            logger.debug(f"Prune {start}: {len(proposed)} forced cities exceed K={k}")
            return None

        # Connect every proposed city to start. New cities on a path may
        # lower the minimum and force more cities in, which need paths too.
        working = list(proposed)
        while working:
            city = working.pop(0)
            if city == start or proposed.contains_path(start, city):
                continue

            need = self.path_finder.path(start, city)
            proposed.add_path(start, city, need)
            if len(proposed) > k:
                self.branches_pruned += 1
                logger.debug(f"Prune {start}: path to {city} exceeds K={k}")
                return selection.to_plan()
            available.discard_all(need)

            forced = available.pop_greater(proposed.min())
            proposed.update(forced)
            if len(proposed) > k:
                self.branches_pruned += 1
                logger.debug(f"Prune {start}: {len(forced)} cities forced by path to {city} exceed K={k}")
                return selection.to_plan()
            working.extend(forced)

        plan = self.advance(proposed, k, available)
        if plan is None:
            return proposed.to_plan()
        return plan

    def advance(self, selection: SelectionSet, k: int,
                pool: AttractivenessPool) -> Optional[TripPlan]:
        """Check a stable plan and extend it with the next tier if it is short of k."""
        size = len(selection)
        if size > k:
            return None
        if size == k:
            return selection.to_plan()
        if not pool:
            return selection.to_plan()

        tier = pool.top_tier()
        logger.debug(f"Advance {size}/{k}: next tier at attractiveness "
                     f"{pool.max_attractiveness()} with {len(tier)} cities")
        plan = self.try_tier(tier, k, selection, pool)
        if plan is None:
            return selection.to_plan()
        return plan

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def search_stats(self) -> Dict:
        """Counters of the last search."""
        elapsed = time.time() - self.start_time
        return {
            'cities_proposed': self.cities_proposed,
            'branches_pruned': self.branches_pruned,
            'path_queries': self.path_finder.queries,
            'search_time': elapsed,
        }


def plan_trip(K: int, C: Sequence[int], D: Sequence[int]) -> Dict:
    """
    Solve one instance and return the answer with its witness plan and
    search statistics.
    """
    k = validate_max_cities(K)
    tree = TreeBuilder(C, D).build()

    logger.info(f"Planning trip: {tree.size} cities, K={k}, "
                f"{len(tree.max_tier)} cities at max attractiveness")

    engine = SearchEngine(tree)
    plan = engine.search(k)
    stats = engine.search_stats()

    logger.info(f"Trip plan: {plan.size} cities {plan.sorted_cities()}")
    logger.info(f"  Proposed: {stats['cities_proposed']}, pruned: {stats['branches_pruned']}, "
                f"time: {stats['search_time']:.3f}s")

    return {
        'answer': plan.size,
        'cities': plan.sorted_cities(),
        'max_tier': list(tree.max_tier),
        'num_cities': tree.size,
        'max_cities': k,
        'search_stats': stats,
    }


def solve(K: int, C: Sequence[int], D: Sequence[int]) -> int:
    """Size of the largest valid trip plan of at most K cities."""
    k = validate_max_cities(K)
    tree = TreeBuilder(C, D).build()
    return SearchEngine(tree).search(k).size


def best_plan(K: int, C: Sequence[int], D: Sequence[int]) -> List[int]:
    """Cities of one largest valid trip plan, in index order."""
    k = validate_max_cities(K)
    tree = TreeBuilder(C, D).build()
    return SearchEngine(tree).search(k).sorted_cities()
