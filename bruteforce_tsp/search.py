from __future__ import annotations
import logging
import math
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

LOG = logging.getLogger(__name__)

TourHook = Callable[[List[int], float], None]


@dataclass
class SearchConfig:
    # score a tour and its reverse only once; the kept direction may differ
    # from the unfolded best in the last bit, since its edges are summed in reverse
    fold_reflections: bool = False
    record_history: bool = True     # keep every new-minimum tour for visualization


@dataclass
class SearchResult:
    best_tour: List[int]
    best_length: float
    leaf_count: int
    history_best_lengths: List[float]
    history_best_tours: List[List[int]]
    config: SearchConfig
    elapsed_sec: float


class ExhaustiveSearch:
    """Depth-first enumeration of every tour anchored at city 0.

    The partial tour is an order array plus a ``used`` mask, so no lists are
    rebuilt per call. Each call gets the running minimum of everything explored
    so far and returns the minimum of its own subtree, which the caller folds
    in before moving to the next sibling.

    ``on_tour`` is called for every complete tour, ``on_new_min`` whenever a
    tour is strictly shorter than the running minimum. Both get a copy of the
    tour and its length.
    """
    def __init__(self, dist_matrix: List[List[float]], cfg: Optional[SearchConfig] = None,
                 on_tour: Optional[TourHook] = None, on_new_min: Optional[TourHook] = None):
        n = len(dist_matrix)
        if n == 0:
            raise ValueError("Search needs at least one city.")
        if any(len(row) != n for row in dist_matrix):
            raise ValueError("Distance matrix must be square.")
        self.D = dist_matrix
        self.n = n
        self.cfg = cfg or SearchConfig()
        self.on_tour = on_tour
        self.on_new_min = on_new_min

        self._order = [0]*n
        self._used = [False]*n

        self.best_tour: List[int] = []
        self.best_length = math.inf
        self.leaf_count = 0
        self.history_best_lengths: List[float] = []
        self.history_best_tours: List[List[int]] = []

    def _reset(self):
        self._order = [0]*self.n
        self._used = [False]*self.n
        self._used[0] = True
        self.best_tour = []
        self.best_length = math.inf
        self.leaf_count = 0
        self.history_best_lengths = []
        self.history_best_tours = []

    def run(self) -> SearchResult:
        start = time.time()
        self._reset()
        LOG.info("exhaustive search over %d cities (fold_reflections=%s)", self.n, self.cfg.fold_reflections)

        if self.n == 1:
            # single city: the only tour is the self-loop
            self._score_leaf(0.0, math.inf)
        else:
            self.best_length = self._traverse(1, 0.0, math.inf)

        elapsed = time.time() - start
        LOG.info("best length %.4f after %d tours in %.3fs", self.best_length, self.leaf_count, elapsed)
        return SearchResult(best_tour=list(self.best_tour), best_length=self.best_length,
                            leaf_count=self.leaf_count,
                            history_best_lengths=self.history_best_lengths,
                            history_best_tours=self.history_best_tours,
                            config=self.cfg, elapsed_sec=elapsed)

    def _traverse(self, depth: int, partial: float, current_min: float) -> float:
        if depth == self.n:
            return self._score_leaf(partial, current_min)

        D, order, used = self.D, self._order, self._used
        prev = order[depth-1]
        last_slot = depth == self.n - 1
        for c in range(1, self.n):
            if used[c]:
                continue
            # reversed twin of a tour already scored (or still to come) with order[1] < order[-1]
            if self.cfg.fold_reflections and last_slot and depth > 1 and c < order[1]:
                continue
            used[c] = True
            order[depth] = c
            local_min = self._traverse(depth + 1, partial + D[prev][c], current_min)
            if local_min < current_min:
                current_min = local_min
            used[c] = False
        return current_min

    def _score_leaf(self, partial: float, current_min: float) -> float:
        order = self._order
        total = partial + self.D[order[-1]][order[0]]
        self.leaf_count += 1
        if self.on_tour is not None:
            self.on_tour(list(order), total)

        if total < current_min:
            current_min = total
            self.best_length = total
            self.best_tour = list(order)
            LOG.debug("new min %.4f: %s", total, order)
            if self.cfg.record_history:
                self.history_best_lengths.append(total)
                self.history_best_tours.append(list(order))
            if self.on_new_min is not None:
                self.on_new_min(list(order), total)
        return current_min


def brute_force(dist_matrix: List[List[float]], cfg: Optional[SearchConfig] = None) -> float:
    """Length of the shortest closed tour over ``dist_matrix``."""
    return ExhaustiveSearch(dist_matrix, cfg).run().best_length


def expected_leaf_count(n: int, fold_reflections: bool = False) -> int:
    if n <= 0:
        raise ValueError("n must be positive")
    count = math.factorial(n - 1)
    if fold_reflections and n >= 3:
        count //= 2
    return count
