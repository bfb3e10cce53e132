from __future__ import annotations
import logging
import math
import numbers
import random
from dataclasses import dataclass
from typing import List, Tuple, Optional

LOG = logging.getLogger(__name__)

Point = Tuple[int, int]


def _euclidean(p: Point, q: Point) -> float:
    dx = p[0] - q[0]
    dy = p[1] - q[1]
    return math.sqrt(dx*dx + dy*dy)


def build_distance_matrix(points: List[Point]) -> List[List[float]]:
    """Symmetric Euclidean distance grid, D[i][j] is the distance from city i to city j."""
    n = len(points)
    if n == 0:
        raise ValueError("Cannot build a distance matrix for zero cities.")
    D = [[0.0]*n for _ in range(n)]
    for i in range(n):
        for j in range(i+1, n):
            D[i][j] = D[j][i] = _euclidean(points[i], points[j])
    LOG.debug("built %dx%d distance matrix", n, n)
    return D


def _is_integer(v) -> bool:
    return isinstance(v, numbers.Integral) and not isinstance(v, bool)


@dataclass
class TSPInstance:
    coords: List[Point]
    width: Optional[int] = None
    name: str = "euclidean_tsp"

    def __post_init__(self):
        for i, (x, y) in enumerate(self.coords):
            if not _is_integer(x) or not _is_integer(y):
                raise ValueError(f"City {i}: coordinates must be integers, got ({x!r}, {y!r})")
            if x < 0 or y < 0:
                raise ValueError(f"City {i}: coordinates must be non-negative, got ({x}, {y})")
            if self.width is not None and (x >= self.width or y >= self.width):
                raise ValueError(f"City {i}: ({x}, {y}) lies outside a map of width {self.width}")
        # plain ints, so numpy scalars never reach the distance arithmetic
        self.coords = [(int(x), int(y)) for x, y in self.coords]

    @staticmethod
    def random_points(n: int, width: int = 100, seed: Optional[int] = None, name: str = "random_points"):
        if width <= 0:
            raise ValueError("Map width must be positive.")
        rng = random.Random(seed)
        coords = [(rng.randrange(width), rng.randrange(width)) for _ in range(n)]
        return TSPInstance(coords=coords, width=width, name=name)

    def distance(self, i: int, j: int) -> float:
        return _euclidean(self.coords[i], self.coords[j])

    def distance_matrix(self) -> List[List[float]]:
        return build_distance_matrix(self.coords)

    def tour_length(self, tour: List[int]) -> float:
        n = len(tour)
        dist = 0.0
        for k in range(n):
            i, j = tour[k], tour[(k + 1) % n]
            dist += self.distance(i, j)
        return dist
