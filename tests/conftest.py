import pytest

from bruteforce_tsp import TSPInstance


@pytest.fixture
def triangle():
    return TSPInstance(coords=[(0, 0), (0, 3), (4, 0)], name="triangle")


@pytest.fixture
def unit_square():
    return TSPInstance(coords=[(0, 0), (0, 1), (1, 1), (1, 0)], name="square")
