import math

import pytest

from bruteforce_tsp import (ExhaustiveSearch, SearchConfig, TSPInstance, brute_force,
                            expected_leaf_count)


def _search(coords, **kwargs):
    D = TSPInstance(coords=coords).distance_matrix()
    return ExhaustiveSearch(D, SearchConfig(**kwargs)).run()


def test_right_triangle_perimeter(triangle):
    assert brute_force(triangle.distance_matrix()) == 12.0


def test_unit_square_takes_the_perimeter(unit_square):
    res = ExhaustiveSearch(unit_square.distance_matrix()).run()
    assert res.best_length == 4.0
    assert res.best_tour == [0, 1, 2, 3]


def test_collinear_points_go_out_and_back():
    assert _search([(0, 0), (1, 0), (2, 0)]).best_length == 4.0


def test_single_city():
    res = _search([(5, 5)])
    assert res.best_length == 0.0
    assert res.best_tour == [0]
    assert res.leaf_count == 1


def test_two_cities():
    res = _search([(0, 0), (3, 4)])
    assert res.best_length == 10.0
    assert res.best_tour == [0, 1]
    assert res.leaf_count == 1


def test_empty_matrix_rejected():
    with pytest.raises(ValueError):
        ExhaustiveSearch([])


def test_non_square_matrix_rejected():
    with pytest.raises(ValueError):
        ExhaustiveSearch([[0.0, 1.0], [1.0]])


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 6, 7])
def test_every_ordering_is_scored(n):
    D = TSPInstance.random_points(n, width=100, seed=n).distance_matrix()
    seen = []
    res = ExhaustiveSearch(D, on_tour=lambda tour, length: seen.append(tuple(tour))).run()
    assert res.leaf_count == math.factorial(n - 1) == expected_leaf_count(n)
    assert len(seen) == len(set(seen)) == res.leaf_count
    assert all(tour[0] == 0 and sorted(tour) == list(range(n)) for tour in seen)


@pytest.mark.parametrize("n", [3, 4, 5, 6, 7])
def test_folded_reflections_halve_the_work(n):
    D = TSPInstance.random_points(n, width=100, seed=40 + n).distance_matrix()
    seen = []
    folded = ExhaustiveSearch(D, SearchConfig(fold_reflections=True),
                              on_tour=lambda tour, length: seen.append(tuple(tour))).run()
    full = ExhaustiveSearch(D).run()
    assert folded.leaf_count == math.factorial(n - 1) // 2 == expected_leaf_count(n, True)
    # no tour appears together with its reverse
    for tour in seen:
        assert (0,) + tuple(reversed(tour[1:])) not in seen
    assert folded.best_length == pytest.approx(full.best_length)


def test_running_minimum_never_increases():
    D = TSPInstance.random_points(8, width=100, seed=9).distance_matrix()
    minima = []
    res = ExhaustiveSearch(D, on_new_min=lambda tour, length: minima.append(length)).run()
    assert minima == res.history_best_lengths
    assert all(b < a for a, b in zip(minima, minima[1:]))
    assert minima[-1] == res.best_length


def test_best_matches_minimum_over_all_tours():
    inst = TSPInstance.random_points(6, width=100, seed=21)
    lengths = []
    res = ExhaustiveSearch(inst.distance_matrix(),
                           on_tour=lambda tour, length: lengths.append(length)).run()
    assert res.best_length == min(lengths)
    assert inst.tour_length(res.best_tour) == pytest.approx(res.best_length)


def test_first_tour_wins_ties(unit_square):
    ties = []
    ExhaustiveSearch(unit_square.distance_matrix(),
                     on_tour=lambda tour, length: ties.append(tour) if length == 4.0 else None).run()
    # 0-1-2-3 and its reverse 0-3-2-1 are both optimal
    assert ties == [[0, 1, 2, 3], [0, 3, 2, 1]]
    res = ExhaustiveSearch(unit_square.distance_matrix()).run()
    assert res.history_best_tours[-1] == [0, 1, 2, 3]


def test_repeated_runs_are_deterministic():
    D = TSPInstance.random_points(7, width=100, seed=77).distance_matrix()
    solver = ExhaustiveSearch(D)
    first = solver.run()
    second = solver.run()
    assert first.best_length == second.best_length
    assert first.best_tour == second.best_tour
    assert first.leaf_count == second.leaf_count


def test_history_can_be_disabled():
    D = TSPInstance.random_points(5, width=100, seed=1).distance_matrix()
    res = ExhaustiveSearch(D, SearchConfig(record_history=False)).run()
    assert res.history_best_lengths == []
    assert res.best_tour


def test_expected_leaf_count_rejects_empty():
    with pytest.raises(ValueError):
        expected_leaf_count(0)


@pytest.mark.parametrize("seed", [7, 8, 9])
def test_folded_optimum_equal_up_to_rounding(seed):
    inst = TSPInstance.random_points(7, width=100, seed=seed)
    D = inst.distance_matrix()
    folded = ExhaustiveSearch(D, SearchConfig(fold_reflections=True)).run()
    full = ExhaustiveSearch(D).run()
    assert folded.best_length == pytest.approx(full.best_length, rel=1e-12)
    assert inst.tour_length(folded.best_tour) == pytest.approx(full.best_length, rel=1e-12)
