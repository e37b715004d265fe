import pytest

from dsakit.puzzles import (
    cars_at_max_speed,
    max_revenue,
    nearest_train_distances,
    swap,
    walking_cost,
)


def test_trains_moving_right():
    assert nearest_train_distances([1, 0, 0], [1, 2, 3]) == [0, 1, 2]


def test_stations_with_trains_cost_nothing():
    stations = [0, 1, 2, 0, 2, 1]
    queries = [i + 1 for i, kind in enumerate(stations) if kind != 0]
    assert nearest_train_distances(stations, queries) == [0] * len(queries)


def test_first_station_is_always_zero():
    assert nearest_train_distances([0, 0, 0, 0], [1]) == [0]


def test_unreachable_stations():
    assert nearest_train_distances([0, 0, 0], [2, 3]) == [-1, -1]


def test_nearest_of_two_directions_wins():
    stations = [1, 0, 0, 0, 0, 0, 2]
    result = nearest_train_distances(stations, range(1, 8))
    assert result == [min(i, 6 - i) if 0 < i < 6 else 0 for i in range(7)]


def test_query_order_is_preserved():
    stations = [1, 0, 0, 0]
    forward = nearest_train_distances(stations, [2, 3, 4])
    backward = nearest_train_distances(stations, [4, 3, 2])
    assert backward == forward[::-1]


def test_walking_cost_known_value():
    assert walking_cost(2, 1, 1, 1) == 3


@pytest.mark.parametrize("distance,step,base", [(5, 2, 3), (10, 3, 7), (4, 4, 1)])
def test_walking_cost_without_increment(distance, step, base):
    assert walking_cost(distance, step, base, 0) == distance * base


@pytest.mark.parametrize("distance", [1, 3, 5])
def test_walking_cost_within_first_block(distance):
    assert walking_cost(distance, 5, 4, 9) == distance * 4


def test_walking_cost_grows_with_distance():
    costs = [walking_cost(d, 3, 2, 1) for d in range(1, 12)]
    assert costs == sorted(costs)
    assert len(set(costs)) == len(costs)


def test_max_revenue_known_value():
    assert max_revenue([30, 20, 53, 14]) == 60


def test_max_revenue_equal_budgets():
    assert max_revenue([7, 7, 7, 7]) == 28


def test_max_revenue_single_buyer():
    assert max_revenue([42]) == 42


def test_max_revenue_empty_raises():
    with pytest.raises(ValueError):
        max_revenue([])


def test_cars_non_increasing_all_at_max():
    speeds = [9, 7, 7, 4, 1]
    assert cars_at_max_speed(speeds) == len(speeds)


def test_cars_increasing_only_first():
    assert cars_at_max_speed([1, 2, 3, 4, 5]) == 1


def test_cars_mixed():
    assert cars_at_max_speed([4, 5, 1, 2, 3]) == 2


def test_cars_empty():
    assert cars_at_max_speed([]) == 0


def test_swap_sample():
    assert swap(2, 4) == (4, 2)


@pytest.mark.parametrize("x,y", [(0, 0), (-3, 8), (100, -100)])
def test_swap_twice_is_identity(x, y):
    assert swap(*swap(x, y)) == (x, y)
    assert swap(x, y) == (y, x)