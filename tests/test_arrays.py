import pytest

from dsakit.arrays import (
    gcd,
    kth_smallest,
    left_rotate,
    merge_sort,
    three_largest,
    to_binary,
)


def test_left_rotate_sample():
    assert left_rotate([1, 2, 3, 4, 5], 4) == [5, 1, 2, 3, 4]


def test_left_rotate_by_zero_is_identity():
    values = [3, 1, 4, 1, 5]
    assert left_rotate(values, 0) == values


def test_left_rotate_wraps_modulo_length():
    values = [9, 8, 7, 6]
    assert left_rotate(values, 6) == left_rotate(values, 2)


def test_left_rotate_inverse():
    values = [10, 20, 30, 40, 50, 60]
    rotated = left_rotate(values, 2)
    assert left_rotate(rotated, len(values) - 2) == values


def test_left_rotate_by_one_moves_first_to_end():
    values = [5, 6, 7]
    result = left_rotate(values, 1)
    assert result[-1] == values[0]
    assert result[:-1] == values[1:]


def test_left_rotate_empty_raises():
    with pytest.raises(ValueError):
        left_rotate([], 3)


def test_gcd_known_value():
    assert gcd(12, 18) == 6


def test_gcd_with_zero():
    assert gcd(0, 7) == 7
    assert gcd(7, 0) == 7


@pytest.mark.parametrize("a,b", [(48, 36), (17, 5), (100, 75), (81, 27)])
def test_gcd_divides_both(a, b):
    g = gcd(a, b)
    assert a % g == 0
    assert b % g == 0
    assert gcd(a // g, b // g) == 1


@pytest.mark.parametrize("n", [1, 2, 5, 10, 255, 1024, 12345])
def test_to_binary_round_trip(n):
    assert int(to_binary(n), 2) == n


def test_to_binary_has_no_leading_zero():
    assert all(to_binary(n).startswith("1") for n in range(1, 64))


def test_to_binary_non_positive_is_empty():
    assert to_binary(0) == ""
    assert to_binary(-4) == ""


def test_three_largest_matches_sorted():
    values = [12, 45, 1, -3, 45, 99, 7, 20]
    assert list(three_largest(values)) == sorted(values, reverse=True)[:3]


def test_three_largest_short_input():
    assert three_largest([7]) == (7, None, None)


def test_three_largest_duplicates():
    assert three_largest([5, 5, 5]) == (5, 5, 5)


def test_merge_sort_matches_sorted():
    values = [38, 27, 43, 3, 9, 82, 10, 3, -1]
    assert merge_sort(values) == sorted(values)


def test_merge_sort_does_not_modify_input():
    values = [3, 2, 1]
    merge_sort(values)
    assert values == [3, 2, 1]


def test_kth_smallest_every_position():
    values = [15, 4, 42, 8, 16, 23]
    ordered = sorted(values)
    assert [kth_smallest(values, k) for k in range(1, len(values) + 1)] == ordered


@pytest.mark.parametrize("k", [0, 4, -1])
def test_kth_smallest_out_of_range(k):
    with pytest.raises(IndexError):
        kth_smallest([1, 2, 3], k)