import random

import pytest

from drills.arrays import (
    find_duplicate,
    find_duplicate_counting,
    find_duplicate_sorted,
    leaders,
    leaders_naive,
    max_profit,
    max_profit_naive,
    missing_number_counting,
    missing_number_sum,
    missing_number_xor,
    reverse_in_groups,
    single_number,
    sort_colors,
    sort_colors_counting,
    trapped_water,
    trapped_water_naive,
    trapped_water_prefix,
)


def test_profit_source_example():
    prices = [7, 1, 5, 3, 6, 4]
    assert max_profit_naive(prices) == 5
    assert max_profit(prices) == 5


def test_duplicate_source_example():
    values = [1, 3, 2, 4, 5, 6, 3]
    assert find_duplicate_sorted(list(values)) == 3
    assert find_duplicate_counting(list(values)) == 3
    assert find_duplicate(list(values)) == 3


def test_duplicate_planted():
    values = [1, 2, 3, 4, 5, 6, 7, 5]
    random.Random(1).shuffle(values)
    assert find_duplicate_sorted(list(values)) == 5
    assert find_duplicate_counting(list(values)) == 5
    assert find_duplicate(list(values)) == 5


def test_duplicate_rejects_out_of_range():
    with pytest.raises(ValueError):
        find_duplicate([0, 1, 2])


def test_duplicate_sorted_without_repeat():
    with pytest.raises(ValueError):
        find_duplicate_sorted([1, 2, 3])


def test_leaders_orders_are_reversed():
    values = [16, 17, 4, 3, 5, 2]
    assert leaders(values) == list(reversed(leaders_naive(values)))


def test_leaders_dominate_their_suffix():
    values = [16, 17, 4, 3, 5, 2]
    for leader in leaders_naive(values):
        position = values.index(leader)
        assert all(leader >= v for v in values[position:])


def test_leaders_empty():
    assert leaders([]) == []
    assert leaders_naive([]) == []


@pytest.mark.parametrize("removed", [1, 4, 7, 8])
def test_missing_number(removed):
    values = [v for v in range(1, 9) if v != removed]
    random.Random(removed).shuffle(values)
    assert missing_number_counting(list(values)) == removed
    assert missing_number_sum(list(values)) == removed
    assert missing_number_xor(list(values)) == removed


def test_missing_number_source_example():
    values = [1, 2, 4, 5, 3, 6, 8]
    assert missing_number_counting(list(values)) == 7
    assert missing_number_sum(list(values)) == 7
    assert missing_number_xor(list(values)) == 7


def test_reverse_in_groups_is_an_involution():
    values = [1, 2, 3, 4, 5, 6, 7]
    assert reverse_in_groups(reverse_in_groups(values, 3), 3) == values


def test_reverse_in_groups_extremes():
    values = [1, 2, 3, 4, 5, 6]
    assert reverse_in_groups(values, 1) == values
    assert reverse_in_groups(values, 6) == values[::-1]
    assert reverse_in_groups(values, 10) == values[::-1]


def test_reverse_in_groups_rejects_zero():
    with pytest.raises(ValueError):
        reverse_in_groups([1, 2], 0)


@pytest.mark.parametrize("func", [sort_colors_counting, sort_colors])
def test_sort_colors(func):
    values = [0, 1, 2, 1, 2, 0, 1, 2]
    assert func(values) == sorted(values)
    assert values == [0, 1, 2, 1, 2, 0, 1, 2]


@pytest.mark.parametrize("func", [sort_colors_counting, sort_colors])
def test_sort_colors_rejects_other_values(func):
    with pytest.raises(ValueError):
        func([0, 3, 1])


def test_water_source_example():
    heights = [0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]
    assert trapped_water_naive(heights) == 6
    assert trapped_water_prefix(heights) == 6
    assert trapped_water(heights) == 6


def test_water_methods_agree():
    rng = random.Random(7)
    for _ in range(50):
        heights = [rng.randint(0, 9) for _ in range(rng.randint(1, 15))]
        expected = trapped_water_naive(heights)
        assert trapped_water_prefix(heights) == expected
        assert trapped_water(heights) == expected


def test_water_monotone_holds_nothing():
    heights = [1, 2, 3, 4]
    assert trapped_water_naive(heights) == 0
    assert trapped_water_prefix(heights) == 0
    assert trapped_water(heights) == 0


def test_single_number():
    values = [11, 4, 9, 4, 11, 23, 9]
    assert single_number(values) == 23


def test_single_number_empty():
    assert single_number([]) == 0