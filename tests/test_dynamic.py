import pytest

from drills.dynamic import can_partition, has_subset_sum, knapsack


def test_knapsack_source_example():
    assert knapsack([60, 100, 120], [10, 20, 30], 50) == 220


def test_knapsack_zero_capacity():
    assert knapsack([60, 100, 120], [10, 20, 30], 0) == 0


def test_knapsack_everything_fits():
    values = [60, 100, 120]
    assert knapsack(values, [10, 20, 30], 60) == sum(values)


def test_knapsack_nothing_fits():
    assert knapsack([60, 100], [10, 20], 9) == 0


def test_knapsack_monotonic_in_capacity():
    values, weights = [60, 100, 120, 30], [10, 20, 30, 5]
    results = [knapsack(values, weights, c) for c in range(0, 70)]
    assert all(a <= b for a, b in zip(results, results[1:]))


def test_knapsack_length_mismatch():
    with pytest.raises(ValueError):
        knapsack([1, 2], [1], 5)


def test_knapsack_negative_capacity():
    with pytest.raises(ValueError):
        knapsack([1], [1], -1)


def test_can_partition_source_example():
    assert can_partition([1, 2, 3, 3, 2, 1]) is True


def test_can_partition_odd_sum():
    assert can_partition([1, 2]) is False


def test_can_partition_even_sum_without_split():
    assert can_partition([1, 5]) is False


@pytest.mark.parametrize("values", [[], [4], [7, 3, 9]])
def test_can_partition_doubled_list(values):
    assert can_partition(values + values) is True


def test_can_partition_negative_values():
    with pytest.raises(ValueError):
        can_partition([-2, 2, 4])


def test_subset_source_example():
    assert has_subset_sum([2, 6, 9, 1, 5, 7], 10) is True


def test_subset_zero_total():
    assert has_subset_sum([2, 6, 9], 0) is True


def test_subset_full_and_over():
    values = [2, 6, 9, 1, 5, 7]
    assert has_subset_sum(values, sum(values)) is True
    assert has_subset_sum(values, sum(values) + 1) is False


def test_subset_each_element_reachable():
    values = [2, 6, 9, 1, 5, 7]
    assert all(has_subset_sum(values, v) for v in values)


def test_subset_negative_total():
    with pytest.raises(ValueError):
        has_subset_sum([1, 2], -1)