import pytest

from drills.search import binary_search, merge_sort, single_in_pairs


def test_binary_search_finds_every_element():
    values = [1, 2, 3, 4, 5]
    for target in values:
        assert values[binary_search(values, target)] == target


def test_binary_search_missing():
    assert binary_search([1, 2, 3, 4, 5], 7) == -1


def test_binary_search_empty():
    assert binary_search([], 3) == -1


def test_binary_search_respects_range():
    values = [1, 2, 3, 4, 5, 6, 7]
    assert binary_search(values, 2, 3, 6) == -1
    index = binary_search(values, 6, 3, 6)
    assert values[index] == 6


def test_single_in_pairs_source_example():
    assert single_in_pairs([1, 1, 2, 4, 4, 5, 5, 6, 6]) == 2


@pytest.mark.parametrize("position", range(5))
def test_single_in_pairs_any_position(position):
    pairs = [10, 20, 30, 40]
    lone = 100
    values = []
    for i, v in enumerate(pairs):
        if i == position:
            values.append(lone)
        values.extend([v, v])
    if position == len(pairs):
        values.append(lone)
    assert single_in_pairs(values) == lone


def test_single_in_pairs_one_element():
    assert single_in_pairs([9]) == 9


def test_single_in_pairs_empty():
    with pytest.raises(ValueError):
        single_in_pairs([])


def test_single_in_pairs_all_paired():
    with pytest.raises(ValueError):
        single_in_pairs([1, 1, 2, 2])


def test_merge_sort_source_example():
    values = [3, 15, 18, 8, 12, 21, 6, 16]
    assert merge_sort(values) == sorted(values)


@pytest.mark.parametrize("values", [[], [1], [2, 1], [5, 5, 1, 5, 0, -3], list(range(20, 0, -1))])
def test_merge_sort_matches_sorted(values):
    assert merge_sort(values) == sorted(values)


def test_merge_sort_does_not_mutate():
    values = [3, 1, 2]
    merge_sort(values)
    assert values == [3, 1, 2]