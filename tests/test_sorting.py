import random

import pytest

from algoshelf.sorting import (
    bubble_sort,
    bubble_sort_by,
    descending,
    insertion_sort,
    merge_sort,
    quick_sort,
    randomized_quick_sort,
    selection_sort,
)

SAMPLE = [3, 7, 1, 0, 4, 2, 9, 8]

CASES = [
    [],
    [5],
    SAMPLE,
    [1, 2, 3, 4, 5],
    [5, 4, 3, 2, 1],
    [2, 2, 1, 1, 3, 3],
    [-3, 10, 0, -7, 4],
]


def test_sample_sorted_value():
    assert bubble_sort(SAMPLE) == [0, 1, 2, 3, 4, 7, 8, 9]


@pytest.mark.parametrize("values", CASES)
def test_bubble_sort_matches_builtin(values):
    assert bubble_sort(values) == sorted(values)


@pytest.mark.parametrize("values", CASES)
def test_insertion_sort_matches_builtin(values):
    assert insertion_sort(values) == sorted(values)


@pytest.mark.parametrize("values", CASES)
def test_selection_sort_matches_builtin(values):
    assert selection_sort(values) == sorted(values)


@pytest.mark.parametrize("values", CASES)
def test_merge_sort_matches_builtin(values):
    assert merge_sort(values) == sorted(values)


@pytest.mark.parametrize("values", CASES)
def test_quick_sort_matches_builtin(values):
    assert quick_sort(values) == sorted(values)


def test_input_is_left_unchanged():
    values = list(SAMPLE)
    assert bubble_sort(values) == sorted(SAMPLE)
    assert insertion_sort(values) == sorted(SAMPLE)
    assert selection_sort(values) == sorted(SAMPLE)
    assert merge_sort(values) == sorted(SAMPLE)
    assert quick_sort(values) == sorted(SAMPLE)
    assert values == SAMPLE


@pytest.mark.parametrize("seed", [0, 1, 2, 42])
@pytest.mark.parametrize("values", CASES)
def test_randomized_quick_sort(seed, values):
    assert randomized_quick_sort(values, random.Random(seed)) == sorted(values)


def test_randomized_quick_sort_default_rng():
    assert randomized_quick_sort(SAMPLE) == sorted(SAMPLE)


def test_large_sorted_input_quick_sort():
    values = list(range(3000))
    assert quick_sort(values) == values


def test_descending_comparator():
    assert descending(5, 3) == -1
    assert descending(3, 5) == 1
    assert descending(4, 4) == 1


def test_bubble_sort_by_descending():
    values = [3, 2, 1, 4, 6, -5]
    assert bubble_sort_by(values, descending) == sorted(values, reverse=True)


def test_bubble_sort_by_ascending_comparator():
    def ascending(a, b):
        return 1 if a > b else -1

    assert bubble_sort_by(SAMPLE, ascending) == sorted(SAMPLE)


def test_sorts_strings():
    words = ["pear", "apple", "fig", "banana"]
    assert merge_sort(words) == sorted(words)
    assert insertion_sort(words) == sorted(words)