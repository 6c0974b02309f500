import math
from itertools import combinations

import pytest

from algoshelf.recursion import (
    combination_sums,
    count_down,
    count_subsequences_with_sum,
    count_up,
    factorial,
    fibonacci,
    fibonacci_memo,
    first_subsequence_with_sum,
    is_palindrome,
    repeat,
    reverse_in_place,
    sorted_combination_sums,
    subsequences,
    subsequences_with_sum,
    subset_sums,
    sum_to,
)


def test_repeat():
    assert repeat("hello", 5) == ["hello"] * 5
    assert repeat("hello") == ["hello"] * 5


def test_repeat_negative():
    with pytest.raises(ValueError):
        repeat("hello", -1)


def test_count_up_and_down():
    assert count_up(10) == list(range(1, 11))
    assert count_down(10) == list(range(10, 0, -1))
    assert count_up(0) == []
    assert count_down(0) == []


@pytest.mark.parametrize("n", [0, 1, 5, 100])
def test_sum_to(n):
    assert sum_to(n) == sum(range(n + 1))


def test_sum_to_negative():
    with pytest.raises(ValueError):
        sum_to(-1)


@pytest.mark.parametrize("n", [0, 1, 5, 12])
def test_factorial(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_below_one():
    assert factorial(-4) == factorial(0)


def test_fibonacci_base_and_recurrence():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1
    for n in range(2, 30):
        assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)
    assert fibonacci(10) == 55


@pytest.mark.parametrize("n", [0, 1, 2, 20, 49])
def test_fibonacci_memo_agrees(n):
    assert fibonacci_memo(n) == fibonacci(n)


@pytest.mark.parametrize(
    "text, expected",
    [("madam", True), ("abba", True), ("a", True), ("", True), ("abc", False), ("ab", False)],
)
def test_is_palindrome(text, expected):
    assert is_palindrome(text) is expected


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3, 4, 5], [1, 2, 3, 4, 5, 6]])
def test_reverse_in_place(values):
    original = list(values)
    reverse_in_place(values)
    assert values == original[::-1]


def test_subsequences_cover_all_selections():
    values = [3, 1, 2]
    subs = list(subsequences(values))
    assert len(subs) == 2 ** len(values)
    expected = {
        combo for r in range(len(values) + 1) for combo in combinations(values, r)
    }
    assert {tuple(sub) for sub in subs} == expected
    assert subs[0] == values
    assert subs[-1] == []


def test_subsequences_with_sum():
    values = [1, 2, 1]
    found = list(subsequences_with_sum(values, 2))
    assert all(sum(sub) == 2 for sub in found)
    assert count_subsequences_with_sum(values, 2) == len(found)
    assert count_subsequences_with_sum(values, 2) == 2


def test_first_subsequence_with_sum():
    values = [1, 2, 1]
    assert first_subsequence_with_sum(values, 2) == next(subsequences_with_sum(values, 2))
    assert first_subsequence_with_sum(values, 100) is None


def test_subset_sums():
    values = [3, 1, 2]
    sums = subset_sums(values)
    assert sums == sorted(sums)
    assert len(sums) == 2 ** len(values)
    assert sums[0] == 0
    assert sums[-1] == sum(values)


def test_combination_sums():
    assert combination_sums([2, 3, 6, 7], 7) == [[7]]


def test_sorted_combination_sums():
    values = [10, 1, 2, 7, 6, 1, 5]
    found = sorted_combination_sums(values, 8)
    assert found
    assert all(sum(sub) == 8 for sub in found)
    assert all(sub == sorted(sub) for sub in found)
    assert found == combination_sums(sorted(values), 8)