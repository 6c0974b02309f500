"""Small recursive routines: counting, sums, Fibonacci and subsequence search."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence, Sequence
from functools import cache
from typing import Any


def repeat(text: str, times: int = 5) -> list[str]:
    """``text`` repeated ``times`` times."""
    if times < 0:
        raise ValueError("times must not be negative")
    return [text] * times


def count_up(n: int) -> list[int]:
    """The numbers from 1 to ``n``."""
    return list(range(1, n + 1))


def count_down(n: int) -> list[int]:
    """The numbers from ``n`` down to 1."""
    return list(range(n, 0, -1))


def sum_to(n: int) -> int:
    """The sum of the numbers from 1 to ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    return sum(range(1, n + 1))


def factorial(n: int) -> int:
    """``n!``; values below 1 give 1."""
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def fibonacci(n: int) -> int:
    """The ``n``-th Fibonacci number; values below 2 are returned unchanged."""
    if n < 2:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


@cache
def _fibonacci_cached(n: int) -> int:
    if n < 2:
        return n
    return _fibonacci_cached(n - 1) + _fibonacci_cached(n - 2)


def fibonacci_memo(n: int) -> int:
    """The ``n``-th Fibonacci number, computed recursively with memoisation."""
    return _fibonacci_cached(n)


def is_palindrome(s: Sequence[Any]) -> bool:
    """Whether ``s`` reads the same forwards and backwards."""
    return all(a == b for a, b in zip(s, reversed(s)))


def reverse_in_place(values: MutableSequence[Any]) -> None:
    """Reverse ``values`` by swapping pairs from both ends inward."""
    i, j = 0, len(values) - 1
    while i < j:
        values[i], values[j] = values[j], values[i]
        i += 1
        j -= 1


def subsequences(values: Iterable[Any]) -> Iterator[list[Any]]:
    """Every subsequence, each element taken before it is left out."""
    items = list(values)
    chosen: list[Any] = []

    def walk(index: int) -> Iterator[list[Any]]:
        if index == len(items):
            yield list(chosen)
            return
        chosen.append(items[index])
        yield from walk(index + 1)
        chosen.pop()
        yield from walk(index + 1)

    return walk(0)


def subsequences_with_sum(values: Iterable[Any], target: Any) -> Iterator[list[Any]]:
    """The subsequences whose elements add up to ``target``."""
    return (sub for sub in subsequences(values) if sum(sub) == target)


def first_subsequence_with_sum(values: Iterable[Any], target: Any) -> list[Any] | None:
    """The first subsequence adding up to ``target``, or ``None`` if there is none."""
    return next(subsequences_with_sum(values, target), None)


def count_subsequences_with_sum(values: Iterable[Any], target: Any) -> int:
    """How many subsequences add up to ``target``."""
    return sum(1 for _ in subsequences_with_sum(values, target))


def subset_sums(values: Iterable[Any]) -> list[Any]:
    """The sums of all subsets, in ascending order."""
    return sorted(sum(sub) for sub in subsequences(values))


def combination_sums(values: Iterable[Any], target: Any) -> list[list[Any]]:
    """All selections of the values, each used at most once, adding up to ``target``."""
    return list(subsequences_with_sum(values, target))


def sorted_combination_sums(values: Iterable[Any], target: Any) -> list[list[Any]]:
    """Like :func:`combination_sums`, with the values sorted first."""
    return combination_sums(sorted(values), target)