"""Ordering helpers: pair sorting, bit counting and lexicographic permutations."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any


def pair_order(pair: Sequence[Any]) -> tuple[Any, Any]:
    """Sort key: ascending by the second item, then descending by the first.

    The first item must support negation, as numbers do.
    """
    first, second = pair
    return (second, -first)


def sort_pairs(pairs: Sequence[Sequence[Any]]) -> list[tuple[Any, Any]]:
    """The pairs ordered by :func:`pair_order`."""
    return sorted((tuple(pair) for pair in pairs), key=pair_order)


def popcount(n: int) -> int:
    """Number of set bits in the non-negative integer ``n``."""
    if n < 0:
        raise ValueError("popcount is defined for non-negative integers only")
    return bin(n).count("1")


def _rebuild(template: Sequence[Any], items: list[Any]) -> Any:
    if isinstance(template, str):
        return "".join(items)
    if isinstance(template, tuple):
        return tuple(items)
    return items


def next_permutation(seq: Sequence[Any]) -> Any:
    """The next arrangement of ``seq`` in lexicographic order.

    Strings give strings, tuples give tuples and anything else gives a list.
    Returns ``None`` when ``seq`` is already the last arrangement.
    """
    items = list(seq)
    pivot = next(
        (i for i in range(len(items) - 2, -1, -1) if items[i] < items[i + 1]),
        None,
    )
    if pivot is None:
        return None
    successor = next(
        j for j in range(len(items) - 1, pivot, -1) if items[j] > items[pivot]
    )
    items[pivot], items[successor] = items[successor], items[pivot]
    items[pivot + 1 :] = reversed(items[pivot + 1 :])
    return _rebuild(seq, items)


def permutations_from(s: Sequence[Any]) -> Iterator[Any]:
    """``s`` followed by every arrangement after it in lexicographic order."""
    current: Any = _rebuild(s, list(s))
    while current is not None:
        yield current
        current = next_permutation(current)