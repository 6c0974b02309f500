"""Comparison sorts: bubble, insertion, selection, merge and quick sort."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable
from typing import Any

Compare = Callable[[Any, Any], int]


def descending(a: Any, b: Any) -> int:
    """Comparator for descending order: positive when ``a`` and ``b`` should swap."""
    if a > b:
        return -1
    return 1


def _bubble(items: list[Any], out_of_order: Callable[[Any, Any], bool]) -> list[Any]:
    n = len(items)
    swapped = False
    for i in range(n):
        for j in range(n - i - 1):
            if out_of_order(items[j], items[j + 1]):
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order, sorted by repeated adjacent swaps."""
    return _bubble(list(values), lambda a, b: a > b)


def bubble_sort_by(values: Iterable[Any], compare: Compare) -> list[Any]:
    """Bubble sort where ``compare(a, b) > 0`` means ``a`` must move after ``b``."""
    return _bubble(list(values), lambda a, b: compare(a, b) > 0)


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order, each inserted into the sorted prefix."""
    items = list(values)
    for i in range(1, len(items)):
        value = items[i]
        hole = i
        while hole > 0 and items[hole - 1] > value:
            items[hole] = items[hole - 1]
            hole -= 1
        items[hole] = value
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order, picking the minimum of the rest each pass."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        smallest = min(range(i, n), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order by splitting in halves and merging."""
    items = list(values)
    if len(items) < 2:
        return items
    mid = len(items) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[Any], start: int, end: int) -> int:
    pivot = items[end]
    index = start
    for i in range(start, end):
        if items[i] <= pivot:
            items[i], items[index] = items[index], items[i]
            index += 1
    items[index], items[end] = items[end], items[index]
    return index


def _quick(items: list[Any], choose_pivot: Callable[[int, int], int] | None) -> list[Any]:
    ranges = [(0, len(items) - 1)]
    while ranges:
        start, end = ranges.pop()
        if start >= end:
            continue
        if choose_pivot is not None:
            pivot = choose_pivot(start, end)
            items[pivot], items[end] = items[end], items[pivot]
        split = _partition(items, start, end)
        ranges.append((start, split - 1))
        ranges.append((split + 1, end))
    return items


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order, partitioning around the last element."""
    return _quick(list(values), None)


def randomized_quick_sort(
    values: Iterable[Any], rng: random.Random | None = None
) -> list[Any]:
    """Quick sort whose pivot is drawn at random from each range before its last element."""
    generator = rng if rng is not None else random.Random()
    return _quick(list(values), generator.randrange)