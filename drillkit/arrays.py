"""Exercises on lists: searching, ordering and in-place rearrangement."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, MutableSequence, Sequence
from itertools import count
from typing import Any


def binary_search(items: Sequence[Any], key: Any) -> int:
    """Index of key in the ascending sequence items, or -1 when it is absent."""
    index = bisect_left(items, key)
    if index < len(items) and items[index] == key:
        return index
    return -1


def exchange_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items in ascending order, leaving the input untouched."""
    return sorted(items)


def reverse_in_place(items: MutableSequence[Any]) -> None:
    """Reverse the order of items in place."""
    items.reverse()


def rotate_right(items: MutableSequence[Any]) -> None:
    """Rotate items one step to the right in place: the last becomes the first."""
    if items:
        items.insert(0, items.pop())


def scale_all(items: MutableSequence[Any], factor: Any) -> None:
    """Multiply every element of items by factor in place."""
    items[:] = [item * factor for item in items]


def numbered_grid(rows: int, columns: int, start: int = 0) -> list[list[int]]:
    """A rows-by-columns grid filled row by row with consecutive numbers from start."""
    if rows < 0 or columns < 0:
        raise ValueError(f"grid size must not be negative, got {rows}x{columns}")
    numbers = count(start)
    return [[next(numbers) for _ in range(columns)] for _ in range(rows)]