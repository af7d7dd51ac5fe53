"""Classic in-place sorting algorithms over mutable lists."""

from __future__ import annotations

import heapq
from typing import Any


def _swap(items: list[Any], first: int, second: int) -> None:
    items[first], items[second] = items[second], items[first]


def bubble_sort(items: list[Any]) -> None:
    """Sort ``items`` in place by repeatedly swapping adjacent out-of-order pairs."""
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            if items[j] > items[j + 1]:
                _swap(items, j, j + 1)


def selection_sort(items: list[Any]) -> None:
    """Sort ``items`` in place by moving the smallest remaining item forward."""
    size = len(items)
    for i in range(size):
        smallest = min(range(i, size), key=items.__getitem__)
        if smallest != i:
            _swap(items, i, smallest)


def insertion_sort(items: list[Any]) -> None:
    """Sort ``items`` in place by inserting each item into the sorted prefix."""
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and current < items[j]:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current


def merge(items: list[Any], left: int, mid: int, right: int) -> None:
    """Merge the sorted runs ``items[left:mid+1]`` and ``items[mid+1:right+1]``.

    Equal items keep their order, with those from the left run first.
    """
    left_run = items[left : mid + 1]
    right_run = items[mid + 1 : right + 1]
    items[left : right + 1] = list(heapq.merge(left_run, right_run))


def merge_sort(items: list[Any], left: int = 0, right: int | None = None) -> None:
    """Sort ``items[left:right+1]`` in place with merge sort."""
    if right is None:
        right = len(items) - 1
    if left >= right:
        return
    mid = left + (right - left) // 2
    merge_sort(items, left, mid)
    merge_sort(items, mid + 1, right)
    merge(items, left, mid, right)


def pivot(items: list[Any], pivot_index: int, end_index: int) -> int:
    """Partition ``items[pivot_index:end_index+1]`` around its first item.

    Smaller items end up before the pivot and the rest after it.
    Returns the pivot's final index.
    """
    swap_index = pivot_index
    for i in range(pivot_index + 1, end_index + 1):
        if items[i] < items[pivot_index]:
            swap_index += 1
            _swap(items, swap_index, i)
    _swap(items, pivot_index, swap_index)
    return swap_index


def quick_sort(items: list[Any], left: int = 0, right: int | None = None) -> None:
    """Sort ``items[left:right+1]`` in place with quick sort."""
    if right is None:
        right = len(items) - 1
    if right <= left:
        return
    pivot_index = pivot(items, left, right)
    quick_sort(items, left, pivot_index - 1)
    quick_sort(items, pivot_index + 1, right)