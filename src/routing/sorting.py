"""
In-place sorting of mutable sequences with a three-way comparator.

- stable_sort: top-down merge sort, O(n log n), O(n) extra space.
- unstable_sort: quicksort with Lomuto partitioning around the last
  element, O(n log n) average and O(n^2) worst case (already sorted
  input hits it), O(log n) extra space.

Both are no-ops on None, empty and single-element input.
"""

from typing import Callable, MutableSequence, Optional, TypeVar

T = TypeVar("T")
Compare = Callable[[T, T], int]


def stable_sort(items: Optional[MutableSequence[T]], compare: Compare) -> None:
    """Sort ``items`` in place, keeping equal elements in their original order."""
    if items is None or len(items) <= 1:
        return
    _merge_sort(items, compare, 0, len(items) - 1)


def unstable_sort(items: Optional[MutableSequence[T]], compare: Compare) -> None:
    """Sort ``items`` in place; equal elements may be reordered."""
    if items is None or len(items) <= 1:
        return
    _quick_sort(items, compare, 0, len(items) - 1)


def _merge_sort(items: MutableSequence[T], compare: Compare, left: int, right: int) -> None:
    if left < right:
        mid = left + (right - left) // 2
        _merge_sort(items, compare, left, mid)
        _merge_sort(items, compare, mid + 1, right)
        _merge(items, compare, left, mid, right)


def _merge(items: MutableSequence[T], compare: Compare, left: int, mid: int, right: int) -> None:
    left_run = list(items[left : mid + 1])
    right_run = list(items[mid + 1 : right + 1])
    i = j = 0
    k = left

    while i < len(left_run) and j < len(right_run):
        # ties take the left element
        if compare(left_run[i], right_run[j]) <= 0:
            items[k] = left_run[i]
            i += 1
        else:
            items[k] = right_run[j]
            j += 1
        k += 1

    while i < len(left_run):
        items[k] = left_run[i]
        i += 1
        k += 1

    while j < len(right_run):
        items[k] = right_run[j]
        j += 1
        k += 1


def _quick_sort(items: MutableSequence[T], compare: Compare, low: int, high: int) -> None:
    # Recurse into the smaller side and loop on the larger one so the stack
    # stays O(log n) even on the O(n^2) inputs.
    while low < high:
        pivot_index = _partition(items, compare, low, high)
        if pivot_index - low < high - pivot_index:
            _quick_sort(items, compare, low, pivot_index - 1)
            low = pivot_index + 1
        else:
            _quick_sort(items, compare, pivot_index + 1, high)
            high = pivot_index - 1


def _partition(items: MutableSequence[T], compare: Compare, low: int, high: int) -> int:
    pivot = items[high]
    i = low - 1

    for j in range(low, high):
        if compare(items[j], pivot) < 0:
            i += 1
            items[i], items[j] = items[j], items[i]

    items[i + 1], items[high] = items[high], items[i + 1]
    return i + 1
