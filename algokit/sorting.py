"""Comparison sorts and simple array rearrangements."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``values`` built by insertion sort."""
    result = list(values)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def _merge(left: Sequence[int], right: Sequence[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``values`` built by top-down merge sort."""
    items = list(values)
    if len(items) < 2:
        return items
    middle = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``values`` built by selection sort."""
    result = list(values)
    for i in range(len(result)):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def negatives_first(values: Iterable[int]) -> list[int]:
    """Swap negative numbers towards the front, in one pass.

    A negative found at the current insertion point is left in place
    without advancing that point.
    """
    result = list(values)
    slot = 0
    for i, value in enumerate(result):
        if value < 0 and i != slot:
            result[i], result[slot] = result[slot], result[i]
            slot += 1
    return result


def reverse_array(values: Iterable[int]) -> list[int]:
    """Return ``values`` in reverse order."""
    return list(values)[::-1]