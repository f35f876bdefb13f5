"""Searching and scanning algorithms over sequences and matrices."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from typing import Optional


def binary_search(
    values: Sequence[int], target: int, low: int = 0, high: Optional[int] = None
) -> int:
    """Return an index of ``target`` in ``values[low:high + 1]``, or -1."""
    if high is None:
        high = len(values) - 1
    while high >= low:
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def exponential_search(values: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in sorted ``values``, or -1."""
    if not values:
        return -1
    if values[0] == target:
        return 0
    n = len(values)
    bound = 1
    while bound < n and values[bound] <= target:
        bound *= 2
    return binary_search(values, target, bound // 2, min(bound, n - 1))


def search_sorted_matrix(
    matrix: Sequence[Sequence[int]], target: int
) -> Optional[tuple[int, int]]:
    """Find ``target`` in a matrix sorted along rows and columns.

    Returns the (row, column) where it was found, or None.
    """
    if not matrix or not matrix[0]:
        return None
    rows = len(matrix)
    if target < matrix[0][0] or target > matrix[-1][-1]:
        return None
    i, j = 0, len(matrix[0]) - 1
    while i < rows and j >= 0:
        current = matrix[i][j]
        if current == target:
            return i, j
        if current > target:
            j -= 1
        else:
            i += 1
    return None


def min_max(values: Iterable[int]) -> tuple[int, int]:
    """Return the smallest and the largest element as ``(min, max)``."""
    iterator = iter(values)
    try:
        first = next(iterator)
    except StopIteration:
        raise ValueError("min_max() of an empty sequence") from None
    smallest = largest = first
    for value in iterator:
        if value > largest:
            largest = value
        elif value < smallest:
            smallest = value
    return smallest, largest


def count_triplets_below(values: Iterable[int], total: int) -> int:
    """Count index triplets i < j < k whose elements sum below ``total``."""
    items = sorted(values)
    n = len(items)
    count = 0
    for i in range(n - 2):
        j, k = i + 1, n - 1
        while j < k:
            if items[i] + items[j] + items[k] < total:
                count += k - j
                j += 1
            else:
                k -= 1
    return count


def sliding_window_max(values: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every contiguous window of length ``k``."""
    if k <= 0:
        raise ValueError("window size must be positive")
    if k > len(values):
        raise ValueError("window size exceeds the number of values")
    window: deque[int] = deque()
    maxima: list[int] = []
    for i, value in enumerate(values):
        if i >= k:
            maxima.append(values[window[0]])
            while window and window[0] <= i - k:
                window.popleft()
        while window and value >= values[window[-1]]:
            window.pop()
        window.append(i)
    maxima.append(values[window[0]])
    return maxima


def longest_increasing_subsequence(values: Sequence[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    lengths: list[int] = []
    for i, value in enumerate(values):
        best = 1
        for j in range(i):
            if value > values[j] and best < lengths[j] + 1:
                best = lengths[j] + 1
        lengths.append(best)
    return max(lengths, default=0)