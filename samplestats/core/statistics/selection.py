"""samplestats.core.statistics.selection

In-place k-th order statistic (quickselect).

Algorithm (Numerical Recipes ``select``):
  1) Work on a window [low, high] that always contains position ``rank``.
  2) Move the middle element next to ``low`` and order
     buffer[low] <= buffer[low + 1] <= buffer[high] (median of three).
  3) Hoare-partition (low + 1, high) around pivot = buffer[low + 1].
  4) Drop the side that cannot contain ``rank``; stop when the window has at
     most two elements.

The buffer is reordered. After the call, ``buffer[rank]`` holds the value it
would have if the buffer were sorted ascending; nothing else is guaranteed.
"""

from __future__ import annotations

from typing import MutableSequence

from ..errors import RankOutOfRangeError
from .aggregates import maximum, minimum


def _swap(buffer: MutableSequence[float], i: int, j: int) -> None:
    buffer[i], buffer[j] = buffer[j], buffer[i]


def select_inplace(buffer: MutableSequence[float], rank: int) -> float:
    """Return the zero-based ``rank``-th smallest value, reordering ``buffer``.

    ``rank == 0`` and ``rank == len - 1`` are answered by a linear min/max
    scan, which propagates NaN the same way :func:`minimum` and
    :func:`maximum` do.

    Args:
        buffer: non-empty mutable sequence of floats (list or 1-D ndarray)
        rank: zero-based position in ``[0, len(buffer) - 1]``

    Returns:
        The order statistic as a float

    Raises:
        RankOutOfRangeError: if ``buffer`` is empty or ``rank`` is out of range
    """
    n = len(buffer)
    if n == 0 or rank < 0 or rank >= n:
        raise RankOutOfRangeError(rank, n)

    if rank == 0:
        return minimum(buffer)
    if rank == n - 1:
        return maximum(buffer)

    low = 0
    high = n - 1
    while True:
        if high <= low + 1:
            if high == low + 1 and buffer[high] < buffer[low]:
                _swap(buffer, low, high)
            return float(buffer[rank])

        middle = (low + high) >> 1
        _swap(buffer, middle, low + 1)

        if buffer[low] > buffer[high]:
            _swap(buffer, low, high)
        if buffer[low + 1] > buffer[high]:
            _swap(buffer, low + 1, high)
        if buffer[low] > buffer[low + 1]:
            _swap(buffer, low, low + 1)

        # Now buffer[low] <= pivot <= buffer[high]: buffer[high] stops the
        # upward scan and buffer[low + 1] (the pivot) stops the downward one.
        # The explicit limits keep NaN input inside the window.
        begin = low + 1
        end = high
        pivot = buffer[begin]
        while True:
            begin += 1
            while begin < high and buffer[begin] < pivot:
                begin += 1
            end -= 1
            while end > low + 1 and buffer[end] > pivot:
                end -= 1
            if end < begin:
                break
            _swap(buffer, begin, end)

        buffer[low + 1] = buffer[end]
        buffer[end] = pivot

        if end >= rank:
            high = end - 1
        if end <= rank:
            low = begin
