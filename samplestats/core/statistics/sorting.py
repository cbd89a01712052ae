"""samplestats.core.statistics.sorting

Dual-array sort engine.

Both entry points sort a ``values`` buffer ascending in place and apply the
same permutation to a parallel ``indices`` buffer, so ``indices[i]`` keeps
recording where ``values[i]`` came from.

- :func:`sort_by_key` orders by value only. Equal values end up in an
  unspecified relative order.
- :func:`sort_all` orders by ``(value, index)``, which is a total order on
  the pairs and therefore fully deterministic.

Quicksort details (shared by both variants):
  - pivot = median of values at {left, mid, right}
  - Hoare partition, stepping both cursors after every swap
  - recurse into the shorter side, loop on the longer one, which bounds
    the recursion depth by log2(n)
"""

from __future__ import annotations

from typing import MutableSequence

from ..errors import ContainersMustBeSameLengthError

INSERTION_SORT_THRESHOLD = 10


def _check_lengths(values: MutableSequence[float], indices: MutableSequence[int]) -> int:
    n1, n2 = len(values), len(indices)
    if n1 != n2:
        raise ContainersMustBeSameLengthError(n1, n2)
    return n1


def _swap(values: MutableSequence[float], indices: MutableSequence[int], i: int, j: int) -> None:
    values[i], values[j] = values[j], values[i]
    indices[i], indices[j] = indices[j], indices[i]


def insertion_sort(values: MutableSequence[float], indices: MutableSequence[int]) -> None:
    """Stable insertion sort of ``values``, carrying ``indices`` along."""
    n = _check_lengths(values, indices)
    for i in range(1, n):
        key = values[i]
        item = indices[i]
        j = i - 1
        while j >= 0 and values[j] > key:
            values[j + 1] = values[j]
            indices[j + 1] = indices[j]
            j -= 1
        values[j + 1] = key
        indices[j + 1] = item


def sort_by_key(
    values: MutableSequence[float],
    indices: MutableSequence[int],
    threshold: int = INSERTION_SORT_THRESHOLD,
) -> None:
    """Sort ``values`` ascending in place and permute ``indices`` identically.

    Buffers of length ``<= threshold`` use insertion sort; longer ones use
    :func:`quick_sort`.

    Raises:
        ContainersMustBeSameLengthError: if the buffers differ in length
    """
    n = _check_lengths(values, indices)
    if n <= 1:
        return
    if n == 2:
        if values[0] > values[1]:
            _swap(values, indices, 0, 1)
        return
    if n <= threshold:
        insertion_sort(values, indices)
        return
    quick_sort(values, indices, 0, n - 1)


def quick_sort(
    values: MutableSequence[float],
    indices: MutableSequence[int],
    left: int,
    right: int,
) -> None:
    """Quicksort ``values[left:right + 1]`` by value, carrying ``indices``."""
    _check_lengths(values, indices)

    while True:
        a = left
        b = right
        p = a + ((b - a) >> 1)

        if values[a] > values[p]:
            _swap(values, indices, a, p)
        if values[a] > values[b]:
            _swap(values, indices, a, b)
        if values[p] > values[b]:
            _swap(values, indices, p, b)

        pivot = values[p]

        # values[right] >= pivot >= values[left] bound the first scans; after
        # a swap the swapped pair bounds the next ones.
        while True:
            while a < right and values[a] < pivot:
                a += 1
            while b > left and pivot < values[b]:
                b -= 1
            if a > b:
                break
            if a < b:
                _swap(values, indices, a, b)

            a += 1
            b -= 1

            if a > b:
                break

        # b may end at left - 1 and a at right + 1
        if b - left <= right - a:
            if left < b:
                quick_sort(values, indices, left, b)
            left = a
        else:
            if a < right:
                quick_sort(values, indices, a, right)
            right = b

        if left >= right:
            break


def _pair_greater(values, indices, i: int, j: int) -> bool:
    return values[i] > values[j] or (values[i] == values[j] and indices[i] > indices[j])


def quick_sort_all(
    values: MutableSequence[float],
    indices: MutableSequence[int],
    left: int,
    right: int,
) -> None:
    """Quicksort ``values[left:right + 1]`` by ``(value, index)``."""
    _check_lengths(values, indices)

    while True:
        a = left
        b = right
        p = a + ((b - a) >> 1)

        if _pair_greater(values, indices, a, p):
            _swap(values, indices, a, p)
        if _pair_greater(values, indices, a, b):
            _swap(values, indices, a, b)
        if _pair_greater(values, indices, p, b):
            _swap(values, indices, p, b)

        pivot1 = values[p]
        pivot2 = indices[p]

        while True:
            while a < right and (
                values[a] < pivot1 or (values[a] == pivot1 and indices[a] < pivot2)
            ):
                a += 1
            while b > left and (
                pivot1 < values[b] or (pivot1 == values[b] and pivot2 < indices[b])
            ):
                b -= 1
            if a > b:
                break
            if a < b:
                _swap(values, indices, a, b)

            a += 1
            b -= 1

            if a > b:
                break

        if b - left <= right - a:
            if left < b:
                quick_sort_all(values, indices, left, b)
            left = a
        else:
            if a < right:
                quick_sort_all(values, indices, a, right)
            right = b

        if left >= right:
            break


def sort_all(values: MutableSequence[float], indices: MutableSequence[int]) -> None:
    """Sort by ``(value, index)`` ascending, in place on both buffers.

    Raises:
        ContainersMustBeSameLengthError: if the buffers differ in length
    """
    n = _check_lengths(values, indices)
    if n <= 1:
        return
    quick_sort_all(values, indices, 0, n - 1)
