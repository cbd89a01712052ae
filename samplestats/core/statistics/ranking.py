"""samplestats.core.statistics.ranking

Rank vectors with configurable tie handling.

Ranks are 1-based and aligned with the *original* positions of the data:
``ranks(data)[i]`` is the rank of the value that was at ``data[i]`` before
the call. The data buffer itself is sorted in place as a side effect.

Tie policies (runs of exactly equal values):
  AVERAGE: mean of the positions spanned by the run (e.g. 2.5 for 2 and 3)
  MIN:     first position of the run
  MAX:     last position of the run
  FIRST:   no ties; equal values are ranked by their original position
"""

from __future__ import annotations

from enum import Enum
from typing import MutableSequence, Sequence

import numpy as np

from .sorting import INSERTION_SORT_THRESHOLD, sort_all, sort_by_key


class RankTieBreaker(Enum):
    """Policy for ranking equal values."""
    AVERAGE = "average"
    MIN = "min"
    MAX = "max"
    FIRST = "first"

    @classmethod
    def from_string(cls, s: str) -> "RankTieBreaker":
        """Create RankTieBreaker from string (case-insensitive)."""
        s_lower = s.lower().strip()
        for policy in cls:
            if policy.value == s_lower:
                return policy
        raise ValueError(f"Unknown tie breaker: {s}")


def _assign_run(
    ranks: np.ndarray,
    index: Sequence[int],
    a: int,
    b: int,
    tie_breaker: RankTieBreaker,
) -> None:
    """Give sorted positions [a, b) a single rank according to the policy."""
    if tie_breaker is RankTieBreaker.AVERAGE:
        rank = (b + a - 1) / 2.0 + 1.0
    elif tie_breaker is RankTieBreaker.MIN:
        rank = float(a + 1)
    elif tie_breaker is RankTieBreaker.MAX:
        rank = float(b)
    else:
        raise ValueError(f"{tie_breaker} does not produce tied runs")

    for i in range(a, b):
        ranks[index[i]] = rank


def ranks(
    data: MutableSequence[float],
    tie_breaker: RankTieBreaker = RankTieBreaker.AVERAGE,
    insertion_sort_threshold: int = INSERTION_SORT_THRESHOLD,
) -> np.ndarray:
    """Rank every entry of ``data``.

    **Destructive**: ``data`` is left sorted ascending.

    Args:
        data: mutable sequence of floats (list or 1-D ndarray)
        tie_breaker: policy for equal values (str accepted)
        insertion_sort_threshold: passed to the value-only sort

    Returns:
        float64 array of ranks, one per original position (empty for empty data)
    """
    if isinstance(tie_breaker, str):
        tie_breaker = RankTieBreaker.from_string(tie_breaker)

    n = len(data)
    result = np.zeros(n, dtype=float)
    index = list(range(n))

    if tie_breaker is RankTieBreaker.FIRST:
        sort_all(data, index)
        for i in range(n):
            result[index[i]] = float(i + 1)
        return result

    sort_by_key(data, index, insertion_sort_threshold)

    prev = 0
    for i in range(1, n):
        if data[i] == data[prev]:
            continue
        if i == prev + 1:
            result[index[prev]] = float(i)
        else:
            _assign_run(result, index, prev, i, tie_breaker)
        prev = i

    if n:
        _assign_run(result, index, prev, n, tie_breaker)
    return result
