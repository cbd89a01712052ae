"""samplestats.core.statistics.order_statistics

Order statistics, median and quantile estimates built on
:func:`select_inplace`.

**Every function here reorders its input buffer.** Repeated calls on the
same buffer are fine as long as the caller does not rely on the original
order; pass a copy otherwise.

All functions return NaN instead of raising when the answer is undefined
(empty data, order outside 1..n, tau outside [0, 1]).

Quantile definition (Hyndman & Fan 1996, type 8, approximately
median-unbiased regardless of the distribution):

    h = (n + 1/3) * tau + 1/3
    Q(tau) = x[floor(h)] + (h - floor(h)) * (x[floor(h) + 1] - x[floor(h)])

with one-based order statistics x[k], clamped to min/max at the ends.
"""

from __future__ import annotations

import math
from typing import MutableSequence

from .aggregates import NAN, maximum, minimum
from .selection import select_inplace


def order_statistic(data: MutableSequence[float], order: int) -> float:
    """Return the ``order``-th smallest value (one-based, 1..n).

    Returns:
        The order statistic, or NaN if ``order`` is outside ``[1, n]``
    """
    n = len(data)
    if n == 0 or order < 1 or order > n:
        return NAN
    if order == 1:
        return minimum(data)
    if order == n:
        return maximum(data)
    return select_inplace(data, order - 1)


def median(data: MutableSequence[float]) -> float:
    """Sample median; average of the two central values for even ``n``.

    Infinities are ordered like any other value, so ``[-inf, 2, inf]`` has
    median 2.0.
    """
    n = len(data)
    if n == 0:
        return NAN
    k = n // 2
    if n % 2 != 0:
        return select_inplace(data, k)
    return (select_inplace(data, k - 1) + select_inplace(data, k)) / 2.0


def quantile(data: MutableSequence[float], tau: float) -> float:
    """Estimate the ``tau``-th quantile (R type 8).

    Args:
        data: sample buffer, reordered by the call
        tau: probability in ``[0, 1]``

    Returns:
        Quantile estimate, or NaN if ``data`` is empty or ``tau`` is NaN or
        outside ``[0, 1]``
    """
    n = len(data)
    if n == 0 or math.isnan(tau) or tau < 0.0 or tau > 1.0:
        return NAN

    h = (n + 1.0 / 3.0) * tau + 1.0 / 3.0
    hf = int(h)

    if hf <= 0 or tau == 0.0:
        return minimum(data)
    if hf >= n or tau == 1.0:
        return maximum(data)

    # 1 <= hf <= n - 1, so both zero-based ranks address the buffer
    a = select_inplace(data, hf - 1)
    b = select_inplace(data, hf)
    return a + (h - hf) * (b - a)


def percentile(data: MutableSequence[float], p: int) -> float:
    """Estimate the ``p``-th percentile for integer ``p`` in ``[0, 100]``.

    Use :func:`quantile` for fractional percentiles.
    """
    return quantile(data, p / 100.0)


def lower_quartile(data: MutableSequence[float]) -> float:
    """First quartile, ``quantile(data, 0.25)``."""
    return quantile(data, 0.25)


def upper_quartile(data: MutableSequence[float]) -> float:
    """Third quartile, ``quantile(data, 0.75)``."""
    return quantile(data, 0.75)


def interquartile_range(data: MutableSequence[float]) -> float:
    """Upper quartile minus lower quartile."""
    return upper_quartile(data) - lower_quartile(data)
