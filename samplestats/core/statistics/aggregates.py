"""samplestats.core.statistics.aggregates

One-pass aggregate statistics over a sequence of floats.

None of these functions reorder or modify their input. Every function returns
NaN when the statistic is undefined for the data (empty input, too few
values, negative input for the geometric/harmonic means).

Numerical notes:
  - The running mean uses ``acc + (x - acc) / count`` rather than a running
    sum, so large offsets do not cancel the low-order digits.
  - Variance uses the one-pass update
        t_i   = x_0 + ... + x_i
        d_i   = (i + 1) * x_i - t_i
        S    += d_i^2 / ((i + 1) * i)
    which is validated against the NIST StRD univariate datasets.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from ..errors import ContainersMustBeSameLengthError

NAN = float("nan")
INF = float("inf")


def minimum(data: Iterable[float]) -> float:
    """Smallest value, NaN if empty.

    A NaN element replaces the accumulator, so NaN in the data is propagated
    unless a later element is smaller than it (comparisons against NaN are
    always false).
    """
    acc = INF
    seen = False
    for x in data:
        seen = True
        x = float(x)
        if x < acc or math.isnan(x):
            acc = x
    return acc if seen else NAN


def maximum(data: Iterable[float]) -> float:
    """Largest value, NaN if empty. NaN handling mirrors :func:`minimum`."""
    acc = -INF
    seen = False
    for x in data:
        seen = True
        x = float(x)
        if x > acc or math.isnan(x):
            acc = x
    return acc if seen else NAN


def abs_minimum(data: Iterable[float]) -> float:
    """Smallest absolute value, NaN if empty."""
    return minimum(abs(float(x)) for x in data)


def abs_maximum(data: Iterable[float]) -> float:
    """Largest absolute value, NaN if empty."""
    return maximum(abs(float(x)) for x in data)


def mean(data: Iterable[float]) -> float:
    """Arithmetic mean using the running-mean update."""
    acc = 0.0
    count = 0
    for x in data:
        count += 1
        acc += (float(x) - acc) / count
    return acc if count else NAN


def geometric_mean(data: Sequence[float]) -> float:
    """Geometric mean ``exp(mean(ln x))``.

    Returns NaN if empty or if any value is negative. A zero contributes
    ``ln 0 = -inf`` so the result collapses to 0.0.
    """
    n = len(data)
    if n == 0:
        return NAN

    acc = 0.0
    for x in data:
        x = float(x)
        if x < 0.0:
            acc = NAN
        elif x == 0.0:
            acc += -INF
        else:
            acc += math.log(x)
    return math.exp(acc / n)


def harmonic_mean(data: Sequence[float]) -> float:
    """Harmonic mean ``n / sum(1/x)``.

    Returns NaN if empty or if any value is negative. A zero contributes an
    infinite reciprocal so the result collapses to 0.0.
    """
    n = len(data)
    if n == 0:
        return NAN

    acc = 0.0
    for x in data:
        x = float(x)
        if x < 0.0:
            acc = NAN
        elif x == 0.0:
            acc += INF
        else:
            acc += 1.0 / x
    if acc == 0.0:
        # every value was +inf
        return INF
    return n / acc


def _sum_squared_deviations(data: Sequence[float]) -> float:
    # data is non-empty
    t = float(data[0])
    var = 0.0
    for i in range(1, len(data)):
        x = float(data[i])
        t += x
        diff = (i + 1.0) * x - t
        var += (diff * diff) / ((i + 1.0) * i)
    return var


def variance(data: Sequence[float]) -> float:
    """Unbiased sample variance (divides by ``n - 1``); NaN for ``n <= 1``."""
    n = len(data)
    if n <= 1:
        return NAN
    return _sum_squared_deviations(data) / (n - 1)


def population_variance(data: Sequence[float]) -> float:
    """Population variance (divides by ``n``); NaN for empty data."""
    n = len(data)
    if n == 0:
        return NAN
    return _sum_squared_deviations(data) / n


def std_dev(data: Sequence[float]) -> float:
    """Square root of :func:`variance`."""
    return math.sqrt(variance(data))


def population_std_dev(data: Sequence[float]) -> float:
    """Square root of :func:`population_variance`."""
    return math.sqrt(population_variance(data))


def _cross_product_sum(a: Sequence[float], b: Sequence[float]) -> float:
    mean_a = mean(a)
    mean_b = mean(b)
    acc = 0.0
    for x, y in zip(a, b):
        acc += (float(x) - mean_a) * (float(y) - mean_b)
    return acc


def covariance(a: Sequence[float], b: Sequence[float]) -> float:
    """Unbiased sample covariance of two equal-length samples.

    Raises:
        ContainersMustBeSameLengthError: if ``len(a) != len(b)``

    Returns:
        Covariance, or NaN if fewer than two pairs
    """
    n1, n2 = len(a), len(b)
    if n1 != n2:
        raise ContainersMustBeSameLengthError(n1, n2)
    if n1 <= 1:
        return NAN
    return _cross_product_sum(a, b) / (n1 - 1)


def population_covariance(a: Sequence[float], b: Sequence[float]) -> float:
    """Population covariance of two equal-length samples.

    Raises:
        ContainersMustBeSameLengthError: if ``len(a) != len(b)``
    """
    n1, n2 = len(a), len(b)
    if n1 != n2:
        raise ContainersMustBeSameLengthError(n1, n2)
    if n1 == 0:
        return NAN
    return _cross_product_sum(a, b) / n1


def quadratic_mean(data: Iterable[float]) -> float:
    """Root mean square, with the running-mean update applied to ``x^2``."""
    acc = 0.0
    count = 0
    for x in data:
        count += 1
        x = float(x)
        acc += (x * x - acc) / count
    return math.sqrt(acc) if count else NAN
