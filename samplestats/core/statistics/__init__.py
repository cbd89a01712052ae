"""Order statistics and descriptive statistics over float buffers.

This package contains the numeric core of samplestats:
- One-pass aggregates (mean, variance, covariance, generalized means)
- In-place selection (quickselect) for order statistics
- Dual-array sort engine carrying an index permutation
- Median/quantile/percentile estimates (destructive on the buffer)
- Rank vectors with four tie-breaking policies
"""

from .aggregates import (
    minimum,
    maximum,
    abs_minimum,
    abs_maximum,
    mean,
    geometric_mean,
    harmonic_mean,
    quadratic_mean,
    variance,
    population_variance,
    std_dev,
    population_std_dev,
    covariance,
    population_covariance,
)
from .selection import select_inplace
from .sorting import sort_by_key, sort_all, INSERTION_SORT_THRESHOLD
from .order_statistics import (
    order_statistic,
    median,
    quantile,
    percentile,
    lower_quartile,
    upper_quartile,
    interquartile_range,
)
from .ranking import RankTieBreaker, ranks

__all__ = [
    # Aggregates
    "minimum",
    "maximum",
    "abs_minimum",
    "abs_maximum",
    "mean",
    "geometric_mean",
    "harmonic_mean",
    "quadratic_mean",
    "variance",
    "population_variance",
    "std_dev",
    "population_std_dev",
    "covariance",
    "population_covariance",

    # Engines
    "select_inplace",
    "sort_by_key",
    "sort_all",
    "INSERTION_SORT_THRESHOLD",

    # Order statistics
    "order_statistic",
    "median",
    "quantile",
    "percentile",
    "lower_quartile",
    "upper_quartile",
    "interquartile_range",

    # Ranking
    "RankTieBreaker",
    "ranks",
]
