"""
Core module for samplestats.

This module contains pure Python implementations on top of numpy. It has no
I/O and no global state: every operation works on buffers owned by the
caller.
"""

from .errors import (
    StatsError,
    BadParamsError,
    ContainersMustBeSameLengthError,
    RankOutOfRangeError,
    UndefinedStatisticError,
)

from .models import Sample, StatsOptions

from .statistics import (
    RankTieBreaker,
    ranks,
    select_inplace,
    sort_by_key,
    sort_all,
    order_statistic,
    median,
    quantile,
    percentile,
    lower_quartile,
    upper_quartile,
    interquartile_range,
    minimum,
    maximum,
    mean,
    variance,
    std_dev,
    population_variance,
    population_std_dev,
    covariance,
    population_covariance,
    geometric_mean,
    harmonic_mean,
    quadratic_mean,
)

from .distributions import Uniform, DiscreteUniform, Normal, ChiSquared

__all__ = [
    # Errors
    "StatsError",
    "BadParamsError",
    "ContainersMustBeSameLengthError",
    "RankOutOfRangeError",
    "UndefinedStatisticError",

    # Models
    "Sample",
    "StatsOptions",

    # Statistics
    "RankTieBreaker",
    "ranks",
    "select_inplace",
    "sort_by_key",
    "sort_all",
    "order_statistic",
    "median",
    "quantile",
    "percentile",
    "lower_quartile",
    "upper_quartile",
    "interquartile_range",
    "minimum",
    "maximum",
    "mean",
    "variance",
    "std_dev",
    "population_variance",
    "population_std_dev",
    "covariance",
    "population_covariance",
    "geometric_mean",
    "harmonic_mean",
    "quadratic_mean",

    # Distributions
    "Uniform",
    "DiscreteUniform",
    "Normal",
    "ChiSquared",
]
