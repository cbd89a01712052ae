"""
samplestats - order statistics, ranking and closed-form distributions

Conventions:
- Sample buffers: caller-owned lists or 1-D numpy arrays of floats
- Destructive operations (median, quantiles, ranks, order statistics)
  reorder the buffer they are given; pass a copy to keep the original order
- Undefined statistics return NaN (see StatsOptions.strict for raising)
- Orders and ranks are one-based; selection ranks are zero-based
- Distributions are validated at construction and immutable afterwards
"""

__version__ = "1.0.0"
__author__ = "samplestats contributors"

from .core.errors import (
    StatsError,
    BadParamsError,
    ContainersMustBeSameLengthError,
    RankOutOfRangeError,
    UndefinedStatisticError,
)
from .core.models import Sample, StatsOptions
from .core.statistics import RankTieBreaker
from .core.distributions import Uniform, DiscreteUniform, Normal, ChiSquared

__all__ = [
    # Version
    "__version__",

    # Errors
    "StatsError",
    "BadParamsError",
    "ContainersMustBeSameLengthError",
    "RankOutOfRangeError",
    "UndefinedStatisticError",

    # Models
    "Sample",
    "StatsOptions",
    "RankTieBreaker",

    # Distributions
    "Uniform",
    "DiscreteUniform",
    "Normal",
    "ChiSquared",
]
