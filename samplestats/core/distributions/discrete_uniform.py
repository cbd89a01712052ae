"""samplestats.core.distributions.discrete_uniform

Discrete uniform distribution on the integers min, min + 1, ..., max.
"""

from __future__ import annotations

import math
from typing import Any, Optional

from ..errors import BadParamsError
from ...logutil import get_logger
from .base import (
    Discrete,
    Entropy,
    Median,
    Mode,
    Skewness,
    Univariate,
    Variance,
    resolve_rng,
)

logger = get_logger()


class DiscreteUniform(Univariate, Variance, Entropy, Skewness, Median, Mode, Discrete):
    """
    Discrete uniform distribution over ``[min, max]``.

    Attributes:
        min: Smallest integer of the support
        max: Largest integer of the support

    Raises:
        BadParamsError: if ``min > max`` or a bound is not an integer
    """

    def __init__(self, min: int, max: int):
        if isinstance(min, float) and min.is_integer():
            min = int(min)
        if isinstance(max, float) and max.is_integer():
            max = int(max)
        if not isinstance(min, int) or not isinstance(max, int) or min > max:
            logger.debug("rejected DiscreteUniform parameters min=%r max=%r", min, max)
            raise BadParamsError(
                f"DiscreteUniform requires integers with min <= max, got min={min}, max={max}"
            )
        self._min = min
        self._max = max

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DiscreteUniform):
            return NotImplemented
        return self._min == other._min and self._max == other._max

    def __hash__(self) -> int:
        return hash((DiscreteUniform, self._min, self._max))

    def __repr__(self) -> str:
        return f"DiscreteUniform(min={self._min}, max={self._max})"

    @property
    def _count(self) -> int:
        return self._max - self._min + 1

    def sample(self, rng: Optional[Any] = None) -> float:
        """Draw an integer in [min, max], returned as a float."""
        u = float(resolve_rng(rng).uniform(self._min, self._max + 1.0))
        # uniform() may return its upper bound after rounding
        return float(min(math.floor(u), self._max))

    def cdf(self, x: float) -> float:
        if x < self._min:
            return 0.0
        if x >= self._max:
            return 1.0
        return (math.floor(x) - self._min + 1) / self._count

    def min(self) -> float:
        return float(self._min)

    def max(self) -> float:
        return float(self._max)

    def mean(self) -> float:
        return (self._min + self._max) / 2.0

    def variance(self) -> float:
        n = float(self._count)
        return (n * n - 1.0) / 12.0

    def entropy(self) -> float:
        return math.log(self._count)

    def skewness(self) -> float:
        return 0.0

    def median(self) -> float:
        return (self._min + self._max) / 2.0

    def mode(self) -> float:
        """Every integer is equally likely; the (lower) midpoint is returned."""
        return float(math.floor((self._min + self._max) / 2.0))

    def pmf(self, x: int) -> float:
        if float(x).is_integer() and self._min <= x <= self._max:
            return 1.0 / self._count
        return 0.0

    def ln_pmf(self, x: int) -> float:
        if float(x).is_integer() and self._min <= x <= self._max:
            return -math.log(self._count)
        return float("-inf")
