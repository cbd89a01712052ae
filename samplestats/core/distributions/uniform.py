"""samplestats.core.distributions.uniform

Continuous uniform distribution on [min, max].

Closed forms:
    pdf(x)   = 1 / (max - min)             for min <= x <= max, else 0
    cdf(x)   = (x - min) / (max - min)     clamped to [0, 1]
    mean     = median = mode = (min + max) / 2
    variance = (max - min)^2 / 12
    entropy  = ln(max - min)
    skewness = 0

The degenerate case min == max is allowed: the density is an infinite spike
at the single point and the entropy is -inf.
"""

from __future__ import annotations

import math
from typing import Any, Optional

from ..errors import BadParamsError
from ...logutil import get_logger
from .base import (
    Continuous,
    Entropy,
    Median,
    Mode,
    Skewness,
    Univariate,
    Variance,
    resolve_rng,
)

logger = get_logger()

INF = float("inf")


def _ln(x: float) -> float:
    # natural log extended to ln(0) = -inf
    return -INF if x == 0.0 else math.log(x)


class Uniform(Univariate, Variance, Entropy, Skewness, Median, Mode, Continuous):
    """
    Continuous uniform distribution.

    Attributes:
        min: Lower bound of the support
        max: Upper bound of the support

    Raises:
        BadParamsError: if either bound is NaN or ``min > max``
    """

    def __init__(self, min: float, max: float):
        min = float(min)
        max = float(max)
        if math.isnan(min) or math.isnan(max) or min > max:
            logger.debug("rejected Uniform parameters min=%r max=%r", min, max)
            raise BadParamsError(f"Uniform requires min <= max and no NaN, got min={min}, max={max}")
        self._min = min
        self._max = max

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Uniform):
            return NotImplemented
        return self._min == other._min and self._max == other._max

    def __hash__(self) -> int:
        return hash((Uniform, self._min, self._max))

    def __repr__(self) -> str:
        return f"Uniform(min={self._min}, max={self._max})"

    def sample(self, rng: Optional[Any] = None) -> float:
        """Draw a value in [min, max] from ``rng``."""
        return float(resolve_rng(rng).uniform(self._min, self._max))

    def cdf(self, x: float) -> float:
        """0 for ``x <= min``, 1 for ``x >= max``, linear in between."""
        if x <= self._min:
            return 0.0
        if x >= self._max:
            return 1.0
        return (x - self._min) / (self._max - self._min)

    def min(self) -> float:
        return self._min

    def max(self) -> float:
        return self._max

    def mean(self) -> float:
        return (self._min + self._max) / 2.0

    def variance(self) -> float:
        width = self._max - self._min
        return width * width / 12.0

    def entropy(self) -> float:
        return _ln(self._max - self._min)

    def skewness(self) -> float:
        return 0.0

    def median(self) -> float:
        return (self._min + self._max) / 2.0

    def mode(self) -> float:
        """Every point is equally likely; the midpoint is returned."""
        return (self._min + self._max) / 2.0

    def pdf(self, x: float) -> float:
        """Density; 0 outside [min, max]."""
        if x < self._min or x > self._max:
            return 0.0
        width = self._max - self._min
        return INF if width == 0.0 else 1.0 / width

    def ln_pdf(self, x: float) -> float:
        """Log density; -inf outside [min, max]."""
        if x < self._min or x > self._max:
            return -INF
        return -_ln(self._max - self._min)
