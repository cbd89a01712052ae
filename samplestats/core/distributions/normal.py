"""samplestats.core.distributions.normal

Normal (Gaussian) distribution N(mean, std_dev^2).

Sampling is by inverse transform of a uniform draw, so any random source
with ``uniform(low, high)`` can drive it.
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
    open_unit_draw,
    resolve_rng,
)
from .special import standard_normal_ppf

logger = get_logger()

_LN_SQRT_2PI = 0.5 * math.log(2.0 * math.pi)


class Normal(Univariate, Variance, Entropy, Skewness, Median, Mode, Continuous):
    """
    Normal distribution.

    Attributes:
        mean: Location parameter
        std_dev: Scale parameter (> 0)

    Raises:
        BadParamsError: if a parameter is NaN or ``std_dev <= 0``
    """

    def __init__(self, mean: float, std_dev: float):
        mean = float(mean)
        std_dev = float(std_dev)
        if math.isnan(mean) or math.isnan(std_dev) or std_dev <= 0.0:
            logger.debug("rejected Normal parameters mean=%r std_dev=%r", mean, std_dev)
            raise BadParamsError(f"Normal requires std_dev > 0 and no NaN, got mean={mean}, std_dev={std_dev}")
        self._mean = mean
        self._std_dev = std_dev

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Normal):
            return NotImplemented
        return self._mean == other._mean and self._std_dev == other._std_dev

    def __hash__(self) -> int:
        return hash((Normal, self._mean, self._std_dev))

    def __repr__(self) -> str:
        return f"Normal(mean={self._mean}, std_dev={self._std_dev})"

    def sample(self, rng: Optional[Any] = None) -> float:
        return self.inverse_cdf(open_unit_draw(resolve_rng(rng)))

    def _z(self, x: float) -> float:
        return (x - self._mean) / self._std_dev

    def cdf(self, x: float) -> float:
        return 0.5 * math.erfc(-self._z(x) / math.sqrt(2.0))

    def inverse_cdf(self, p: float) -> float:
        """Quantile function.

        Args:
            p: probability in [0, 1]; 0 and 1 map to -inf and +inf

        Raises:
            ValueError: if ``p`` is outside [0, 1] or NaN
        """
        if p == 0.0:
            return float("-inf")
        if p == 1.0:
            return float("inf")
        return self._mean + self._std_dev * standard_normal_ppf(p)

    def min(self) -> float:
        return float("-inf")

    def max(self) -> float:
        return float("inf")

    def mean(self) -> float:
        return self._mean

    def variance(self) -> float:
        return self._std_dev * self._std_dev

    def std_dev(self) -> float:
        return self._std_dev

    def entropy(self) -> float:
        """ln(std_dev * sqrt(2 * pi * e))"""
        return math.log(self._std_dev) + _LN_SQRT_2PI + 0.5

    def skewness(self) -> float:
        return 0.0

    def median(self) -> float:
        return self._mean

    def mode(self) -> float:
        return self._mean

    def pdf(self, x: float) -> float:
        return math.exp(self.ln_pdf(x))

    def ln_pdf(self, x: float) -> float:
        z = self._z(x)
        return -0.5 * z * z - math.log(self._std_dev) - _LN_SQRT_2PI
