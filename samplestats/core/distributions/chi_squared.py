"""samplestats.core.distributions.chi_squared

Chi-square distribution with ``freedom`` degrees of freedom.

  If X ~ ChiSquared(k), then X = 2 * Gamma(shape=k/2, scale=1), so
  CDF(x) = P(k/2, x/2) with P the regularized lower incomplete gamma.

The quantile uses the Wilson-Hilferty approximation as a starting point and
then a safeguarded Newton iteration that keeps a bracket, which is stable
from ~1 up to a few thousand degrees of freedom.

The median has no closed form; the Wilson-Hilferty value
``k * (1 - 2/(9k))^3`` is returned.
"""

from __future__ import annotations

import math
from typing import Any, Optional

from ..errors import BadParamsError
from ...logutil import get_logger
from .base import (
    Continuous,
    Median,
    Mode,
    Skewness,
    Univariate,
    Variance,
    open_unit_draw,
    resolve_rng,
)
from .special import gamma_lr, standard_normal_ppf

logger = get_logger()

_QUANTILE_TOL = 1e-12
_QUANTILE_MAX_IT = 100
_BRACKET_MAX_DOUBLINGS = 200


class ChiSquared(Univariate, Variance, Skewness, Median, Mode, Continuous):
    """
    Chi-square distribution.

    Attributes:
        freedom: Degrees of freedom (> 0, need not be an integer)

    Raises:
        BadParamsError: if ``freedom`` is NaN, infinite or not positive
    """

    def __init__(self, freedom: float):
        freedom = float(freedom)
        if math.isnan(freedom) or math.isinf(freedom) or freedom <= 0.0:
            logger.debug("rejected ChiSquared parameter freedom=%r", freedom)
            raise BadParamsError(f"ChiSquared requires finite freedom > 0, got {freedom}")
        self._freedom = freedom

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChiSquared):
            return NotImplemented
        return self._freedom == other._freedom

    def __hash__(self) -> int:
        return hash((ChiSquared, self._freedom))

    def __repr__(self) -> str:
        return f"ChiSquared(freedom={self._freedom})"

    @property
    def freedom(self) -> float:
        return self._freedom

    def sample(self, rng: Optional[Any] = None) -> float:
        return self.inverse_cdf(open_unit_draw(resolve_rng(rng)))

    def cdf(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        return gamma_lr(0.5 * self._freedom, 0.5 * x)

    def inverse_cdf(self, p: float) -> float:
        """Quantile function.

        Args:
            p: probability in [0, 1]; 1 maps to +inf

        Raises:
            ValueError: if ``p`` is outside [0, 1] or NaN
        """
        if not (0.0 <= p <= 1.0):
            raise ValueError("p must be in [0,1]")
        if p == 0.0:
            return 0.0
        if p == 1.0:
            return float("inf")

        # Initial guess via Wilson-Hilferty
        k = self._freedom
        z = standard_normal_ppf(p)
        t = 1.0 - 2.0 / (9.0 * k) + z * math.sqrt(2.0 / (9.0 * k))
        x = k * max(t, 1e-12) ** 3

        lo = 0.0
        hi = max(x, 1e-12)
        for _ in range(_BRACKET_MAX_DOUBLINGS):
            if self.cdf(hi) >= p:
                break
            hi *= 2.0
        else:
            return hi

        x = min(max(x, lo + 1e-15), hi - 1e-15)

        for _ in range(_QUANTILE_MAX_IT):
            cdf = self.cdf(x)
            if cdf < p:
                lo = x
            else:
                hi = x

            pdf = self.pdf(x)
            x_new = x - (cdf - p) / pdf if pdf > 0.0 else float("nan")

            # keep the Newton step inside the bracket
            if not math.isfinite(x_new) or x_new <= lo or x_new >= hi:
                x_new = 0.5 * (lo + hi)

            if abs(x_new - x) <= _QUANTILE_TOL * max(1.0, x):
                return x_new
            x = x_new

        return x

    def min(self) -> float:
        return 0.0

    def max(self) -> float:
        return float("inf")

    def mean(self) -> float:
        return self._freedom

    def variance(self) -> float:
        return 2.0 * self._freedom

    def skewness(self) -> float:
        return math.sqrt(8.0 / self._freedom)

    def median(self) -> float:
        k = self._freedom
        return k * (1.0 - 2.0 / (9.0 * k)) ** 3

    def mode(self) -> float:
        return max(self._freedom - 2.0, 0.0)

    def pdf(self, x: float) -> float:
        if x < 0.0:
            return 0.0
        if x == 0.0:
            k = self._freedom
            if k < 2.0:
                return float("inf")
            return 0.5 if k == 2.0 else 0.0
        return math.exp(self.ln_pdf(x))

    def ln_pdf(self, x: float) -> float:
        """(k/2 - 1) ln x - x/2 - (k/2) ln 2 - lgamma(k/2)"""
        if x < 0.0:
            return float("-inf")
        if x == 0.0:
            density = self.pdf(0.0)
            return float("-inf") if density == 0.0 else math.log(density)
        if math.isinf(x):
            return float("-inf")
        half_k = 0.5 * self._freedom
        return (half_k - 1.0) * math.log(x) - 0.5 * x - half_k * math.log(2.0) - math.lgamma(half_k)
