"""samplestats.core.distributions.special

Special functions needed by the closed-form distributions.

Implemented:
- Regularized lower incomplete gamma P(a, x): series for x < a + 1,
  modified-Lentz continued fraction for Q(a, x) = 1 - P(a, x) otherwise
- Standard normal quantile via stdlib ``statistics.NormalDist``

References:
- Numerical Recipes, section 6.2 (gser / gcf)
"""

from __future__ import annotations

import math
from statistics import NormalDist

_EPS = 1e-15
_MAX_IT = 2000
_TINY = 1e-300

_STANDARD_NORMAL = NormalDist()


def gamma_lr(a: float, x: float, eps: float = _EPS, max_it: int = _MAX_IT) -> float:
    """Regularized lower incomplete gamma P(a, x).

        P(a, x) = 1/Gamma(a) * integral_0^x t^(a-1) e^(-t) dt

    Args:
        a: shape parameter (> 0)
        x: integration limit (>= 0)

    Returns:
        P(a, x) in [0, 1]

    Raises:
        ValueError: if ``a <= 0`` or ``x < 0``
    """
    if math.isnan(a) or math.isnan(x):
        return float("nan")
    if a <= 0.0:
        raise ValueError("a must be positive")
    if x < 0.0:
        raise ValueError("x must be non-negative")
    if x == 0.0:
        return 0.0
    if math.isinf(x):
        return 1.0

    # e^{-x} x^a / Gamma(a), in log space
    log_prefactor = -x + a * math.log(x) - math.lgamma(a)

    if x < a + 1.0:
        ap = a
        total = 1.0 / a
        term = total
        for _ in range(max_it):
            ap += 1.0
            term *= x / ap
            total += term
            if abs(term) < abs(total) * eps:
                break
        return min(1.0, total * math.exp(log_prefactor))

    b = x + 1.0 - a
    c = 1.0 / _TINY
    d = 1.0 / b
    h = d
    for i in range(1, max_it + 1):
        an = -i * (i - a)
        b += 2.0
        d = an * d + b
        if abs(d) < _TINY:
            d = _TINY
        c = b + an / c
        if abs(c) < _TINY:
            c = _TINY
        d = 1.0 / d
        delta = d * c
        h *= delta
        if abs(delta - 1.0) < eps:
            break

    q = h * math.exp(log_prefactor)
    return min(1.0, max(0.0, 1.0 - q))


def standard_normal_ppf(p: float) -> float:
    """Standard normal quantile for ``p`` in (0, 1)."""
    if not (0.0 < p < 1.0):
        raise ValueError("p must be in (0,1)")
    return float(_STANDARD_NORMAL.inv_cdf(p))
