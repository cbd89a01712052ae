"""samplestats.core.distributions.base

Capability interfaces for probability distributions.

A concrete distribution inherits only the capabilities it has in closed
form, so callers check support with ``isinstance``::

    if isinstance(dist, Entropy):
        h = dist.entropy()

Query methods are unchecked: they rely on the parameter invariants enforced
by the distribution's constructor, and may raise for inputs outside the
distribution's domain.

Randomness is injected. Any object with ``uniform(low, high) -> float``
works as a random source (``numpy.random.Generator``, ``random.Random``);
``None`` means a fresh ``numpy.random.default_rng()``.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any, Optional

import numpy as np


def resolve_rng(rng: Optional[Any] = None) -> Any:
    """Return ``rng`` or a new numpy Generator if it is None."""
    if rng is None:
        return np.random.default_rng()
    if not hasattr(rng, "uniform"):
        raise TypeError(f"random source must provide uniform(low, high), got {type(rng).__name__}")
    return rng


def open_unit_draw(rng: Any) -> float:
    """Draw u uniformly from (0, 1), rejecting an exact 0.0."""
    u = 0.0
    while u <= 0.0:
        u = float(rng.uniform(0.0, 1.0))
    return u


class Distribution(ABC):
    """A distribution that can be sampled."""

    @abstractmethod
    def sample(self, rng: Optional[Any] = None) -> float:
        """Draw one random value using ``rng`` as the source of randomness."""

    def samples(self, size: int, rng: Optional[Any] = None) -> np.ndarray:
        """Draw ``size`` independent values into a float64 array."""
        if size < 0:
            raise ValueError("size must be non-negative")
        source = resolve_rng(rng)
        return np.fromiter((self.sample(source) for _ in range(size)), dtype=float, count=size)


class Univariate(Distribution):
    """A univariate distribution with a closed-form CDF."""

    @abstractmethod
    def cdf(self, x: float) -> float:
        """Cumulative distribution function at ``x``."""

    @abstractmethod
    def min(self) -> float:
        """Smallest value of the support."""

    @abstractmethod
    def max(self) -> float:
        """Largest value of the support."""


class Mean(Distribution):
    @abstractmethod
    def mean(self) -> float:
        """Mean of the distribution."""


class Variance(Mean):
    """Closed-form variance; requires a closed-form mean."""

    @abstractmethod
    def variance(self) -> float:
        """Variance of the distribution."""

    def std_dev(self) -> float:
        """Standard deviation, the square root of the variance."""
        return math.sqrt(self.variance())


class Entropy(Distribution):
    @abstractmethod
    def entropy(self) -> float:
        """Differential (or Shannon, for discrete) entropy in nats."""


class Skewness(Distribution):
    @abstractmethod
    def skewness(self) -> float:
        """Skewness of the distribution."""


class Median(Distribution):
    @abstractmethod
    def median(self) -> float:
        """Median of the distribution."""


class Mode(Distribution):
    @abstractmethod
    def mode(self) -> float:
        """Mode of the distribution."""


class Continuous(Distribution):
    """A distribution with a probability density function."""

    @abstractmethod
    def pdf(self, x: float) -> float:
        """Probability density at ``x``."""

    @abstractmethod
    def ln_pdf(self, x: float) -> float:
        """Natural log of the probability density at ``x``."""


class Discrete(Distribution):
    """A distribution with a probability mass function over integers."""

    @abstractmethod
    def pmf(self, x: int) -> float:
        """Probability mass at ``x``."""

    @abstractmethod
    def ln_pmf(self, x: int) -> float:
        """Natural log of the probability mass at ``x``."""
