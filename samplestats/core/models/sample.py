"""
Sample wrapper exposing the statistics surface.

``Sample`` wraps a caller-owned buffer (a list or 1-D numpy array) without
copying it. Order-statistic methods (median, quantiles, ranks, ...) reorder
that buffer in place, exactly like the module-level functions in
:mod:`samplestats.core.statistics`.

Undefined results:
- default: NaN is returned (optionally logged, see StatsOptions.log_sentinels)
- strict:  UndefinedStatisticError is raised with the reason
"""

from __future__ import annotations

import copy
import math
from typing import Iterable, Optional, Sequence, Union

import numpy as np

from ..errors import UndefinedStatisticError
from ..statistics import aggregates
from ..statistics import order_statistics
from ..statistics.ranking import RankTieBreaker, ranks as _ranks
from .options import StatsOptions
from ...logutil import get_logger

logger = get_logger()

Buffer = Union[list, np.ndarray]


class Sample:
    """
    A buffer of floats with descriptive and order statistics.

    Attributes:
        data: The wrapped buffer (same object the caller passed, when it is a
            list or ndarray; other iterables are copied into a list)
        options: StatsOptions controlling strictness and sorting
    """

    def __init__(self, data: Iterable[float], options: Optional[StatsOptions] = None):
        if isinstance(data, np.ndarray):
            if data.ndim != 1:
                raise ValueError(f"Sample buffer must be 1-D, got {data.ndim} dimensions")
        elif not isinstance(data, list):
            data = [float(x) for x in data]
        self.data: Buffer = data
        self.options = options or StatsOptions.default()

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self):
        return iter(self.data)

    def __repr__(self) -> str:
        return f"Sample(n={len(self.data)}, strict={self.options.strict})"

    def copy(self) -> "Sample":
        """Return a Sample over a copy of the buffer, with the same options."""
        return Sample(copy.copy(self.data), self.options)

    # ------------------------------------------------------------------
    # Sentinel handling
    # ------------------------------------------------------------------

    def _undefined(self, statistic: str, reason: str) -> float:
        if self.options.strict:
            raise UndefinedStatisticError(f"{statistic} is undefined: {reason}")
        if self.options.log_sentinels:
            logger.debug("%s returned NaN: %s", statistic, reason)
        return float("nan")

    def _require(self, statistic: str, minimum_count: int) -> Optional[float]:
        n = len(self.data)
        if n < minimum_count:
            noun = "value" if minimum_count == 1 else "values"
            return self._undefined(statistic, f"needs at least {minimum_count} {noun}, got {n}")
        return None

    def _require_non_negative(self, statistic: str) -> Optional[float]:
        if any(float(x) < 0.0 for x in self.data):
            return self._undefined(statistic, "data contains negative values")
        return None

    # ------------------------------------------------------------------
    # Aggregates (non-destructive)
    # ------------------------------------------------------------------

    def min(self) -> float:
        """Smallest value (NaN-propagating)."""
        undefined = self._require("min", 1)
        return undefined if undefined is not None else aggregates.minimum(self.data)

    def max(self) -> float:
        """Largest value (NaN-propagating)."""
        undefined = self._require("max", 1)
        return undefined if undefined is not None else aggregates.maximum(self.data)

    def abs_min(self) -> float:
        undefined = self._require("abs_min", 1)
        return undefined if undefined is not None else aggregates.abs_minimum(self.data)

    def abs_max(self) -> float:
        undefined = self._require("abs_max", 1)
        return undefined if undefined is not None else aggregates.abs_maximum(self.data)

    def mean(self) -> float:
        """Arithmetic mean."""
        undefined = self._require("mean", 1)
        return undefined if undefined is not None else aggregates.mean(self.data)

    def geometric_mean(self) -> float:
        undefined = self._require("geometric_mean", 1)
        if undefined is None:
            undefined = self._require_non_negative("geometric_mean")
        return undefined if undefined is not None else aggregates.geometric_mean(self.data)

    def harmonic_mean(self) -> float:
        undefined = self._require("harmonic_mean", 1)
        if undefined is None:
            undefined = self._require_non_negative("harmonic_mean")
        return undefined if undefined is not None else aggregates.harmonic_mean(self.data)

    def quadratic_mean(self) -> float:
        """Root mean square."""
        undefined = self._require("quadratic_mean", 1)
        return undefined if undefined is not None else aggregates.quadratic_mean(self.data)

    def variance(self) -> float:
        """Unbiased sample variance (n - 1 denominator)."""
        undefined = self._require("variance", 2)
        return undefined if undefined is not None else aggregates.variance(self.data)

    def std_dev(self) -> float:
        """Sample standard deviation."""
        undefined = self._require("std_dev", 2)
        return undefined if undefined is not None else aggregates.std_dev(self.data)

    def population_variance(self) -> float:
        undefined = self._require("population_variance", 1)
        return undefined if undefined is not None else aggregates.population_variance(self.data)

    def population_std_dev(self) -> float:
        undefined = self._require("population_std_dev", 1)
        return undefined if undefined is not None else aggregates.population_std_dev(self.data)

    def covariance(self, other: Union["Sample", Sequence[float]]) -> float:
        """
        Unbiased sample covariance with another sample of the same length.

        Raises:
            ContainersMustBeSameLengthError: if lengths differ (in every mode)
        """
        other_data = other.data if isinstance(other, Sample) else other
        if len(other_data) == len(self.data):
            undefined = self._require("covariance", 2)
            if undefined is not None:
                return undefined
        return aggregates.covariance(self.data, other_data)

    def population_covariance(self, other: Union["Sample", Sequence[float]]) -> float:
        """
        Population covariance with another sample of the same length.

        Raises:
            ContainersMustBeSameLengthError: if lengths differ (in every mode)
        """
        other_data = other.data if isinstance(other, Sample) else other
        if len(other_data) == len(self.data):
            undefined = self._require("population_covariance", 1)
            if undefined is not None:
                return undefined
        return aggregates.population_covariance(self.data, other_data)

    # ------------------------------------------------------------------
    # Order statistics (destructive: the buffer is reordered)
    # ------------------------------------------------------------------

    def order_statistic(self, order: int) -> float:
        """One-based order statistic; reorders the buffer."""
        n = len(self.data)
        if order < 1 or order > n:
            return self._undefined("order_statistic", f"order {order} outside [1, {n}]")
        return order_statistics.order_statistic(self.data, order)

    def median(self) -> float:
        """Sample median; reorders the buffer."""
        undefined = self._require("median", 1)
        return undefined if undefined is not None else order_statistics.median(self.data)

    def quantile(self, tau: float) -> float:
        """Type-8 quantile estimate at ``tau`` in [0, 1]; reorders the buffer."""
        undefined = self._require("quantile", 1)
        if undefined is not None:
            return undefined
        if math.isnan(tau) or not 0.0 <= tau <= 1.0:
            return self._undefined("quantile", f"tau {tau} outside [0, 1]")
        return order_statistics.quantile(self.data, tau)

    def percentile(self, p: int) -> float:
        """Percentile for integer ``p`` in [0, 100]; reorders the buffer."""
        undefined = self._require("percentile", 1)
        if undefined is not None:
            return undefined
        if not 0 <= p <= 100:
            return self._undefined("percentile", f"p {p} outside [0, 100]")
        return order_statistics.percentile(self.data, p)

    def lower_quartile(self) -> float:
        undefined = self._require("lower_quartile", 1)
        return undefined if undefined is not None else order_statistics.lower_quartile(self.data)

    def upper_quartile(self) -> float:
        undefined = self._require("upper_quartile", 1)
        return undefined if undefined is not None else order_statistics.upper_quartile(self.data)

    def interquartile_range(self) -> float:
        undefined = self._require("interquartile_range", 1)
        return undefined if undefined is not None else order_statistics.interquartile_range(self.data)

    def ranks(self, tie_breaker: Union[RankTieBreaker, str] = RankTieBreaker.AVERAGE) -> np.ndarray:
        """
        Rank vector aligned with the original positions; sorts the buffer.

        Empty samples give an empty array in every mode.
        """
        return _ranks(self.data, tie_breaker, self.options.insertion_sort_threshold)
