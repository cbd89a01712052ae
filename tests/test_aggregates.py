"""Tests for one-pass aggregate statistics."""

import math

import numpy as np
import pytest

from samplestats.core.errors import ContainersMustBeSameLengthError
from samplestats.core.generate import periodic, sinusoidal
from samplestats.core.statistics.aggregates import (
    abs_maximum,
    abs_minimum,
    covariance,
    geometric_mean,
    harmonic_mean,
    maximum,
    mean,
    minimum,
    population_covariance,
    population_std_dev,
    population_variance,
    quadratic_mean,
    std_dev,
    variance,
)


def _numacc(center: float, low: float, high: float, pairs: int = 500):
    """NIST StRD NumAcc2..4 layout: center value, then alternating low/high."""
    data = [center]
    for _ in range(pairs):
        data.append(low)
        data.append(high)
    return data


NUMACC1 = [10000001.0, 10000003.0, 10000002.0]
NUMACC2 = _numacc(1.2, 1.1, 1.3)
NUMACC3 = _numacc(1000000.2, 1000000.1, 1000000.3)
NUMACC4 = _numacc(10000000.2, 10000000.1, 10000000.3)


# -----------------------------------------------------------------------------
# Empty data
# -----------------------------------------------------------------------------

@pytest.mark.parametrize(
    "func",
    [minimum, maximum, abs_minimum, abs_maximum, mean, quadratic_mean, variance,
     population_variance, std_dev, population_std_dev, geometric_mean, harmonic_mean],
)
def test_empty_data_returns_nan(func):
    assert math.isnan(func([]))


def test_single_value_sample_variance_is_nan_but_population_is_zero():
    assert math.isnan(variance([3.0]))
    assert population_variance([3.0]) == 0.0


# -----------------------------------------------------------------------------
# Min / max
# -----------------------------------------------------------------------------

class TestMinMax:
    """Linear min/max scans."""

    def test_short(self):
        data = [-1.0, 5.0, 0.0, -3.0, 10.0, -0.5, 4.0]
        assert minimum(data) == -3.0
        assert maximum(data) == 10.0

    def test_abs(self):
        data = [-1.0, 5.0, 0.5, -3.0, -10.0]
        assert abs_minimum(data) == 0.5
        assert abs_maximum(data) == 10.0

    def test_nan_replaces_accumulator(self):
        # NaN wins unless a later value compares smaller (it never does)
        assert math.isnan(minimum([1.0, float("nan"), 2.0]))
        assert math.isnan(maximum([1.0, float("nan"), 2.0]))

    def test_infinities(self):
        data = [2.0, float("-inf"), float("inf")]
        assert minimum(data) == float("-inf")
        assert maximum(data) == float("inf")

    def test_accepts_numpy_array(self):
        data = np.array([3.0, -2.0, 7.5])
        assert minimum(data) == -2.0
        assert maximum(data) == 7.5


# -----------------------------------------------------------------------------
# Mean / variance against NIST StRD numerical-accuracy datasets
# -----------------------------------------------------------------------------

class TestNistAccuracy:
    """NumAcc1-4 certified values: mean and standard deviation."""

    def test_numacc1(self):
        assert mean(NUMACC1) == 10000002.0
        assert std_dev(NUMACC1) == 1.0

    def test_numacc2(self):
        assert mean(NUMACC2) == pytest.approx(1.2, abs=1e-13)
        assert std_dev(NUMACC2) == pytest.approx(0.1, abs=1e-13)

    def test_numacc3(self):
        assert mean(NUMACC3) == pytest.approx(1000000.2, abs=1e-8)
        assert std_dev(NUMACC3) == pytest.approx(0.1, abs=1e-9)

    def test_numacc4(self):
        assert mean(NUMACC4) == pytest.approx(10000000.2, abs=1e-7)
        assert std_dev(NUMACC4) == pytest.approx(0.1, abs=1e-8)


class TestVariance:
    """Sample vs population variance."""

    def test_known_values(self):
        data = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]
        assert population_variance(data) == pytest.approx(4.0)
        assert population_std_dev(data) == pytest.approx(2.0)
        assert variance(data) == pytest.approx(32.0 / 7.0)

    def test_matches_numpy(self):
        rng = np.random.default_rng(7)
        data = rng.normal(50.0, 3.0, size=500)
        assert variance(data) == pytest.approx(np.var(data, ddof=1), rel=1e-12)
        assert population_variance(data) == pytest.approx(np.var(data), rel=1e-12)

    def test_does_not_modify_input(self):
        data = [3.0, 1.0, 2.0]
        variance(data)
        mean(data)
        assert data == [3.0, 1.0, 2.0]


# -----------------------------------------------------------------------------
# Covariance
# -----------------------------------------------------------------------------

class TestCovariance:
    """Two-pass covariance."""

    def test_consistent_with_variance(self):
        rng = np.random.default_rng(11)
        data = list(rng.uniform(-100.0, 100.0, size=200))
        assert covariance(data, data) == pytest.approx(variance(data), abs=1e-10)
        assert population_covariance(data, data) == pytest.approx(population_variance(data), abs=1e-10)

    def test_symmetric(self):
        rng = np.random.default_rng(3)
        a = list(rng.normal(size=200))
        b = list(rng.normal(size=200))
        assert covariance(a, b) == covariance(b, a)
        assert population_covariance(a, b) == population_covariance(b, a)

    def test_known_value(self):
        a = [1.0, 2.0, 3.0, 4.0]
        b = [2.0, 4.0, 6.0, 8.0]
        assert covariance(a, b) == pytest.approx(10.0 / 3.0)
        assert population_covariance(a, b) == pytest.approx(2.5)

    def test_length_mismatch_raises(self):
        with pytest.raises(ContainersMustBeSameLengthError):
            covariance([1.0, 2.0], [1.0])
        with pytest.raises(ContainersMustBeSameLengthError):
            population_covariance([1.0], [])

    def test_length_mismatch_is_value_error(self):
        with pytest.raises(ValueError):
            covariance([1.0, 2.0, 3.0], [1.0, 2.0])

    def test_insufficient_data(self):
        assert math.isnan(covariance([1.0], [2.0]))
        assert population_covariance([1.0], [2.0]) == 0.0
        assert math.isnan(population_covariance([], []))


# -----------------------------------------------------------------------------
# Generalized means
# -----------------------------------------------------------------------------

class TestGeneralizedMeans:
    """Geometric, harmonic and quadratic means."""

    def test_geometric_mean(self):
        assert geometric_mean([1.0, 4.0]) == pytest.approx(2.0)
        assert geometric_mean([2.0, 8.0, 4.0]) == pytest.approx(4.0)

    def test_harmonic_mean(self):
        assert harmonic_mean([1.0, 4.0, 4.0]) == pytest.approx(2.0)

    def test_negative_input_gives_nan(self):
        assert math.isnan(geometric_mean([1.0, -2.0, 3.0]))
        assert math.isnan(harmonic_mean([1.0, -2.0, 3.0]))

    def test_zero_collapses_to_zero(self):
        assert geometric_mean([0.0, 5.0]) == 0.0
        assert harmonic_mean([0.0, 5.0]) == 0.0

    def test_quadratic_mean(self):
        assert quadratic_mean([3.0, 4.0]) == pytest.approx(math.sqrt(12.5))
        assert quadratic_mean([-2.0, 2.0]) == pytest.approx(2.0)

    def test_quadratic_mean_of_sinusoidal(self):
        data = sinusoidal(128, 64.0, 16.0, 2.0)
        assert quadratic_mean(data) == pytest.approx(2.0 / math.sqrt(2.0), abs=1e-14)

    @pytest.mark.parametrize("length", [4 * 4096, 4 * 32768])
    def test_large_periodic_samples(self, length):
        data = periodic(length, 4.0, 1.0)
        assert mean(data) == pytest.approx(0.375, abs=1e-14)
        assert quadratic_mean(data) == pytest.approx(math.sqrt(0.21875), abs=1e-14)
