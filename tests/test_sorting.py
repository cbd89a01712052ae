"""Tests for the dual-array sort engine."""

import math

import numpy as np
import pytest

from samplestats.core.errors import ContainersMustBeSameLengthError
from samplestats.core.statistics.sorting import (
    insertion_sort,
    quick_sort,
    sort_all,
    sort_by_key,
)


def _check_sorted_with_permutation(values, indices, original):
    assert all(values[i] <= values[i + 1] for i in range(len(values) - 1))
    assert sorted(indices) == list(range(len(original)))
    for v, idx in zip(values, indices):
        assert v == original[idx]


class TestSortByKey:
    """Primary-key sort with a carried index buffer."""

    @pytest.mark.parametrize("n", [0, 1, 2, 3, 9, 10, 11, 12, 100, 1000])
    def test_sorts_and_carries_indices(self, n):
        rng = np.random.default_rng(n)
        original = list(rng.normal(size=n))
        values = list(original)
        indices = list(range(n))
        sort_by_key(values, indices)
        _check_sorted_with_permutation(values, indices, original)

    def test_duplicates(self):
        rng = np.random.default_rng(1)
        original = list(rng.integers(0, 5, size=300).astype(float))
        values = list(original)
        indices = list(range(len(values)))
        sort_by_key(values, indices)
        _check_sorted_with_permutation(values, indices, original)

    def test_mixed_sign_zeros(self):
        original = [0.0, -0.0, 1.0, -1.0, -0.0, 0.0, 2.0, -2.0, 0.0, -0.0, 3.0, -3.0]
        values = list(original)
        indices = list(range(len(values)))
        sort_by_key(values, indices)
        _check_sorted_with_permutation(values, indices, original)

    def test_infinities(self):
        original = [float("inf"), 1.0, float("-inf")] * 5
        values = list(original)
        indices = list(range(len(values)))
        sort_by_key(values, indices)
        assert values[:5] == [float("-inf")] * 5
        assert values[-5:] == [float("inf")] * 5

    def test_two_elements(self):
        values, indices = [2.0, 1.0], [0, 1]
        sort_by_key(values, indices)
        assert values == [1.0, 2.0]
        assert indices == [1, 0]

    def test_threshold_switches_algorithms(self):
        original = [5.0, 3.0, 4.0, 1.0, 2.0]
        for threshold in (2, 10):
            values = list(original)
            indices = list(range(5))
            sort_by_key(values, indices, threshold=threshold)
            assert values == [1.0, 2.0, 3.0, 4.0, 5.0]
            assert indices == [3, 4, 1, 2, 0]

    def test_numpy_values(self):
        values = np.array([3.0, 1.0, 2.0, 0.5, 9.0, 8.0, 7.0, 6.0, 5.0, 4.0, -1.0, 11.0])
        original = values.copy()
        indices = list(range(len(values)))
        sort_by_key(values, indices)
        assert np.all(np.diff(values) >= 0)
        np.testing.assert_array_equal(values, original[indices])

    def test_nan_terminates(self):
        rng = np.random.default_rng(9)
        values = list(rng.normal(size=60))
        values[10] = float("nan")
        values[40] = float("nan")
        indices = list(range(60))
        sort_by_key(values, indices)
        assert sorted(indices) == list(range(60))
        assert sum(1 for v in values if math.isnan(v)) == 2

    def test_length_mismatch_raises(self):
        with pytest.raises(ContainersMustBeSameLengthError):
            sort_by_key([1.0, 2.0], [0])
        with pytest.raises(ContainersMustBeSameLengthError):
            quick_sort([1.0, 2.0, 3.0], [0, 1], 0, 2)


class TestInsertionSort:
    """Insertion sort used for short buffers."""

    def test_is_stable(self):
        values = [2.0, 1.0, 2.0, 1.0]
        indices = [0, 1, 2, 3]
        insertion_sort(values, indices)
        assert values == [1.0, 1.0, 2.0, 2.0]
        assert indices == [1, 3, 0, 2]


class TestSortAll:
    """Sort by (value, index): fully deterministic."""

    def test_ties_broken_by_index(self):
        rng = np.random.default_rng(17)
        original = list(rng.integers(0, 4, size=250).astype(float))
        values = list(original)
        indices = list(range(len(values)))
        sort_all(values, indices)
        _check_sorted_with_permutation(values, indices, original)
        for i in range(len(values) - 1):
            if values[i] == values[i + 1]:
                assert indices[i] < indices[i + 1]

    def test_scrambled_indices_are_sorted_within_ties(self):
        values = [1.0, 1.0, 1.0, 0.0, 0.0]
        indices = [4, 0, 2, 3, 1]
        sort_all(values, indices)
        assert values == [0.0, 0.0, 1.0, 1.0, 1.0]
        assert indices == [1, 3, 0, 2, 4]

    @pytest.mark.parametrize("n", [0, 1, 2, 3])
    def test_degenerate_lengths(self, n):
        values = [float(n - i) for i in range(n)]
        indices = list(range(n))
        sort_all(values, indices)
        assert values == sorted(values)

    def test_length_mismatch_raises(self):
        with pytest.raises(ContainersMustBeSameLengthError):
            sort_all([1.0], [0, 1])
