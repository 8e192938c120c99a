"""Tests for inequality metric calculations."""

import itertools

import numpy as np
import pytest

from geolens.fairness.metrics import (
    compute_gini_coefficient,
    compute_coefficient_of_variation,
    compute_deviation_from,
    compute_mean,
)


def pairwise_gini(values):
    """Reference O(n^2) mean-absolute-difference Gini."""
    arr = np.asarray(values, dtype=np.float64)
    n = arr.size
    mean = arr.mean()
    if n == 0 or mean == 0:
        return 0.0
    return float(np.abs(arr[:, None] - arr[None, :]).sum() / (2 * n * n * mean))


class TestGiniCoefficient:
    """Tests for Gini coefficient computation."""

    def test_equal_values(self):
        """Test that equal values give Gini = 0."""
        result = compute_gini_coefficient([5.0, 5.0, 5.0, 5.0])
        assert result == pytest.approx(0.0, abs=1e-12)

    def test_equal_fractional_values(self):
        """Test that repeated non-integer values give Gini = 0."""
        result = compute_gini_coefficient([0.1] * 7)
        assert result == pytest.approx(0.0, abs=1e-12)

    def test_empty_returns_zero(self):
        """Test that an empty sequence gives 0."""
        assert compute_gini_coefficient([]) == 0.0

    def test_all_zeros_returns_zero(self):
        """Test that a zero mean gives 0 instead of dividing by zero."""
        assert compute_gini_coefficient([0, 0, 0]) == 0.0

    def test_single_element(self):
        """Test that a single value is perfectly equal."""
        assert compute_gini_coefficient([42.0]) == pytest.approx(0.0)

    def test_one_holder(self):
        """Test that one non-zero value among n gives (n - 1) / n."""
        result = compute_gini_coefficient([0, 0, 0, 1])
        assert result == pytest.approx(0.75)

    def test_known_value(self):
        """Test Gini with a hand-computed value."""
        # sum |ai - aj| = 20, 2 * n^2 * mean = 80
        result = compute_gini_coefficient([1, 2, 3, 4])
        assert result == pytest.approx(0.25)

    def test_two_regions(self):
        """Test Gini of a 90/10 split."""
        result = compute_gini_coefficient([90, 10])
        assert result == pytest.approx(0.4)

    def test_permutation_invariant(self):
        """Test that ordering of the input does not matter."""
        values = [3.0, 0.5, 7.0, 2.0]
        expected = compute_gini_coefficient(values)
        for perm in itertools.permutations(values):
            assert compute_gini_coefficient(list(perm)) == pytest.approx(expected)

    def test_matches_pairwise_form(self):
        """Test that the rank-weighted form equals the pairwise form."""
        rng = np.random.default_rng(7)
        for n in [1, 2, 3, 10, 50]:
            values = rng.uniform(0.0, 100.0, size=n).tolist()
            assert compute_gini_coefficient(values) == pytest.approx(
                pairwise_gini(values), abs=1e-9
            )

    def test_matches_pairwise_form_integer_counts(self):
        """Test equivalence on integer counts with zeros and ties."""
        values = [0, 0, 3, 3, 10, 1, 0, 25]
        assert compute_gini_coefficient(values) == pytest.approx(pairwise_gini(values))

    def test_bounds(self):
        """Test that Gini is always in [0, 1] for non-negative values."""
        rng = np.random.default_rng(42)
        for n in [2, 3, 5, 10, 100]:
            values = rng.exponential(10.0, size=n).tolist()
            result = compute_gini_coefficient(values)
            assert 0.0 <= result <= 1.0

    def test_accepts_numpy_array(self):
        """Test that numpy arrays are accepted."""
        result = compute_gini_coefficient(np.array([1, 2, 3, 4]))
        assert isinstance(result, float)
        assert result == pytest.approx(0.25)


class TestCoefficientOfVariation:
    """Tests for coefficient of variation computation."""

    def test_equal_values(self):
        """Test that equal values have CV = 0."""
        result = compute_coefficient_of_variation([10, 10, 10])
        assert result == pytest.approx(0.0)

    def test_known_cv(self):
        """Test CV with known values."""
        # Mean = 3.0, population std = sqrt(2)
        result = compute_coefficient_of_variation([1, 2, 3, 4, 5])
        assert result == pytest.approx(np.sqrt(2.0) / 3.0)

    def test_two_regions(self):
        """Test CV of a 90/10 split."""
        result = compute_coefficient_of_variation([90, 10])
        assert result == pytest.approx(0.8)

    def test_zero_mean_returns_zero(self):
        """Test that zero mean returns 0."""
        assert compute_coefficient_of_variation([0, 0, 0]) == 0.0

    def test_empty_raises_error(self):
        """Test that empty sequence raises ValueError."""
        with pytest.raises(ValueError, match="cannot be empty"):
            compute_coefficient_of_variation([])


class TestDeviationFrom:
    """Tests for RMS deviation around a fixed center."""

    def test_values_at_center(self):
        """Test zero deviation when all values equal the center."""
        assert compute_deviation_from([50.0, 50.0], 50.0) == pytest.approx(0.0)

    def test_known_deviation(self):
        """Test deviation with known values."""
        assert compute_deviation_from([100.0, 0.0], 50.0) == pytest.approx(50.0)

    def test_center_is_not_mean(self):
        """Test that the center is used instead of the sample mean."""
        # Mean is 10, but deviation is measured from 0
        assert compute_deviation_from([10.0, 10.0], 0.0) == pytest.approx(10.0)

    def test_empty_returns_zero(self):
        """Test that an empty sequence gives 0."""
        assert compute_deviation_from([], 10.0) == 0.0


class TestMean:
    """Tests for the empty-safe mean."""

    def test_known_mean(self):
        assert compute_mean([1.0, 2.0, 3.0]) == pytest.approx(2.0)

    def test_empty_returns_zero(self):
        assert compute_mean([]) == 0.0
