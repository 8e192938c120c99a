"""Tests for grid-density coverage."""

import numpy as np
import pytest

from geolens.data.points import DataPoint
from geolens.spatial.grid import GRID_SIZE, compute_grid_coverage


def make_points(coords):
    return [DataPoint(id=f"p{i}", lat=lat, lng=lng) for i, (lat, lng) in enumerate(coords)]


CORNERS = [(0.0, 0.0), (0.0, 10.0), (10.0, 0.0), (10.0, 10.0)]


class TestGridCoverage:
    """Tests for compute_grid_coverage."""

    def test_no_points(self):
        """Test that no points give zero coverage."""
        result = compute_grid_coverage([])

        assert result.coverage_score == 0.0
        assert result.occupied_cells == 0
        assert result.total_cells == GRID_SIZE * GRID_SIZE
        assert result.bounds is None

    def test_single_point(self):
        """Test that a single point falls back to one occupied cell."""
        result = compute_grid_coverage(make_points([(1.0, 2.0)]))

        assert result.occupied_cells == 1
        assert result.coverage_score == pytest.approx(1.0)
        assert result.max_density == 1

    def test_zero_latitude_range(self):
        """Test that points sharing one latitude count as one cell."""
        result = compute_grid_coverage(make_points([(5.0, float(i)) for i in range(20)]))

        assert result.occupied_cells == 1
        assert result.coverage_score == pytest.approx(1.0)
        assert result.max_density == 20

    def test_zero_longitude_range(self):
        """Test that points sharing one longitude count as one cell."""
        result = compute_grid_coverage(make_points([(float(i), -3.0) for i in range(5)]))
        assert result.occupied_cells == 1

    def test_corners(self):
        """Test that extreme corners land in four distinct cells."""
        result = compute_grid_coverage(make_points(CORNERS))

        assert result.occupied_cells == 4
        assert result.coverage_score == pytest.approx(4.0)
        assert result.mean_density == pytest.approx(1.0)
        assert result.bounds.north == 10.0
        assert result.bounds.west == 0.0

    def test_full_grid(self):
        """Test that one point per cell saturates coverage at 100."""
        coords = [(i + 0.5, j + 0.5) for i in range(10) for j in range(10)]
        result = compute_grid_coverage(make_points(coords))

        assert result.occupied_cells == 100
        assert result.coverage_score == pytest.approx(100.0)

    def test_densities(self):
        """Test per-cell density statistics."""
        coords = CORNERS + [(0.1, 0.1), (0.2, 0.2)]
        result = compute_grid_coverage(make_points(coords))

        assert result.occupied_cells == 4
        assert result.max_density == 3
        assert result.min_density == 1
        assert result.mean_density == pytest.approx(6 / 4)

    def test_monotonic_with_fixed_bounds(self):
        """Test that adding points inside fixed bounds never lowers coverage."""
        rng = np.random.default_rng(3)
        coords = list(CORNERS)
        previous = compute_grid_coverage(make_points(coords)).coverage_score
        for lat, lng in rng.uniform(0.0, 10.0, size=(200, 2)):
            coords.append((float(lat), float(lng)))
            score = compute_grid_coverage(make_points(coords)).coverage_score
            assert score >= previous
            assert score <= 100.0
            previous = score

    def test_invalid_grid_size(self):
        """Test that a non-positive grid size raises ValueError."""
        with pytest.raises(ValueError, match="grid_size must be >= 1"):
            compute_grid_coverage([], grid_size=0)
