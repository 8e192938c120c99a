"""Tests for dataset summaries."""

import pytest

from geolens.analysis.summary import category_distribution, summarize_points
from geolens.data.points import DataPoint


def point(idx, category="unknown", bias=0.0, value=0.0, region=None, lat=0.0, lng=0.0):
    return DataPoint(
        id=f"p{idx}", lat=lat, lng=lng, value=value, bias=bias,
        category=category, region=region,
    )


class TestCategoryDistribution:
    """Tests for category_distribution."""

    def test_sorted_by_count(self):
        """Test that categories are ordered most frequent first."""
        points = [point(0, "park"), point(1, "school"), point(2, "school")]
        shares = category_distribution(points)

        assert [s.category for s in shares] == ["school", "park"]
        assert shares[0].count == 2
        assert shares[0].percentage == pytest.approx(200 / 3)

    def test_ties_keep_first_seen_order(self):
        """Test that equal counts keep input order."""
        points = [point(0, "b"), point(1, "a"), point(2, "c")]
        assert [s.category for s in category_distribution(points)] == ["b", "a", "c"]

    def test_empty(self):
        assert category_distribution([]) == []


class TestSummarizePoints:
    """Tests for summarize_points."""

    def test_summary_fields(self):
        """Test the descriptive statistics of a small dataset."""
        points = [
            point(0, "school", bias=0.9, value=10.0, region="A", lat=1.0, lng=2.0),
            point(1, "school", bias=0.1, value=20.0, region=None, lat=-3.0, lng=5.0),
            point(2, "clinic", bias=0.7, value=30.0, region="B", lat=4.0, lng=-1.0),
        ]
        summary = summarize_points(points, high_bias_threshold=0.6, rejected_records=2)

        assert summary.total_records == 5
        assert summary.valid_points == 3
        assert summary.rejected_records == 2
        assert summary.assigned_points == 2
        assert summary.unassigned_points == 1
        assert summary.average_value == pytest.approx(20.0)
        assert summary.average_bias == pytest.approx(0.5)
        assert summary.high_bias_count == 2
        assert summary.most_common_category == "school"
        assert summary.bounds.north == 4.0
        assert summary.bounds.south == -3.0
        assert summary.bounds.east == 5.0
        assert summary.bounds.west == -1.0

    def test_bias_gini(self):
        """Test the Gini coefficient of point bias values."""
        points = [point(0, bias=0.0), point(1, bias=1.0)]
        assert summarize_points(points).bias_gini == pytest.approx(0.5)

    def test_empty(self):
        """Test that an empty dataset gives a zero summary."""
        summary = summarize_points([], total_records=4, rejected_records=4)

        assert summary.valid_points == 0
        assert summary.total_records == 4
        assert summary.most_common_category is None
        assert summary.bounds is None
        assert summary.to_dict()["bounds"] is None

    def test_to_dict(self):
        """Test the serialized form."""
        data = summarize_points([point(0, "park")], degenerate_boundaries=["Line"]).to_dict()

        assert data["categories"] == [{"category": "park", "count": 1, "percentage": 100.0}]
        assert data["degenerate_boundaries"] == ["Line"]
        assert data["bounds"] == {"north": 0.0, "south": 0.0, "east": 0.0, "west": 0.0}
