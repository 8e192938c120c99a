"""Dataset-level descriptive statistics reported alongside fairness scores."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from geolens.data.points import DataPoint
from geolens.fairness.metrics import compute_gini_coefficient, compute_mean
from geolens.spatial.geometry import Bounds, compute_bounds


@dataclass
class CategoryShare:
    """Point count and percentage for one category."""

    category: str
    count: int
    percentage: float

    def to_dict(self) -> dict:
        return {"category": self.category, "count": self.count, "percentage": self.percentage}


@dataclass
class DatasetSummary:
    """Descriptive statistics of an analysed dataset.

    Attributes:
        total_records: Records seen in the input.
        valid_points: Records that became points.
        rejected_records: Records dropped during normalization.
        assigned_points: Points assigned to a region.
        unassigned_points: Points outside every region.
        average_value: Mean point value.
        average_bias: Mean point bias.
        bias_gini: Gini coefficient of point bias values.
        high_bias_count: Points with bias above the high-bias threshold.
        categories: Category distribution, most frequent first.
        most_common_category: Most frequent category, None with no points.
        bounds: Bounding box of all points, None with no points.
        degenerate_boundaries: Boundaries that could not contain any point.
    """

    total_records: int = 0
    valid_points: int = 0
    rejected_records: int = 0
    assigned_points: int = 0
    unassigned_points: int = 0
    average_value: float = 0.0
    average_bias: float = 0.0
    bias_gini: float = 0.0
    high_bias_count: int = 0
    categories: List[CategoryShare] = field(default_factory=list)
    most_common_category: Optional[str] = None
    bounds: Optional[Bounds] = None
    degenerate_boundaries: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "total_records": self.total_records,
            "valid_points": self.valid_points,
            "rejected_records": self.rejected_records,
            "assigned_points": self.assigned_points,
            "unassigned_points": self.unassigned_points,
            "average_value": self.average_value,
            "average_bias": self.average_bias,
            "bias_gini": self.bias_gini,
            "high_bias_count": self.high_bias_count,
            "categories": [c.to_dict() for c in self.categories],
            "most_common_category": self.most_common_category,
            "bounds": self.bounds.to_dict() if self.bounds else None,
            "degenerate_boundaries": list(self.degenerate_boundaries),
        }


def category_distribution(points: Sequence[DataPoint]) -> List[CategoryShare]:
    """Category counts, most frequent first; ties keep first-seen order."""
    counts: Dict[str, int] = {}
    for point in points:
        counts[point.category] = counts.get(point.category, 0) + 1

    total = len(points)
    shares = [
        CategoryShare(category, count, count / total * 100.0)
        for category, count in counts.items()
    ]
    # sorted() is stable, so equal counts stay in first-seen order
    return sorted(shares, key=lambda share: share.count, reverse=True)


def summarize_points(
    points: Sequence[DataPoint],
    high_bias_threshold: float = 0.6,
    total_records: Optional[int] = None,
    rejected_records: int = 0,
    degenerate_boundaries: Sequence[str] = (),
) -> DatasetSummary:
    """Build a DatasetSummary for analysed points.

    Args:
        points: Points after region assignment.
        high_bias_threshold: Bias above which a point counts as high-bias.
        total_records: Records in the source; defaults to valid + rejected.
        rejected_records: Records dropped during normalization.
        degenerate_boundaries: Names of boundaries that contain nothing.

    Returns:
        DatasetSummary.
    """
    if total_records is None:
        total_records = len(points) + rejected_records

    biases = [p.bias for p in points]
    categories = category_distribution(points)
    assigned = sum(1 for p in points if p.region is not None)

    return DatasetSummary(
        total_records=total_records,
        valid_points=len(points),
        rejected_records=rejected_records,
        assigned_points=assigned,
        unassigned_points=len(points) - assigned,
        average_value=compute_mean([p.value for p in points]),
        average_bias=compute_mean(biases),
        bias_gini=compute_gini_coefficient(biases),
        high_bias_count=sum(1 for b in biases if b > high_bias_threshold),
        categories=categories,
        most_common_category=categories[0].category if categories else None,
        bounds=compute_bounds(p.coordinates for p in points),
        degenerate_boundaries=list(degenerate_boundaries),
    )
