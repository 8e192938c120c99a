"""Per-region aggregation of assigned points."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from loguru import logger

from geolens.data.points import DataPoint
from geolens.spatial.boundaries import BoundarySet

from .config import FairnessConfig
from .metrics import compute_gini_coefficient, compute_mean


@dataclass(frozen=True)
class RegionCatalog:
    """Ordered region names with their known populations.

    Attributes:
        names: Distinct region names in analysis order.
        populations: Region name -> population, None when unknown.
    """

    names: Tuple[str, ...]
    populations: Dict[str, Optional[int]] = field(default_factory=dict, compare=False)

    @classmethod
    def from_boundaries(cls, boundaries: BoundarySet) -> "RegionCatalog":
        """Build a catalog from boundaries, keeping the first entry per name."""
        populations: Dict[str, Optional[int]] = {}
        for boundary in boundaries:
            if boundary.name not in populations:
                populations[boundary.name] = boundary.population
            elif populations[boundary.name] is None:
                populations[boundary.name] = boundary.population
        return cls(names=tuple(populations), populations=populations)

    @classmethod
    def from_tags(cls, points: Sequence[DataPoint]) -> "RegionCatalog":
        """Build a catalog from the points' own region labels, first seen first."""
        names: Dict[str, None] = {}
        for point in points:
            if point.region is not None:
                names.setdefault(point.region, None)
        return cls(names=tuple(names), populations={name: None for name in names})

    @property
    def total_population(self) -> int:
        return sum(p for p in self.populations.values() if p)

    def __len__(self) -> int:
        return len(self.names)


@dataclass
class RegionalStat:
    """Statistics for a single region.

    Attributes:
        region_name: Region name.
        point_count: Points assigned to the region.
        coverage_percent: Population-normalized coverage clamped to [0, 100],
            or the region's share of all points when population is unknown.
        average_value: Mean point value (0 for an empty region).
        average_bias: Mean point bias (0 for an empty region).
        gini_coefficient: Gini coefficient of the region's point values.
        population: Population estimate, if known.
        points_per_capita: Points per per_capita_scale inhabitants, if known.
        coverage_ratio: Share of points over share of population, if known.
    """

    region_name: str
    point_count: int
    coverage_percent: float
    average_value: float
    average_bias: float
    gini_coefficient: float
    population: Optional[int] = None
    points_per_capita: Optional[float] = None
    coverage_ratio: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            "region_name": self.region_name,
            "point_count": self.point_count,
            "coverage_percent": self.coverage_percent,
            "average_value": self.average_value,
            "average_bias": self.average_bias,
            "gini_coefficient": self.gini_coefficient,
            "population": self.population,
            "points_per_capita": self.points_per_capita,
            "coverage_ratio": self.coverage_ratio,
        }


def group_by_region(
    points: Sequence[DataPoint],
    catalog: RegionCatalog,
) -> Dict[str, List[DataPoint]]:
    """Group points by region name. Unassigned and unknown regions are dropped."""
    groups: Dict[str, List[DataPoint]] = {name: [] for name in catalog.names}
    for point in points:
        if point.region in groups:
            groups[point.region].append(point)
    return groups


def count_by_region(
    points: Sequence[DataPoint],
    catalog: RegionCatalog,
) -> Dict[str, int]:
    """Point count per catalog region, zero for regions without points."""
    return {name: len(group) for name, group in group_by_region(points, catalog).items()}


def compute_coverage_ratio(
    point_count: int,
    total_points: int,
    population: Optional[int],
    total_population: int,
) -> Optional[float]:
    """Share of points over share of population, or None if either is unknown."""
    if total_points <= 0 or total_population <= 0 or not population:
        return None
    actual_ratio = point_count / total_points
    expected_ratio = population / total_population
    return actual_ratio / expected_ratio


def compute_regional_stats(
    points: Sequence[DataPoint],
    catalog: RegionCatalog,
    config: Optional[FairnessConfig] = None,
) -> List[RegionalStat]:
    """Compute statistics for every region in the catalog.

    Points with no region are excluded from every region but still count
    towards the total used for coverage shares and ratios.

    Args:
        points: Points with `region` already set.
        catalog: Regions to report, in order.
        config: Fairness configuration. Defaults to FairnessConfig().

    Returns:
        One RegionalStat per catalog region, in catalog order.
    """
    config = config or FairnessConfig()
    total_points = len(points)
    total_population = catalog.total_population
    groups = group_by_region(points, catalog)

    stats: List[RegionalStat] = []
    for name in catalog.names:
        region_points = groups[name]
        count = len(region_points)
        population = catalog.populations.get(name)
        values = [p.value for p in region_points]

        ratio = compute_coverage_ratio(count, total_points, population, total_population)
        if ratio is not None:
            coverage_percent = min(100.0, max(0.0, ratio * 100.0))
        elif total_points > 0:
            coverage_percent = count / total_points * 100.0
        else:
            coverage_percent = 0.0

        stats.append(RegionalStat(
            region_name=name,
            point_count=count,
            coverage_percent=coverage_percent,
            average_value=compute_mean(values),
            average_bias=compute_mean([p.bias for p in region_points]),
            gini_coefficient=compute_gini_coefficient(values),
            population=population,
            points_per_capita=(
                count / population * config.per_capita_scale if population else None
            ),
            coverage_ratio=ratio,
        ))

    logger.debug(
        f"Computed regional stats for {len(stats)} regions "
        f"({sum(s.point_count for s in stats)} of {total_points} points assigned)"
    )
    return stats


def annotate_coverage_bias(
    points: Sequence[DataPoint],
    regional_stats: Sequence[RegionalStat],
) -> Dict[str, float]:
    """Coverage ratio of each point's region, keyed by point id.

    Points without a region, or in a region with unknown ratio, map to 0.
    """
    ratios = {
        stat.region_name: stat.coverage_ratio
        for stat in regional_stats
        if stat.coverage_ratio is not None
    }
    return {point.id: ratios.get(point.region, 0.0) for point in points}
