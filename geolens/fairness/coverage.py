"""Geographic coverage scoring from regional shares and grid density."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from loguru import logger

from geolens.data.points import DataPoint
from geolens.spatial.grid import GridCoverage, compute_grid_coverage

from .config import FairnessConfig
from .metrics import compute_deviation_from


REGIONS_SOURCE = "regions"
GRID_SOURCE = "grid"


@dataclass
class CoverageResult:
    """Coverage of a dataset over its regions and its own extent.

    Attributes:
        total_points: All points analysed, assigned or not.
        region_counts: Region name -> point count.
        coverage_percentages: Region name -> share of all points (percent).
        average_coverage: Expected share per region under an even spread,
            None when there are no regions.
        missing_regions: Regions far below the average share.
        overall_coverage: Evenness score in [0, 100].
        coverage_source: "regions" when overall_coverage comes from region
            shares, "grid" when it falls back to grid density.
        grid: Grid-density coverage, always computed.
    """

    total_points: int
    region_counts: Dict[str, int]
    coverage_percentages: Dict[str, float]
    average_coverage: Optional[float]
    missing_regions: List[str]
    overall_coverage: float
    coverage_source: str
    grid: GridCoverage

    def to_dict(self) -> dict:
        return {
            "total_points": self.total_points,
            "region_counts": dict(self.region_counts),
            "coverage_percentages": dict(self.coverage_percentages),
            "average_coverage": self.average_coverage,
            "missing_regions": list(self.missing_regions),
            "overall_coverage": self.overall_coverage,
            "coverage_source": self.coverage_source,
            "grid": self.grid.to_dict(),
        }


@dataclass
class RegionalCoverage:
    """Region-share coverage signal."""

    coverage_percentages: Dict[str, float]
    average_coverage: float
    missing_regions: List[str] = field(default_factory=list)
    overall_coverage: float = 0.0


def compute_regional_coverage(
    region_counts: Dict[str, int],
    total_points: int,
    config: Optional[FairnessConfig] = None,
) -> Optional[RegionalCoverage]:
    """Score how evenly points are spread over regions.

    Each region's share is count / total_points * 100, so unassigned
    points lower every share. The overall score is 100 minus the root
    mean squared deviation of shares from the even share 100 / n,
    floored at 0.

    Args:
        region_counts: Region name -> point count, including empty regions.
        total_points: Denominator for shares, assigned or not.
        config: Fairness configuration. Defaults to FairnessConfig().

    Returns:
        RegionalCoverage, or None when there are no regions.
    """
    config = config or FairnessConfig()
    if not region_counts:
        return None

    percentages = {
        name: (count / total_points * 100.0 if total_points > 0 else 0.0)
        for name, count in region_counts.items()
    }
    average_coverage = 100.0 / len(region_counts)
    missing = [
        name
        for name, share in percentages.items()
        if share < average_coverage * config.missing_region_factor
    ]
    deviation = compute_deviation_from(list(percentages.values()), average_coverage)

    return RegionalCoverage(
        coverage_percentages=percentages,
        average_coverage=average_coverage,
        missing_regions=missing,
        overall_coverage=max(0.0, 100.0 - deviation),
    )


def compute_coverage(
    points: Sequence[DataPoint],
    region_counts: Dict[str, int],
    config: Optional[FairnessConfig] = None,
) -> CoverageResult:
    """Compute both coverage signals for a set of points.

    Region-share coverage drives overall_coverage whenever regions exist;
    without regions the grid-density score is used instead.

    Args:
        points: All analysed points.
        region_counts: Region name -> point count (may be empty).
        config: Fairness configuration. Defaults to FairnessConfig().

    Returns:
        CoverageResult.
    """
    total_points = len(points)
    grid = compute_grid_coverage(points)
    regional = compute_regional_coverage(region_counts, total_points, config)

    if regional is None:
        logger.debug("No regions available, using grid-density coverage")
        return CoverageResult(
            total_points=total_points,
            region_counts={},
            coverage_percentages={},
            average_coverage=None,
            missing_regions=[],
            overall_coverage=grid.coverage_score,
            coverage_source=GRID_SOURCE,
            grid=grid,
        )

    if regional.missing_regions:
        logger.info(
            f"{len(regional.missing_regions)} regions are missing or nearly "
            f"empty: {regional.missing_regions}"
        )

    return CoverageResult(
        total_points=total_points,
        region_counts=dict(region_counts),
        coverage_percentages=regional.coverage_percentages,
        average_coverage=regional.average_coverage,
        missing_regions=regional.missing_regions,
        overall_coverage=regional.overall_coverage,
        coverage_source=REGIONS_SOURCE,
        grid=grid,
    )
