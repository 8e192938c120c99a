"""End-to-end geospatial fairness analysis of a point dataset.

The analyzer is stateless: every call works only on its arguments and
returns a new AnalysisResult, so one instance can serve concurrent
callers on independent datasets.
"""

from dataclasses import replace
from typing import List, Optional, Sequence

from loguru import logger

from geolens.data.normalizer import RecordNormalizer
from geolens.data.points import DataPoint
from geolens.fairness.bias import BiasResult, compute_bias
from geolens.fairness.composer import FairnessResult, compose_fairness
from geolens.fairness.coverage import GRID_SOURCE, REGIONS_SOURCE, CoverageResult, compute_coverage
from geolens.fairness.regional import RegionCatalog, compute_regional_stats, count_by_region
from geolens.spatial.assigner import RegionAssigner
from geolens.spatial.boundaries import BoundarySet
from geolens.spatial.grid import compute_grid_coverage

from .config import AnalysisConfig
from .results import AnalysisResult
from .summary import summarize_points


def empty_result(
    has_regions: bool = False,
    total_records: int = 0,
    rejected_records: int = 0,
    degenerate_boundaries: Sequence[str] = (),
) -> AnalysisResult:
    """Zero-valued result for a dataset without any valid points."""
    coverage = CoverageResult(
        total_points=0,
        region_counts={},
        coverage_percentages={},
        average_coverage=None,
        missing_regions=[],
        overall_coverage=0.0,
        coverage_source=REGIONS_SOURCE if has_regions else GRID_SOURCE,
        grid=compute_grid_coverage([]),
    )
    summary = summarize_points(
        [],
        total_records=total_records,
        rejected_records=rejected_records,
        degenerate_boundaries=degenerate_boundaries,
    )
    return AnalysisResult(
        coverage=coverage,
        bias=BiasResult(),
        fairness=FairnessResult(),
        regional_stats=[],
        summary=summary,
    )


class GeoFairnessAnalyzer:
    """Runs normalization, region assignment and fairness scoring."""

    def __init__(self, config: Optional[AnalysisConfig] = None):
        """Initialize the analyzer.

        Args:
            config: Analysis configuration. Defaults to AnalysisConfig().
        """
        self.config = config or AnalysisConfig()
        self.normalizer = RecordNormalizer(self.config.normalizer)

    def analyze(
        self,
        raw: bytes,
        fmt: str,
        boundaries: Optional[BoundarySet] = None,
        dataset_id: str = "dataset",
    ) -> AnalysisResult:
        """Normalize raw file contents and analyse the resulting points.

        Args:
            raw: File contents.
            fmt: Declared format tag ("tabular" or "geo-feature-collection").
            boundaries: Region boundaries. See analyze_points.
            dataset_id: Prefix for generated point ids.

        Returns:
            AnalysisResult.

        Raises:
            ValueError: If the format is unknown or the file cannot be parsed.
        """
        normalized = self.normalizer.normalize(raw, fmt, dataset_id=dataset_id)
        return self.analyze_points(
            normalized.points,
            boundaries=boundaries,
            total_records=normalized.total_records,
            rejected_records=normalized.rejected_count,
        )

    def analyze_points(
        self,
        points: Sequence[DataPoint],
        boundaries: Optional[BoundarySet] = None,
        total_records: Optional[int] = None,
        rejected_records: int = 0,
    ) -> AnalysisResult:
        """Analyse already-normalized points.

        With boundaries, each point is assigned to the first containing
        boundary and every boundary is reported, including empty ones.
        Without boundaries (None), the points' own labels define the regions:
        a point keeps a region it already carries, otherwise its region tag
        is used. When no point has either, only grid coverage applies.
        An empty boundary set means no regions at all.

        Args:
            points: Normalized points. Not modified.
            boundaries: Ordered region boundaries, or None.
            total_records: Records in the source, for the summary.
            rejected_records: Records dropped during normalization.

        Returns:
            AnalysisResult.
        """
        fairness_config = self.config.fairness

        if len(points) == 0:
            logger.warning("No valid data points to analyse, returning empty result")
            return empty_result(
                has_regions=bool(boundaries),
                total_records=total_records or rejected_records,
                rejected_records=rejected_records,
                degenerate_boundaries=[b.name for b in boundaries or () if b.is_degenerate],
            )

        degenerate: List[str] = []
        if boundaries is not None:
            assignment = RegionAssigner(boundaries).assign(points)
            assigned_points = assignment.points
            degenerate = assignment.degenerate_boundaries
            catalog = RegionCatalog.from_boundaries(boundaries)
        else:
            assigned_points = [
                p if p.region is not None else replace(p, region=p.region_tag)
                for p in points
            ]
            catalog = RegionCatalog.from_tags(assigned_points)
            if len(catalog):
                logger.debug(f"Using {len(catalog)} region tags from the dataset")

        region_counts = count_by_region(assigned_points, catalog)
        regional_stats = compute_regional_stats(assigned_points, catalog, fairness_config)
        coverage = compute_coverage(assigned_points, region_counts, fairness_config)
        bias = compute_bias(region_counts, regional_stats, fairness_config)
        fairness = compose_fairness(coverage, bias)

        summary = summarize_points(
            assigned_points,
            high_bias_threshold=fairness_config.high_bias_threshold,
            total_records=total_records,
            rejected_records=rejected_records,
            degenerate_boundaries=degenerate,
        )

        logger.info(
            f"Analysis complete: {len(assigned_points)} points, "
            f"{len(catalog)} regions, coverage={coverage.overall_coverage:.2f}, "
            f"bias={bias.bias_score:.3f}, fairness={fairness.fairness_index:.2f}"
        )

        return AnalysisResult(
            coverage=coverage,
            bias=bias,
            fairness=fairness,
            regional_stats=regional_stats,
            summary=summary,
        )


def analyze_dataset(
    raw: bytes,
    fmt: str,
    boundaries: Optional[BoundarySet] = None,
    config: Optional[AnalysisConfig] = None,
    dataset_id: str = "dataset",
) -> AnalysisResult:
    """Analyse a dataset with a one-off GeoFairnessAnalyzer."""
    return GeoFairnessAnalyzer(config).analyze(raw, fmt, boundaries, dataset_id)
