"""Regional fairness scoring for geolocated datasets.

This module measures how evenly a dataset covers a set of regions and
combines the results into a single fairness index.

Key metrics implemented:
- Gini Coefficient: Inequality of regional point counts or values (0 = equal)
- Inequality Index: Coefficient of variation of regional point counts
- Overall Coverage: 100 minus the RMS deviation from an even regional share
- Grid Coverage: Share of a 10x10 grid over the data extent holding points
- Fairness Index: 0-10 composite of distribution, representation and
  accessibility scores
"""

from .config import FairnessConfig
from .metrics import (
    compute_gini_coefficient,
    compute_coefficient_of_variation,
    compute_deviation_from,
    compute_mean,
)
from .regional import (
    RegionCatalog,
    RegionalStat,
    annotate_coverage_bias,
    compute_coverage_ratio,
    compute_regional_stats,
    count_by_region,
    group_by_region,
)
from .coverage import CoverageResult, RegionalCoverage, compute_coverage, compute_regional_coverage
from .bias import BiasResult, compute_bias
from .composer import FairnessResult, compose_fairness

__all__ = [
    # Config
    "FairnessConfig",
    # Metrics
    "compute_gini_coefficient",
    "compute_coefficient_of_variation",
    "compute_deviation_from",
    "compute_mean",
    # Regional aggregation
    "RegionCatalog",
    "RegionalStat",
    "annotate_coverage_bias",
    "compute_coverage_ratio",
    "compute_regional_stats",
    "count_by_region",
    "group_by_region",
    # Coverage
    "CoverageResult",
    "RegionalCoverage",
    "compute_coverage",
    "compute_regional_coverage",
    # Bias
    "BiasResult",
    "compute_bias",
    # Fairness
    "FairnessResult",
    "compose_fairness",
]
