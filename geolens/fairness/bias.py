"""Global representation bias across regions."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from loguru import logger

from .config import FairnessConfig
from .metrics import compute_coefficient_of_variation, compute_gini_coefficient, compute_mean
from .regional import RegionalStat


# Weight of the inequality index in the combined bias score
INEQUALITY_WEIGHT = 0.3


@dataclass
class BiasResult:
    """Representation bias of point counts across regions.

    Attributes:
        gini_coefficient: Gini coefficient of regional point counts.
        inequality_index: Std / mean of regional point counts.
        overrepresented_regions: Regions well above the mean count.
        underrepresented_regions: Regions well below the mean count.
        bias_score: Combined score in [0, 1], 0 meaning no bias.
        regional_gini: Region name -> Gini coefficient of its point values.
        coverage_ratio: Region name -> coverage ratio, None when unknown.
    """

    gini_coefficient: float = 0.0
    inequality_index: float = 0.0
    overrepresented_regions: List[str] = field(default_factory=list)
    underrepresented_regions: List[str] = field(default_factory=list)
    bias_score: float = 0.0
    regional_gini: Dict[str, float] = field(default_factory=dict)
    coverage_ratio: Dict[str, Optional[float]] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "gini_coefficient": self.gini_coefficient,
            "inequality_index": self.inequality_index,
            "overrepresented_regions": list(self.overrepresented_regions),
            "underrepresented_regions": list(self.underrepresented_regions),
            "bias_score": self.bias_score,
            "regional_gini": dict(self.regional_gini),
            "coverage_ratio": dict(self.coverage_ratio),
        }


def compute_bias(
    region_counts: Dict[str, int],
    regional_stats: Sequence[RegionalStat] = (),
    config: Optional[FairnessConfig] = None,
) -> BiasResult:
    """Compute representation bias from regional point counts.

    bias_score = min(1, gini + 0.3 * inequality_index), where both terms
    are computed over the per-region counts (empty regions included).

    Args:
        region_counts: Region name -> point count.
        regional_stats: Per-region stats for the regional Gini and ratio maps.
        config: Fairness configuration. Defaults to FairnessConfig().

    Returns:
        BiasResult. All scores are 0 when there are no regions.
    """
    config = config or FairnessConfig()
    regional_gini = {s.region_name: s.gini_coefficient for s in regional_stats}
    coverage_ratio = {s.region_name: s.coverage_ratio for s in regional_stats}

    if not region_counts:
        return BiasResult(regional_gini=regional_gini, coverage_ratio=coverage_ratio)

    counts = list(region_counts.values())
    gini = compute_gini_coefficient(counts)
    inequality_index = compute_coefficient_of_variation(counts)
    average_count = compute_mean(counts)

    overrepresented = [
        name
        for name, count in region_counts.items()
        if count > average_count * config.overrepresented_factor
    ]
    underrepresented = [
        name
        for name, count in region_counts.items()
        if count < average_count * config.underrepresented_factor
    ]
    bias_score = min(1.0, gini + INEQUALITY_WEIGHT * inequality_index)

    logger.debug(
        f"Bias: Gini={gini:.4f}, inequality={inequality_index:.4f}, "
        f"over={len(overrepresented)}, under={len(underrepresented)}"
    )

    return BiasResult(
        gini_coefficient=gini,
        inequality_index=inequality_index,
        overrepresented_regions=overrepresented,
        underrepresented_regions=underrepresented,
        bias_score=bias_score,
        regional_gini=regional_gini,
        coverage_ratio=coverage_ratio,
    )
