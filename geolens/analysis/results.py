"""Analysis result container and its JSON-ready form."""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List

from geolens.fairness.bias import BiasResult
from geolens.fairness.composer import FairnessResult
from geolens.fairness.coverage import CoverageResult
from geolens.fairness.regional import RegionalStat

from .summary import DatasetSummary


@dataclass
class AnalysisResult:
    """Complete output of one fairness analysis.

    Attributes:
        coverage: Regional and grid coverage.
        bias: Representation bias across regions.
        fairness: Composite fairness scores.
        regional_stats: Per-region statistics in region order.
        summary: Descriptive dataset statistics.
    """

    coverage: CoverageResult
    bias: BiasResult
    fairness: FairnessResult
    regional_stats: List[RegionalStat] = field(default_factory=list)
    summary: DatasetSummary = field(default_factory=DatasetSummary)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-serializable form. Unknown values are explicit None, never omitted."""
        return {
            "coverage": self.coverage.to_dict(),
            "bias": self.bias.to_dict(),
            "fairness": self.fairness.to_dict(),
            "regional_stats": [stat.to_dict() for stat in self.regional_stats],
            "summary": self.summary.to_dict(),
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)
