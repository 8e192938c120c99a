"""Composite fairness index from coverage and bias scores."""

from dataclasses import dataclass

from .bias import BiasResult
from .coverage import CoverageResult


DISTRIBUTION_WEIGHT = 0.4
REPRESENTATION_WEIGHT = 0.4
ACCESSIBILITY_WEIGHT = 0.2
INDEX_SCALE = 10.0


@dataclass
class FairnessResult:
    """Fairness sub-scores (0-100) and the composite index (0-10)."""

    fairness_index: float = 0.0
    distribution_score: float = 0.0
    representation_score: float = 0.0
    accessibility_score: float = 0.0

    def to_dict(self) -> dict:
        return {
            "fairness_index": self.fairness_index,
            "distribution_score": self.distribution_score,
            "representation_score": self.representation_score,
            "accessibility_score": self.accessibility_score,
        }


def compose_fairness(coverage: CoverageResult, bias: BiasResult) -> FairnessResult:
    """Combine coverage and bias into a fairness index.

    distribution = 100 - 100 * gini, representation = overall coverage,
    accessibility = 100 - 100 * bias_score; the index is their 0.4/0.4/0.2
    weighted mean divided by 10.
    """
    distribution = max(0.0, 100.0 - bias.gini_coefficient * 100.0)
    representation = min(100.0, max(0.0, coverage.overall_coverage))
    accessibility = max(0.0, 100.0 - bias.bias_score * 100.0)

    index = (
        DISTRIBUTION_WEIGHT * distribution
        + REPRESENTATION_WEIGHT * representation
        + ACCESSIBILITY_WEIGHT * accessibility
    ) / INDEX_SCALE

    return FairnessResult(
        fairness_index=min(INDEX_SCALE, max(0.0, index)),
        distribution_score=distribution,
        representation_score=representation,
        accessibility_score=accessibility,
    )
