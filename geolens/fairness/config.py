"""Configuration for regional fairness scoring."""

from dataclasses import dataclass


@dataclass
class FairnessConfig:
    """Configuration for coverage and bias scoring.

    The fairness index weights are fixed and not part of this config.

    Attributes:
        overrepresented_factor: A region is over-represented when its point
            count exceeds this multiple of the mean regional count.
        underrepresented_factor: A region is under-represented when its point
            count is below this multiple of the mean regional count.
        missing_region_factor: A region is reported missing when its coverage
            share is below this multiple of the average coverage share.
        high_bias_threshold: Points with bias above this value count as
            high-bias in dataset summaries.
        per_capita_scale: Population unit for points-per-capita figures.
    """

    overrepresented_factor: float = 1.5
    underrepresented_factor: float = 0.5
    missing_region_factor: float = 0.1
    high_bias_threshold: float = 0.6
    per_capita_scale: int = 100_000

    def __post_init__(self):
        """Validate configuration values."""
        if self.overrepresented_factor <= 1:
            raise ValueError(
                f"overrepresented_factor must be > 1, got {self.overrepresented_factor}"
            )
        if not 0 <= self.underrepresented_factor < 1:
            raise ValueError(
                f"underrepresented_factor must be in [0, 1), "
                f"got {self.underrepresented_factor}"
            )
        if not 0 <= self.missing_region_factor < 1:
            raise ValueError(
                f"missing_region_factor must be in [0, 1), "
                f"got {self.missing_region_factor}"
            )
        if not 0 <= self.high_bias_threshold <= 1:
            raise ValueError(
                f"high_bias_threshold must be in [0, 1], got {self.high_bias_threshold}"
            )
        if self.per_capita_scale <= 0:
            raise ValueError(
                f"per_capita_scale must be positive, got {self.per_capita_scale}"
            )
