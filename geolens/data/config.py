"""Configuration for dataset normalization."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class NormalizerConfig:
    """Configuration for turning raw records into typed points.

    Attributes:
        backfill: How missing value/bias fields are filled.
            "default" uses default_value/default_bias; "random" draws a
            uniform placeholder (value in [0, 100], bias in [0, 1]).
        default_value: Value used for records without a usable value field.
        default_bias: Bias used for records without a usable bias field.
        default_category: Category used for records without a category.
        seed: Seed for random back-fill. Only read when backfill="random".
        clip_bias: Whether bias values are clipped into [0, 1].
        region_fallback: Region tag for records without one.
            "latitude_band" labels them with their latitude band
            (Arctic ... Antarctic); "none" leaves them untagged.
    """

    backfill: str = "default"
    default_value: float = 0.0
    default_bias: float = 0.0
    default_category: str = "unknown"
    seed: Optional[int] = None
    clip_bias: bool = True
    region_fallback: str = "latitude_band"

    VALID_BACKFILL: tuple[str, ...] = ("default", "random")
    VALID_REGION_FALLBACK: tuple[str, ...] = ("latitude_band", "none")

    def __post_init__(self):
        """Validate configuration values."""
        if self.backfill not in self.VALID_BACKFILL:
            raise ValueError(
                f"backfill must be one of {self.VALID_BACKFILL}, got '{self.backfill}'"
            )
        if self.region_fallback not in self.VALID_REGION_FALLBACK:
            raise ValueError(
                f"region_fallback must be one of {self.VALID_REGION_FALLBACK}, "
                f"got '{self.region_fallback}'"
            )
        if self.clip_bias and not 0.0 <= self.default_bias <= 1.0:
            raise ValueError(
                f"default_bias must be in [0, 1], got {self.default_bias}"
            )
        if not self.default_category:
            raise ValueError("default_category cannot be empty")
