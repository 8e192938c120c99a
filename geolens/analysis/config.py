"""Configuration loading and management utilities."""

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from geolens.data.config import NormalizerConfig
from geolens.fairness.config import FairnessConfig


def _init_fields(cls) -> set:
    return {f.name for f in fields(cls) if not f.name.isupper()}


def _build(cls, section: str, values: Optional[Dict[str, Any]]):
    values = values or {}
    unknown = set(values) - _init_fields(cls)
    if unknown:
        raise ValueError(f"Unknown {section} config keys: {sorted(unknown)}")
    return cls(**values)


@dataclass
class AnalysisConfig:
    """Top-level configuration for a fairness analysis run.

    Attributes:
        normalizer: Record normalization settings.
        fairness: Coverage and bias scoring settings.
    """

    normalizer: NormalizerConfig = field(default_factory=NormalizerConfig)
    fairness: FairnessConfig = field(default_factory=FairnessConfig)

    @classmethod
    def from_dict(cls, config: Optional[Dict[str, Any]]) -> "AnalysisConfig":
        """Build a config from a nested dictionary (e.g. parsed YAML).

        Raises:
            ValueError: On unknown sections or keys, or invalid values.
        """
        config = config or {}
        unknown = set(config) - {"normalizer", "fairness"}
        if unknown:
            raise ValueError(f"Unknown config sections: {sorted(unknown)}")

        return cls(
            normalizer=_build(NormalizerConfig, "normalizer", config.get("normalizer")),
            fairness=_build(FairnessConfig, "fairness", config.get("fairness")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "normalizer": {
                k: v for k, v in asdict(self.normalizer).items()
                if k in _init_fields(NormalizerConfig)
            },
            "fairness": asdict(self.fairness),
        }


def load_config(config_path: str) -> AnalysisConfig:
    """Load configuration from YAML file.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Validated AnalysisConfig.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        return AnalysisConfig.from_dict(yaml.safe_load(f))


def save_config(config: AnalysisConfig, output_path: str) -> None:
    """Save configuration to YAML file.

    Args:
        config: Configuration to save.
        output_path: Path to save the YAML file.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w") as f:
        yaml.dump(config.to_dict(), f, default_flow_style=False)
