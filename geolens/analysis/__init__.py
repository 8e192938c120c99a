"""Geospatial fairness analysis of uploaded point datasets.

The GeoFairnessAnalyzer turns raw dataset bytes (and optional region
boundaries) into coverage, bias and fairness scores with per-region
statistics.
"""

from .config import AnalysisConfig, load_config, save_config
from .summary import CategoryShare, DatasetSummary, category_distribution, summarize_points
from .results import AnalysisResult
from .engine import GeoFairnessAnalyzer, analyze_dataset, empty_result

__all__ = [
    # Config
    "AnalysisConfig",
    "load_config",
    "save_config",
    # Summary
    "CategoryShare",
    "DatasetSummary",
    "category_distribution",
    "summarize_points",
    # Results
    "AnalysisResult",
    # Engine
    "GeoFairnessAnalyzer",
    "analyze_dataset",
    "empty_result",
]
