"""Dataset ingestion: raw uploads to typed, geolocated points.

Supported inputs:
- Tabular (CSV) files with latitude/longitude columns under common aliases
- GeoJSON FeatureCollections with Point (or Polygon) geometries
"""

from .config import NormalizerConfig
from .points import DataPoint, NormalizationResult
from .schema import FIELD_SYNONYMS, resolve_columns
from .regions import LATITUDE_BANDS, latitude_band
from .normalizer import (
    GEO_FEATURE_COLLECTION,
    TABULAR,
    RecordNormalizer,
    canonical_format,
    parse_float,
)

__all__ = [
    # Config
    "NormalizerConfig",
    # Records
    "DataPoint",
    "NormalizationResult",
    # Schema
    "FIELD_SYNONYMS",
    "resolve_columns",
    # Regions
    "LATITUDE_BANDS",
    "latitude_band",
    # Normalizer
    "GEO_FEATURE_COLLECTION",
    "TABULAR",
    "RecordNormalizer",
    "canonical_format",
    "parse_float",
]
