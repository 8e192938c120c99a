"""Normalization of uploaded tabular and GeoJSON datasets into typed points."""

import io
import json
import math
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
from loguru import logger

from .config import NormalizerConfig
from .points import DataPoint, NormalizationResult
from .regions import latitude_band
from .schema import FIELD_SYNONYMS, has_coordinates, resolve_columns


TABULAR = "tabular"
GEO_FEATURE_COLLECTION = "geo-feature-collection"

# Accepted format tags -> canonical tag
FORMAT_ALIASES: Dict[str, str] = {
    TABULAR: TABULAR,
    "csv": TABULAR,
    GEO_FEATURE_COLLECTION: GEO_FEATURE_COLLECTION,
    "geojson": GEO_FEATURE_COLLECTION,
    "json": GEO_FEATURE_COLLECTION,
}


def canonical_format(fmt: str) -> str:
    """Resolve a declared format tag to its canonical form.

    Raises:
        ValueError: If the tag is not recognised.
    """
    key = str(fmt).strip().lower()
    if key not in FORMAT_ALIASES:
        raise ValueError(
            f"format must be one of {sorted(FORMAT_ALIASES)}, got '{fmt}'"
        )
    return FORMAT_ALIASES[key]


def parse_float(raw: Any) -> Optional[float]:
    """Parse a finite float from a cell or property value, else None."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
    try:
        parsed = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(parsed):
        return None
    return parsed


def _clean_label(raw: Any) -> Optional[str]:
    # Short rows come back from pandas as NaN cells
    if raw is None or (isinstance(raw, float) and math.isnan(raw)):
        return None
    label = str(raw).strip()
    return label or None


class RecordNormalizer:
    """Turns raw dataset bytes into a uniform sequence of DataPoints.

    The synonym table is fixed when the normalizer is constructed; one
    instance can normalize any number of datasets.
    """

    def __init__(
        self,
        config: Optional[NormalizerConfig] = None,
        synonyms: Optional[Dict[str, Tuple[str, ...]]] = None,
    ):
        """Initialize the normalizer.

        Args:
            config: Normalization configuration. Defaults to NormalizerConfig().
            synonyms: Canonical field -> header aliases. Defaults to
                FIELD_SYNONYMS.
        """
        self.config = config or NormalizerConfig()
        self.synonyms = dict(synonyms or FIELD_SYNONYMS)

    def normalize(
        self,
        raw: bytes,
        fmt: str,
        dataset_id: str = "dataset",
    ) -> NormalizationResult:
        """Normalize raw bytes in the declared format.

        Args:
            raw: File contents.
            fmt: Declared format tag ("tabular", "geo-feature-collection",
                or an alias such as "csv"/"geojson").
            dataset_id: Prefix for generated point ids.

        Returns:
            NormalizationResult with valid points and the rejected count.

        Raises:
            ValueError: If the format tag is unknown or the file cannot be
                decoded as the declared format.
        """
        canonical = canonical_format(fmt)
        rng = np.random.default_rng(self.config.seed)

        if canonical == TABULAR:
            result = self._normalize_tabular(raw, dataset_id, rng)
        else:
            result = self._normalize_features(raw, dataset_id, rng)

        logger.info(
            f"Normalized {result.total_records} {canonical} records from "
            f"'{dataset_id}': {result.valid_count} points, "
            f"{result.rejected_count} rejected"
        )
        return result

    def _normalize_tabular(
        self,
        raw: bytes,
        dataset_id: str,
        rng: np.random.Generator,
    ) -> NormalizationResult:
        if not raw or not raw.strip():
            return NormalizationResult([], 0, 0, TABULAR, {})

        ragged_lines: List[List[str]] = []

        def keep_ragged_slot(fields: List[str]) -> List[str]:
            # An empty row keeps ids aligned with source records and fails
            # coordinate parsing like any other bad record
            ragged_lines.append(fields)
            return []

        try:
            # header=None stops pandas from reading a ragged first row as an
            # index column; the header row is split off below
            table = pd.read_csv(
                io.BytesIO(raw),
                header=None,
                dtype=str,
                keep_default_na=False,
                encoding="utf-8-sig",
                skipinitialspace=True,
                engine="python",
                on_bad_lines=keep_ragged_slot,
            )
        except pd.errors.EmptyDataError:
            return NormalizationResult([], 0, 0, TABULAR, {})
        except (UnicodeDecodeError, pd.errors.ParserError) as e:
            raise ValueError(f"Failed to parse tabular data: {e}") from e

        headers = list(table.iloc[0])
        frame = table.iloc[1:].set_axis(headers, axis=1)
        frame = frame.loc[:, ~frame.columns.duplicated()]

        mapping = resolve_columns(frame.columns, self.synonyms)
        total = len(frame)

        if ragged_lines:
            logger.warning(
                f"Rejected {len(ragged_lines)} rows in '{dataset_id}' with more "
                f"fields than the {len(headers)} header columns"
            )

        if not has_coordinates(mapping):
            logger.warning(
                f"Could not find latitude/longitude columns in '{dataset_id}'. "
                f"Found headers: {', '.join(map(str, frame.columns))}"
            )
            return NormalizationResult([], total, total, TABULAR, mapping)

        logger.debug(
            f"Using columns '{mapping['lat']}' and '{mapping['lng']}' for coordinates"
        )

        points: List[DataPoint] = []
        rejected = 0
        for index, row in enumerate(frame.to_dict(orient="records")):
            point = self._build_point(row, mapping, f"{dataset_id}-point-{index}", rng)
            if point is None:
                rejected += 1
                continue
            points.append(point)

        if rejected:
            logger.warning(
                f"Skipped {rejected} of {total} rows with unparsable coordinates"
            )

        return NormalizationResult(points, rejected, total, TABULAR, mapping)

    def _normalize_features(
        self,
        raw: bytes,
        dataset_id: str,
        rng: np.random.Generator,
    ) -> NormalizationResult:
        try:
            collection = json.loads(raw.decode("utf-8-sig"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ValueError(f"Failed to parse GeoJSON data: {e}") from e

        if not isinstance(collection, dict) or collection.get("type") != "FeatureCollection":
            raise ValueError("GeoJSON input must be a FeatureCollection")

        features = collection.get("features") or []
        if not isinstance(features, list):
            raise ValueError("GeoJSON 'features' must be a list")

        points: List[DataPoint] = []
        rejected = 0
        skipped_types: Dict[str, int] = {}

        for index, feature in enumerate(features):
            coords = self._feature_coordinates(feature, skipped_types)
            if coords is None:
                rejected += 1
                continue

            properties = feature.get("properties") or {}
            if not isinstance(properties, dict):
                properties = {}
            row = dict(properties)
            row["__lng__"], row["__lat__"] = coords

            mapping = resolve_columns(properties.keys(), self.synonyms)
            mapping["lat"], mapping["lng"] = "__lat__", "__lng__"

            point = self._build_point(row, mapping, f"{dataset_id}-point-{index}", rng)
            if point is None:
                rejected += 1
                continue
            points.append(point)

        for geometry_type, count in skipped_types.items():
            logger.warning(f"Skipped {count} features with geometry type '{geometry_type}'")

        return NormalizationResult(
            points,
            rejected,
            len(features),
            GEO_FEATURE_COLLECTION,
            {"lat": "geometry", "lng": "geometry"},
        )

    @staticmethod
    def _feature_coordinates(
        feature: Any,
        skipped_types: Dict[str, int],
    ) -> Optional[Tuple[Any, Any]]:
        """Extract a raw (lng, lat) pair from a Point or Polygon feature."""
        if not isinstance(feature, dict):
            skipped_types["<invalid>"] = skipped_types.get("<invalid>", 0) + 1
            return None

        geometry = feature.get("geometry")
        if not isinstance(geometry, dict) or geometry.get("coordinates") is None:
            skipped_types["<missing>"] = skipped_types.get("<missing>", 0) + 1
            return None

        geometry_type = geometry.get("type")
        coords = geometry["coordinates"]
        try:
            if geometry_type == "Point":
                return coords[0], coords[1]
            if geometry_type == "Polygon":
                # Polygons are reduced to the first vertex of the outer ring
                logger.debug("Reducing Polygon feature to its first vertex")
                return coords[0][0][0], coords[0][0][1]
        except (IndexError, KeyError, TypeError):
            return None

        skipped_types[str(geometry_type)] = skipped_types.get(str(geometry_type), 0) + 1
        return None

    def _build_point(
        self,
        row: Dict[str, Any],
        mapping: Dict[str, Optional[str]],
        point_id: str,
        rng: np.random.Generator,
    ) -> Optional[DataPoint]:
        """Build a DataPoint from a record, or None if coordinates are invalid."""
        lat = parse_float(row.get(mapping["lat"]))
        lng = parse_float(row.get(mapping["lng"]))
        if lat is None or lng is None:
            return None

        value = self._field_float(row, mapping.get("value"))
        if value is None:
            value = self._backfill(rng, 100.0, self.config.default_value)

        bias = self._field_float(row, mapping.get("bias"))
        if bias is None:
            bias = self._backfill(rng, 1.0, self.config.default_bias)
        if self.config.clip_bias:
            bias = float(np.clip(bias, 0.0, 1.0))

        category = self._field_label(row, mapping.get("category"))
        region_tag = self._field_label(row, mapping.get("region_tag"))
        if region_tag is None and self.config.region_fallback == "latitude_band":
            region_tag = latitude_band(lat)

        properties = {
            key: val for key, val in row.items() if key not in ("__lat__", "__lng__")
        }

        return DataPoint(
            id=point_id,
            lat=lat,
            lng=lng,
            value=value,
            bias=bias,
            category=category or self.config.default_category,
            region_tag=region_tag,
            properties=properties,
        )

    @staticmethod
    def _field_float(row: Dict[str, Any], column: Optional[str]) -> Optional[float]:
        if column is None:
            return None
        return parse_float(row.get(column))

    @staticmethod
    def _field_label(row: Dict[str, Any], column: Optional[str]) -> Optional[str]:
        if column is None:
            return None
        return _clean_label(row.get(column))

    def _backfill(self, rng: np.random.Generator, upper: float, default: float) -> float:
        if self.config.backfill == "random":
            return float(rng.uniform(0.0, upper))
        return default
