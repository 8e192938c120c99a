"""Typed point records produced by dataset normalization."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class DataPoint:
    """A single geolocated record.

    Attributes:
        id: Stable identifier, unique within one dataset.
        lat: Latitude in decimal degrees (always finite).
        lng: Longitude in decimal degrees (always finite).
        value: Numeric measurement carried by the record.
        bias: Per-record bias estimate in [0, 1].
        category: Free-form category label ("unknown" when absent).
        region_tag: Region label from the source record, or its latitude band
            when the record has none and the fallback is enabled.
        region: Region assigned by point-in-polygon, None when unassigned.
        properties: Raw source fields, kept for callers.
    """

    id: str
    lat: float
    lng: float
    value: float = 0.0
    bias: float = 0.0
    category: str = "unknown"
    region_tag: Optional[str] = None
    region: Optional[str] = None
    properties: Dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def coordinates(self) -> tuple:
        """Return the point as a GeoJSON-ordered (lng, lat) pair."""
        return (self.lng, self.lat)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "lat": self.lat,
            "lng": self.lng,
            "value": self.value,
            "bias": self.bias,
            "category": self.category,
            "region_tag": self.region_tag,
            "region": self.region,
        }


@dataclass
class NormalizationResult:
    """Output of a normalization pass.

    Attributes:
        points: Valid points in source order.
        rejected_count: Records skipped because of bad coordinates or geometry.
        total_records: Number of records seen in the input.
        format: Canonical format tag that was parsed.
        column_mapping: Resolved source column per canonical field.
    """

    points: List[DataPoint]
    rejected_count: int
    total_records: int
    format: str
    column_mapping: Dict[str, Optional[str]] = field(default_factory=dict)

    @property
    def valid_count(self) -> int:
        return len(self.points)
