"""Region boundary definitions and the GeoJSON wire format that carries them."""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from loguru import logger

from .geometry import Vertex


@dataclass(frozen=True)
class RegionBoundary:
    """A named polygon, optionally with a population estimate.

    Attributes:
        name: Region name, used as the assignment label.
        polygon: Outer ring as (lng, lat) vertices. Closing vertex optional.
        population: Population estimate, if known.
        code: Short region code, if provided.
    """

    name: str
    polygon: Tuple[Vertex, ...]
    population: Optional[int] = None
    code: Optional[str] = None

    @property
    def is_degenerate(self) -> bool:
        """True when the ring has fewer than 3 vertices and contains nothing."""
        return len(self.polygon) < 3


# Ordered, caller-owned, never mutated by the engine
BoundarySet = Tuple[RegionBoundary, ...]


def make_boundary(
    name: str,
    polygon: Sequence[Sequence[float]],
    population: Optional[int] = None,
    code: Optional[str] = None,
) -> RegionBoundary:
    """Build a RegionBoundary from any sequence of [lng, lat] pairs."""
    ring = tuple((float(v[0]), float(v[1])) for v in polygon)
    return RegionBoundary(name=name, polygon=ring, population=population, code=code)


def _parse_population(raw: Any) -> Optional[int]:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        population = int(float(raw))
    except (TypeError, ValueError, OverflowError):
        return None
    return population if population >= 0 else None


def _outer_ring(geometry: Dict[str, Any]) -> Optional[List[Any]]:
    geometry_type = geometry.get("type")
    coords = geometry.get("coordinates")
    if not coords:
        return None
    if geometry_type == "Polygon":
        return coords[0]
    if geometry_type == "MultiPolygon":
        # Only the outer ring of the first polygon is used
        return coords[0][0] if coords[0] else None
    return None


def parse_boundary_collection(
    data: Union[bytes, str, Dict[str, Any]],
) -> BoundarySet:
    """Parse a GeoJSON FeatureCollection of region polygons.

    Each feature needs `properties.name` and a Polygon (or MultiPolygon)
    geometry whose first ring is the outer boundary in [lng, lat] order.
    `properties.population` and `properties.code` are optional. Features
    that cannot be used are skipped with a warning.

    Args:
        data: Raw JSON bytes/str or an already-decoded dictionary.

    Returns:
        BoundarySet in feature order.

    Raises:
        ValueError: If the input is not a GeoJSON FeatureCollection.
    """
    if isinstance(data, (bytes, str)):
        try:
            data = json.loads(data)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ValueError(f"Failed to parse boundary GeoJSON: {e}") from e

    if not isinstance(data, dict) or data.get("type") != "FeatureCollection":
        raise ValueError("Boundary data must be a GeoJSON FeatureCollection")

    features = data.get("features") or []
    if not isinstance(features, list):
        raise ValueError("Boundary GeoJSON 'features' must be a list")

    boundaries: List[RegionBoundary] = []
    for index, feature in enumerate(features):
        if not isinstance(feature, dict):
            logger.warning(f"Skipping boundary feature {index}: not a GeoJSON object")
            continue

        properties = feature.get("properties")
        if not isinstance(properties, dict):
            properties = {}
        name = properties.get("name")
        if name is None or not str(name).strip():
            logger.warning(f"Skipping boundary feature {index}: missing 'name' property")
            continue

        geometry = feature.get("geometry")
        if not isinstance(geometry, dict):
            geometry = {}
        try:
            ring = _outer_ring(geometry)
            boundary = make_boundary(
                str(name).strip(),
                ring or [],
                population=_parse_population(properties.get("population")),
                code=properties.get("code"),
            )
        except (IndexError, KeyError, TypeError, ValueError):
            ring = None
        if ring is None:
            logger.warning(
                f"Skipping boundary '{name}': unsupported geometry "
                f"'{geometry.get('type')}'"
            )
            continue

        boundaries.append(boundary)

    logger.debug(f"Parsed {len(boundaries)} region boundaries")
    return tuple(boundaries)


def total_population(boundaries: BoundarySet) -> int:
    """Sum of all known boundary populations."""
    return sum(b.population for b in boundaries if b.population)
