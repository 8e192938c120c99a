"""Planar geometry helpers on raw (lng, lat) coordinates.

These functions treat longitude/latitude as plain Cartesian coordinates.
They are not projection-aware and make no geodesic correction.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np


Vertex = Tuple[float, float]


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounding box in degrees."""

    north: float
    south: float
    east: float
    west: float

    @property
    def lat_range(self) -> float:
        return self.north - self.south

    @property
    def lng_range(self) -> float:
        return self.east - self.west

    def to_dict(self) -> dict:
        return {
            "north": self.north,
            "south": self.south,
            "east": self.east,
            "west": self.west,
        }


def point_in_polygon(point: Vertex, polygon: Sequence[Sequence[float]]) -> bool:
    """Test whether a point lies inside a polygon using ray casting.

    A horizontal ray is cast from the point and edge crossings are counted;
    an odd count means inside. The polygon is closed implicitly, so the
    closing vertex may be repeated or omitted.

    Points exactly on an edge or vertex may be classified either way.

    Args:
        point: (x, y) pair, i.e. (lng, lat).
        polygon: Sequence of (x, y) vertices.

    Returns:
        True if the point is inside. Always False for fewer than 3 vertices.
    """
    n = len(polygon)
    if n < 3:
        return False

    x, y = point
    inside = False
    j = n - 1
    for i in range(n):
        xi, yi = polygon[i][0], polygon[i][1]
        xj, yj = polygon[j][0], polygon[j][1]
        if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (yj - yi) + xi:
            inside = not inside
        j = i

    return inside


def polygon_centroid(polygon: Sequence[Sequence[float]]) -> Vertex:
    """Area-weighted centroid of a simple polygon.

    Falls back to the vertex mean for degenerate (zero-area) polygons.
    """
    if len(polygon) == 0:
        raise ValueError("polygon cannot be empty")

    vertices = np.asarray(polygon, dtype=np.float64)[:, :2]
    if len(vertices) > 1 and np.array_equal(vertices[0], vertices[-1]):
        vertices = vertices[:-1]

    x = vertices[:, 0]
    y = vertices[:, 1]
    x_next = np.roll(x, -1)
    y_next = np.roll(y, -1)
    cross = x * y_next - x_next * y
    area = cross.sum() / 2.0

    if abs(area) < 1e-12:
        return float(x.mean()), float(y.mean())

    cx = ((x + x_next) * cross).sum() / (6.0 * area)
    cy = ((y + y_next) * cross).sum() / (6.0 * area)
    return float(cx), float(cy)


def compute_bounds(coordinates: Iterable[Vertex]) -> Optional[Bounds]:
    """Bounding box of (lng, lat) pairs, or None when there are none."""
    coords = np.asarray(list(coordinates), dtype=np.float64)
    if coords.size == 0:
        return None

    return Bounds(
        north=float(coords[:, 1].max()),
        south=float(coords[:, 1].min()),
        east=float(coords[:, 0].max()),
        west=float(coords[:, 0].min()),
    )
