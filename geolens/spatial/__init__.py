"""Spatial primitives for regional fairness analysis.

This module provides:
- Region boundaries and the GeoJSON FeatureCollection format that carries them
- Ray-casting point-in-polygon and first-match region assignment
- Grid-density coverage over the data extent
"""

from .geometry import Bounds, compute_bounds, point_in_polygon, polygon_centroid
from .boundaries import (
    BoundarySet,
    RegionBoundary,
    make_boundary,
    parse_boundary_collection,
    total_population,
)
from .assigner import RegionAssigner, RegionAssignment, assign_regions, find_region
from .grid import GRID_SIZE, GridCoverage, compute_grid_coverage

__all__ = [
    # Geometry
    "Bounds",
    "compute_bounds",
    "point_in_polygon",
    "polygon_centroid",
    # Boundaries
    "BoundarySet",
    "RegionBoundary",
    "make_boundary",
    "parse_boundary_collection",
    "total_population",
    # Assignment
    "RegionAssigner",
    "RegionAssignment",
    "assign_regions",
    "find_region",
    # Grid coverage
    "GRID_SIZE",
    "GridCoverage",
    "compute_grid_coverage",
]
