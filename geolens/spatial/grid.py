"""Boundary-free coverage scoring on a fixed grid over the data extent."""

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np
from loguru import logger

from geolens.data.points import DataPoint

from .geometry import Bounds, compute_bounds


GRID_SIZE = 10


@dataclass
class GridCoverage:
    """Occupancy of a GRID_SIZE x GRID_SIZE grid over the points' bounding box.

    Attributes:
        coverage_score: Percentage of grid cells holding at least one point.
        occupied_cells: Number of non-empty cells.
        total_cells: Number of cells in the grid.
        grid_size: Cells per axis.
        mean_density: Mean points per occupied cell.
        max_density: Most points in a single cell.
        min_density: Fewest points in an occupied cell.
        bounds: Bounding box of the points, None when there are none.
    """

    coverage_score: float
    occupied_cells: int
    total_cells: int
    grid_size: int
    mean_density: float
    max_density: int
    min_density: int
    bounds: Optional[Bounds]

    def to_dict(self) -> dict:
        return {
            "coverage_score": self.coverage_score,
            "occupied_cells": self.occupied_cells,
            "total_cells": self.total_cells,
            "grid_size": self.grid_size,
            "mean_density": self.mean_density,
            "max_density": self.max_density,
            "min_density": self.min_density,
            "bounds": self.bounds.to_dict() if self.bounds else None,
        }


def _cell_indices(values: np.ndarray, minimum: float, step: float, grid_size: int) -> np.ndarray:
    # The maximum coordinate lands on the last cell rather than one past it
    cells = np.floor((values - minimum) / step).astype(np.int64)
    return np.clip(cells, 0, grid_size - 1)


def compute_grid_coverage(
    points: Sequence[DataPoint],
    grid_size: int = GRID_SIZE,
) -> GridCoverage:
    """Score how much of the data extent is covered by points.

    The bounding box of all points is split into grid_size x grid_size
    cells and the share of occupied cells is reported as a percentage,
    capped at 100. When all points share the same latitude or the same
    longitude the step is zero and a single occupied cell is counted.

    Args:
        points: Points to score.
        grid_size: Cells per axis.

    Returns:
        GridCoverage with the score and per-cell density statistics.
    """
    if grid_size < 1:
        raise ValueError(f"grid_size must be >= 1, got {grid_size}")

    total_cells = grid_size * grid_size
    if len(points) == 0:
        return GridCoverage(0.0, 0, total_cells, grid_size, 0.0, 0, 0, None)

    lats = np.array([p.lat for p in points], dtype=np.float64)
    lngs = np.array([p.lng for p in points], dtype=np.float64)
    bounds = compute_bounds(zip(lngs, lats))

    lat_step = bounds.lat_range / grid_size
    lng_step = bounds.lng_range / grid_size

    if lat_step > 0 and lng_step > 0:
        lat_cells = _cell_indices(lats, bounds.south, lat_step, grid_size)
        lng_cells = _cell_indices(lngs, bounds.west, lng_step, grid_size)
        flat = lat_cells * grid_size + lng_cells
        densities = np.bincount(flat, minlength=total_cells)
        densities = densities[densities > 0]
    else:
        logger.debug("Zero-range bounding box, counting a single occupied cell")
        densities = np.array([len(points)])

    occupied = int(len(densities))
    coverage_score = min(100.0, occupied / total_cells * 100.0)

    return GridCoverage(
        coverage_score=float(coverage_score),
        occupied_cells=occupied,
        total_cells=total_cells,
        grid_size=grid_size,
        mean_density=float(np.mean(densities)),
        max_density=int(np.max(densities)),
        min_density=int(np.min(densities)),
        bounds=bounds,
    )
