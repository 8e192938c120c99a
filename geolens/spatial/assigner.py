"""Assignment of points to region boundaries by point-in-polygon tests."""

from dataclasses import dataclass, field, replace
from typing import List, Optional, Sequence

from loguru import logger

from geolens.data.points import DataPoint

from .boundaries import BoundarySet, RegionBoundary
from .geometry import point_in_polygon


@dataclass
class RegionAssignment:
    """Result of assigning points to regions.

    Attributes:
        points: New points, in input order, with `region` set.
        assigned_count: Points that fell inside some boundary.
        unassigned_count: Points outside every boundary.
        degenerate_boundaries: Names of boundaries with fewer than 3 vertices.
    """

    points: List[DataPoint]
    assigned_count: int
    unassigned_count: int
    degenerate_boundaries: List[str] = field(default_factory=list)


def find_region(point: DataPoint, boundaries: Sequence[RegionBoundary]) -> Optional[str]:
    """Return the name of the first boundary containing the point.

    Boundaries are checked in order and the first match wins, so
    overlapping boundaries resolve to the earlier one.
    """
    coords = point.coordinates
    for boundary in boundaries:
        if point_in_polygon(coords, boundary.polygon):
            return boundary.name
    return None


class RegionAssigner:
    """Assigns each point to the first region boundary that contains it."""

    def __init__(self, boundaries: BoundarySet):
        """Initialize the assigner.

        Args:
            boundaries: Ordered region boundaries. Not modified.
        """
        self.boundaries = tuple(boundaries)
        self.degenerate_boundaries = [b.name for b in self.boundaries if b.is_degenerate]

    def assign(self, points: Sequence[DataPoint]) -> RegionAssignment:
        """Assign regions to points.

        Input points are not modified; each output point is a copy with
        `region` set to the matching boundary name or None.

        Args:
            points: Points to assign.

        Returns:
            RegionAssignment with the new points and counts.
        """
        if self.degenerate_boundaries:
            logger.warning(
                f"{len(self.degenerate_boundaries)} boundaries have fewer than 3 "
                f"vertices and will contain no points: {self.degenerate_boundaries}"
            )

        usable = [b for b in self.boundaries if not b.is_degenerate]
        assigned: List[DataPoint] = []
        assigned_count = 0
        for point in points:
            region = find_region(point, usable)
            if region is not None:
                assigned_count += 1
            assigned.append(replace(point, region=region))

        unassigned_count = len(assigned) - assigned_count
        logger.debug(
            f"RegionAssigner: {assigned_count} of {len(assigned)} points assigned "
            f"across {len(self.boundaries)} boundaries"
        )

        return RegionAssignment(
            points=assigned,
            assigned_count=assigned_count,
            unassigned_count=unassigned_count,
            degenerate_boundaries=list(self.degenerate_boundaries),
        )

    def __repr__(self) -> str:
        return f"RegionAssigner(boundaries={len(self.boundaries)})"


def assign_regions(
    points: Sequence[DataPoint],
    boundaries: BoundarySet,
) -> List[DataPoint]:
    """Convenience wrapper returning only the assigned points."""
    return RegionAssigner(boundaries).assign(points).points
