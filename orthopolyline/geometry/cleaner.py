"""Polyline de-duplication and cleanup stages shared by all strategies."""

import logging
import math
from typing import List, Optional

from ..config import COLLINEAR_TOLERANCE, DUPLICATE_TOLERANCE, GEOMETRY_TOLERANCES
from ..core.models import Point

logger = logging.getLogger(__name__)


class PolylineCleaner:
    """Remove near-duplicate points, tiny edges and redundant vertices."""

    def __init__(
        self,
        min_step: Optional[float] = None,
        min_edge_length: Optional[float] = None,
        collinear_tolerance: float = COLLINEAR_TOLERANCE,
        duplicate_tolerance: float = DUPLICATE_TOLERANCE,
    ):
        """Initialize polyline cleaner.

        Args:
            min_step: Points closer than this to their predecessor are dropped
            min_edge_length: Rebuilt edges shorter than this are dropped
            collinear_tolerance: Coordinate tolerance of the collinearity test
            duplicate_tolerance: Per-axis tolerance for identical points
        """
        self.min_step = min_step or GEOMETRY_TOLERANCES["min_step"]
        self.min_edge_length = (
            min_edge_length or GEOMETRY_TOLERANCES["min_edge_length"]
        )
        self.collinear_tolerance = collinear_tolerance
        self.duplicate_tolerance = duplicate_tolerance

    def filter_min_step(self, points: List[Point], closed: bool) -> List[Point]:
        """Drop points closer than min_step to the last kept point.

        Always keeps the first finite point (the first point when none is
        finite). For closed polylines a last point that
        falls within min_step of the first is dropped as well.
        """
        if not points:
            return []
        return self._thin(points, self.min_step, closed)

    def remove_tiny_edges(self, points: List[Point], closed: bool) -> List[Point]:
        """Drop vertices that would create edges shorter than min_edge_length."""
        if len(points) < 3:
            return list(points)
        return self._thin(points, self.min_edge_length, closed)

    def remove_duplicates(self, points: List[Point], closed: bool) -> List[Point]:
        """Drop consecutive points that coincide on both axes."""
        if len(points) < 2:
            return list(points)

        cleaned = [points[0]]
        for point in points[1:]:
            if not self._same(point, cleaned[-1]):
                cleaned.append(point)

        if closed and len(cleaned) > 2 and self._same(cleaned[0], cleaned[-1]):
            cleaned.pop()

        return cleaned

    def merge_collinear(self, points: List[Point], closed: bool) -> List[Point]:
        """Remove vertices lying on the axis-aligned line through their neighbours.

        Closed polylines wrap around; the end points of open polylines are
        always retained.
        """
        n = len(points)
        if n < 3:
            return list(points)

        cleaned = []
        for i, current in enumerate(points):
            if not closed and (i == 0 or i == n - 1):
                cleaned.append(current)
                continue

            prev_point = points[(i - 1) % n]
            next_point = points[(i + 1) % n]
            if not self.is_axis_collinear(prev_point, current, next_point):
                cleaned.append(current)

        return cleaned

    def clean(self, points: List[Point], closed: bool) -> List[Point]:
        """Run the shared post-processing: tiny edges, then collinear vertices."""
        cleaned = self.remove_tiny_edges(points, closed)
        cleaned = self.merge_collinear(cleaned, closed)
        logger.debug(f"Cleanup kept {len(cleaned)} of {len(points)} points")
        return cleaned

    def is_axis_collinear(self, a: Point, b: Point, c: Point) -> bool:
        """Check whether a, b and c share an X or share a Y."""
        tol = self.collinear_tolerance
        same_x = abs(a.x - b.x) < tol and abs(b.x - c.x) < tol
        same_y = abs(a.y - b.y) < tol and abs(b.y - c.y) < tol
        return same_x or same_y

    def _same(self, a: Point, b: Point) -> bool:
        tol = self.duplicate_tolerance
        return abs(a.x - b.x) < tol and abs(a.y - b.y) < tol

    def _thin(self, points: List[Point], min_distance: float, closed: bool) -> List[Point]:
        """Keep points at least min_distance from the last kept point."""
        min2 = min_distance * min_distance

        # Non-finite points never pass the distance test, so start at a finite one
        start = next((i for i, p in enumerate(points) if _is_finite(p)), 0)
        cleaned = [points[start]]
        for point in points[start + 1 :]:
            if (point - cleaned[-1]).len2() >= min2:
                cleaned.append(point)

        # Avoid a zero-length closing edge
        if closed and len(cleaned) > 2 and (cleaned[-1] - cleaned[0]).len2() < min2:
            cleaned.pop()

        return cleaned


def _is_finite(point: Point) -> bool:
    return math.isfinite(point.x) and math.isfinite(point.y)
