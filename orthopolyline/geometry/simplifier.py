"""Douglas-Peucker polyline simplification with an explicit work stack."""

import logging
from typing import List, Optional

import numpy as np

from ..config import DEGENERATE_LENGTH_SQUARED, GEOMETRY_TOLERANCES
from ..core.models import Point
from .primitives import distances_to_segment, points_to_array

logger = logging.getLogger(__name__)


class DouglasPeuckerSimplifier:
    """Simplify open or closed polylines by perpendicular distance."""

    def __init__(self, eps: Optional[float] = None, max_depth: Optional[int] = None):
        """Initialize simplifier.

        Args:
            eps: Points within this distance of their anchor segment are removed
            max_depth: Optional subdivision limit; spans reaching it are kept
                unsimplified
        """
        self.eps = eps or GEOMETRY_TOLERANCES["eps"]
        self.max_depth = max_depth

    def simplify(self, points: List[Point], closed: bool) -> List[Point]:
        """Simplify a polyline.

        Closed polylines are opened at the point farthest from the first
        point, so the split location does not depend on where the outline
        was started beyond that first point.

        Args:
            points: Polyline vertices
            closed: Whether an implicit edge joins the last point to the first

        Returns:
            New list of retained points
        """
        if len(points) < 3:
            return list(points)

        if not closed:
            return self.simplify_open(points)

        split = self._farthest_from_first(points)
        opened = points[split:] + points[:split]
        simplified = self.simplify_open(opened)

        if (
            len(simplified) > 2
            and (simplified[0] - simplified[-1]).len2() < DEGENERATE_LENGTH_SQUARED
        ):
            simplified.pop()

        logger.debug(
            f"Simplified closed polyline from {len(points)} to {len(simplified)} "
            f"points (opened at index {split})"
        )
        return simplified

    def simplify_open(self, points: List[Point]) -> List[Point]:
        """Simplify an open polyline between its fixed end points."""
        n = len(points)
        if n < 3:
            return list(points)

        coords = points_to_array(points)
        keep = np.zeros(n, dtype=bool)
        keep[0] = keep[-1] = True

        # (first index, last index, depth) spans still to examine
        stack = [(0, n - 1, 0)]
        while stack:
            first, last, depth = stack.pop()
            if last - first < 2:
                continue

            if self.max_depth is not None and depth >= self.max_depth:
                keep[first + 1 : last] = True
                continue

            dists = distances_to_segment(
                coords[first + 1 : last], coords[first], coords[last]
            )
            dists[np.isnan(dists)] = 0.0
            offset = int(np.argmax(dists))

            if dists[offset] > self.eps:
                split = first + 1 + offset
                keep[split] = True
                stack.append((split, last, depth + 1))
                stack.append((first, split, depth + 1))

        return [p for p, kept in zip(points, keep) if kept]

    @staticmethod
    def _farthest_from_first(points: List[Point]) -> int:
        """Index of the first point at maximum squared distance from points[0]."""
        split = 0
        best = -1.0
        origin = points[0]
        for i in range(1, len(points)):
            d = (points[i] - origin).len2()
            if d > best:
                best = d
                split = i
        return split
