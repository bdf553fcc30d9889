"""Orientation runs: grouping, median fitting and corner reconstruction."""

import logging
from typing import List

from ..core.models import Orientation, Point, Run
from .primitives import finite_values, median

logger = logging.getLogger(__name__)


class RunBuilder:
    """Group consecutive same-orientation segments into fitted runs."""

    def build(self, points: List[Point], closed: bool) -> List[Run]:
        """Build runs for a simplified polyline.

        Args:
            points: Simplified polyline vertices
            closed: Whether the closing segment takes part

        Returns:
            Runs in polyline order. For closed polylines the first and last
            runs never share an orientation.
        """
        n = len(points)
        seg_count = n if closed else n - 1
        if n < 2 or seg_count <= 0:
            return []

        runs: List[Run] = []
        start = 0
        current = Orientation.of_segment(points[0], points[1 % n])

        for i in range(1, seg_count):
            orientation = Orientation.of_segment(points[i % n], points[(i + 1) % n])
            if orientation != current:
                runs.append(self.fit_run(points, start, i, current))
                start = i
                current = orientation
        runs.append(self.fit_run(points, start, seg_count, current))

        # The closure point splits one straight edge into two runs
        if closed and len(runs) >= 2 and runs[0].orientation == runs[-1].orientation:
            last = runs.pop()
            first = runs[0]
            runs[0] = Run(
                orientation=first.orientation,
                constant=median([last.constant, first.constant], first.constant),
                start=min(last.start, first.start),
                end=max(last.end, first.end),
            )

        logger.debug(f"Built {len(runs)} runs from {seg_count} segments")
        return runs

    def fit_run(
        self, points: List[Point], seg_start: int, seg_end: int, orientation: Orientation
    ) -> Run:
        """Fit segments [seg_start, seg_end) to one axis-aligned line.

        The constant coordinate is the median over the segment end points,
        which keeps a single jittered vertex from dragging the whole edge.
        """
        n = len(points)
        members = [points[(seg_start + k) % n] for k in range(seg_end - seg_start + 1)]
        if len(members) < 2:
            members = [points[seg_start % n], points[(seg_start + 1) % n]]

        if orientation == Orientation.HORIZONTAL:
            constants = [p.y for p in members]
            along = [p.x for p in members]
        else:
            constants = [p.x for p in members]
            along = [p.y for p in members]

        constant = median(constants, fallback=_first_finite(constants))
        along_finite = finite_values(along)
        if along_finite.size:
            start, end = float(along_finite.min()), float(along_finite.max())
        else:
            start = end = 0.0

        return Run(orientation=orientation, constant=constant, start=start, end=end)


def reconstruct_corners(runs: List[Run], closed: bool) -> List[Point]:
    """Intersect consecutive runs to rebuild the polyline corners.

    Each corner takes X from the vertical run and Y from the horizontal one.
    Open polylines yield one corner fewer than runs; no end points are
    projected from the first and last runs.
    """
    m = len(runs)
    count = m if closed else m - 1

    corners = []
    for i in range(count):
        r0 = runs[i]
        r1 = runs[(i + 1) % m]

        if r0.orientation == r1.orientation:
            logger.debug(f"Skipping parallel runs at index {i}")
            continue

        if r0.orientation == Orientation.VERTICAL:
            corners.append(Point(r0.constant, r1.constant))
        else:
            corners.append(Point(r1.constant, r0.constant))

    return corners


def _first_finite(values: List[float]) -> float:
    arr = finite_values(values)
    return float(arr[0]) if arr.size else 0.0
