"""Cluster-snap orthogonalization.

Learns the discrete X and Y levels of a near-orthogonal outline by 1D
clustering and snaps every vertex onto them. Sorting dominates the cost, so
there is no recursion and no quadratic worst case.
"""

import logging
import math
from typing import Iterable, List, Optional

import numpy as np

from ..core.models import OrthogonalizeSettings, Point
from .base_orthogonalizer import BaseOrthogonalizer
from .primitives import finite_values

logger = logging.getLogger(__name__)


def cluster_1d(values: Iterable[float], tol: float) -> List[float]:
    """Group sorted values into levels.

    A value joins the current cluster when it lies within tol of the
    cluster's most recently added member. Each cluster becomes its median.

    Args:
        values: Raw coordinates; non-finite entries are ignored
        tol: Grouping tolerance

    Returns:
        Ascending list of levels (empty if no value is finite)
    """
    arr = np.sort(finite_values(values))
    if arr.size == 0:
        return []

    # A gap wider than tol starts a new cluster
    breaks = np.nonzero(np.diff(arr) > tol)[0] + 1
    return [float(np.median(cluster)) for cluster in np.split(arr, breaks)]


def nearest_level(value: float, levels: List[float]) -> float:
    """Snap value to the closest level; the first level wins ties.

    Non-finite values and empty level sets leave the value unchanged.
    """
    if not levels or not math.isfinite(value):
        return value
    diffs = np.abs(np.asarray(levels, dtype=float) - value)
    return levels[int(np.argmin(diffs))]


class ClusterSnapOrthogonalizer(BaseOrthogonalizer):
    """Snap vertices to clustered X/Y levels."""

    def __init__(self, settings: Optional[OrthogonalizeSettings] = None, **kwargs):
        super().__init__(settings, **kwargs)
        self.cluster_tol = self.settings.cluster_tol

    def _orthogonalize(self, points: List[Point], closed: bool) -> List[Point]:
        x_levels = cluster_1d((p.x for p in points), self.cluster_tol)
        y_levels = cluster_1d((p.y for p in points), self.cluster_tol)
        logger.debug(f"Found {len(x_levels)} X levels and {len(y_levels)} Y levels")

        snapped = [
            Point(nearest_level(p.x, x_levels), nearest_level(p.y, y_levels))
            for p in points
        ]
        snapped = self.cleaner.remove_duplicates(snapped, closed)
        return self.cleaner.clean(snapped, closed)

    def get_methodology_name(self) -> str:
        return "Cluster Snap"

    def get_methodology_code(self) -> str:
        return "cluster_snap"
