"""Shared geometric and statistical helpers."""

from typing import Iterable, List, Optional

import numpy as np

from ..config import DEGENERATE_LENGTH_SQUARED
from ..core.models import Point, PointLike


def to_points(points: Optional[Iterable[PointLike]]) -> List[Point]:
    """Copy any iterable of point-likes into a new list of Points."""
    if points is None:
        return []
    return [Point.of(p) for p in points]


def points_to_array(points: List[Point]) -> np.ndarray:
    """Convert points to an (n, 2) float array."""
    if not points:
        return np.empty((0, 2), dtype=float)
    return np.array([(p.x, p.y) for p in points], dtype=float)


def distance_point_to_segment(p: Point, a: Point, b: Point) -> float:
    """Distance from p to the nearest point on segment a-b.

    The projection parameter is clamped to [0, 1]; a degenerate segment falls
    back to the point-to-point distance.
    """
    ab = b - a
    ab2 = ab.len2()
    if ab2 < DEGENERATE_LENGTH_SQUARED:
        return (p - a).length()

    t = ((p.x - a.x) * ab.x + (p.y - a.y) * ab.y) / ab2
    t = max(0.0, min(1.0, t))
    proj = Point(a.x + t * ab.x, a.y + t * ab.y)
    return (p - proj).length()


def distances_to_segment(pts: np.ndarray, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Vectorized distance_point_to_segment for an (n, 2) array."""
    ab = b - a
    ab2 = float(np.dot(ab, ab))
    rel = pts - a
    if ab2 < DEGENERATE_LENGTH_SQUARED:
        return np.hypot(rel[:, 0], rel[:, 1])

    t = np.clip(rel @ ab / ab2, 0.0, 1.0)
    closest = a + t[:, None] * ab
    diff = pts - closest
    return np.hypot(diff[:, 0], diff[:, 1])


def finite_values(values: Iterable[float]) -> np.ndarray:
    """Return the finite entries of values as a float array."""
    arr = np.asarray(list(values), dtype=float)
    return arr[np.isfinite(arr)]


def median(values: Iterable[float], fallback: float = 0.0) -> float:
    """Median of the finite values, or fallback when none are finite."""
    arr = finite_values(values)
    if arr.size == 0:
        return fallback
    return float(np.median(arr))
