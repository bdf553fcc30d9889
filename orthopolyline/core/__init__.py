"""Core module for polyline orthogonalization."""

from .models import Orientation, OrthogonalizeSettings, Point, PointLike, Run

__all__ = [
    "Point",
    "PointLike",
    "Orientation",
    "Run",
    "OrthogonalizeSettings",
]
