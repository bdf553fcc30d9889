"""Core data models for polyline orthogonalization."""

import math
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

from ..config import DEFAULT_MAX_SIMPLIFY_DEPTH, GEOMETRY_TOLERANCES


@dataclass(frozen=True)
class Point:
    """Immutable 2D point."""

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: float) -> "Point":
        return Point(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def len2(self) -> float:
        """Squared length of the point taken as a vector."""
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        """Length of the point taken as a vector."""
        return math.sqrt(self.len2())

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @classmethod
    def of(cls, value: "PointLike") -> "Point":
        """Build a point from a Point or any (x, y[, z]) sequence.

        Extra coordinates are dropped, which projects 3D vertices onto the
        XY plane.
        """
        if isinstance(value, Point):
            return value
        return cls(float(value[0]), float(value[1]))


PointLike = Union[Point, Sequence[float]]


class Orientation(str, Enum):
    """Axis an edge is snapped to."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @classmethod
    def of_segment(cls, p0: Point, p1: Point) -> "Orientation":
        """Classify a segment by its dominant axis (ties are horizontal)."""
        dx = abs(p1.x - p0.x)
        dy = abs(p1.y - p0.y)
        return cls.HORIZONTAL if dx >= dy else cls.VERTICAL


@dataclass(frozen=True)
class Run:
    """Consecutive same-orientation segments fitted to one axis-aligned line."""

    orientation: Orientation
    constant: float  # y for horizontal runs, x for vertical runs
    start: float  # along-axis minimum
    end: float  # along-axis maximum

    def __post_init__(self) -> None:
        """Keep the along-axis interval ordered."""
        if self.start > self.end:
            start, end = self.end, self.start
            object.__setattr__(self, "start", start)
            object.__setattr__(self, "end", end)

    @property
    def is_horizontal(self) -> bool:
        return self.orientation == Orientation.HORIZONTAL

    @property
    def extent(self) -> float:
        """Length of the along-axis interval."""
        return self.end - self.start


@dataclass
class OrthogonalizeSettings:
    """Tuning parameters shared by all orthogonalization strategies."""

    min_step: float = GEOMETRY_TOLERANCES["min_step"]
    eps: float = GEOMETRY_TOLERANCES["eps"]
    cluster_tol: float = GEOMETRY_TOLERANCES["cluster_tol"]
    min_edge_length: float = GEOMETRY_TOLERANCES["min_edge_length"]
    max_simplify_depth: Optional[int] = DEFAULT_MAX_SIMPLIFY_DEPTH

    def __post_init__(self) -> None:
        """Validate tolerances."""
        checks = (
            ("Minimum step", self.min_step),
            ("Simplification tolerance", self.eps),
            ("Cluster tolerance", self.cluster_tol),
            ("Minimum edge length", self.min_edge_length),
        )
        for label, value in checks:
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{label} must be positive, got {value}")
        if self.max_simplify_depth is not None and self.max_simplify_depth < 1:
            raise ValueError("Maximum simplification depth must be at least 1")

    @classmethod
    def from_defaults(
        cls, defaults: Optional[Mapping[str, float]] = None, **overrides: Any
    ) -> "OrthogonalizeSettings":
        """Create settings from a defaults table, ignoring None overrides.

        Args:
            defaults: Tolerance table (GEOMETRY_TOLERANCES if None)
            **overrides: Values that replace table entries

        Returns:
            Validated settings
        """
        values: Dict[str, Any] = dict(defaults or GEOMETRY_TOLERANCES)
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
