"""Validation of orthogonalized polylines."""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from shapely.geometry import LineString, Polygon

from ..config import COLLINEAR_TOLERANCE, DUPLICATE_TOLERANCE, GEOMETRY_TOLERANCES
from ..core.models import Point
from .cleaner import PolylineCleaner


@dataclass
class ValidationIssue:
    """Represents a validation issue found in an output polyline."""

    vertex_index: int
    issue_type: str
    severity: str  # "error", "warning", "info"
    message: str
    value: Optional[float] = None
    limit: Optional[float] = None


@dataclass
class ValidationResult:
    """Result of polyline validation."""

    is_valid: bool
    issues: List[ValidationIssue]
    total_errors: int
    total_warnings: int
    metrics: Dict[str, float] = field(default_factory=dict)

    def add_issue(self, issue: ValidationIssue) -> None:
        """Add a validation issue."""
        self.issues.append(issue)
        if issue.severity == "error":
            self.total_errors += 1
            self.is_valid = False
        elif issue.severity == "warning":
            self.total_warnings += 1

    def get_summary(self) -> str:
        """Get validation summary."""
        if self.is_valid:
            return f"Validation passed with {self.total_warnings} warnings"
        else:
            return f"Validation failed: {self.total_errors} errors, {self.total_warnings} warnings"


class OrthogonalityValidator:
    """Check that an output polyline is axis-aligned and free of leftovers."""

    def __init__(
        self,
        min_edge_length: Optional[float] = None,
        tolerance: float = COLLINEAR_TOLERANCE,
        require_orthogonal: bool = True,
    ):
        """Initialize validator.

        Args:
            min_edge_length: Edges shorter than this are reported
            tolerance: Coordinate tolerance for axis alignment
            require_orthogonal: Report diagonal edges as errors instead of
                warnings
        """
        self.min_edge_length = (
            min_edge_length or GEOMETRY_TOLERANCES["min_edge_length"]
        )
        self.tolerance = tolerance
        self.require_orthogonal = require_orthogonal
        self._cleaner = PolylineCleaner(collinear_tolerance=tolerance)

    def validate(
        self,
        points: Sequence[Point],
        closed: bool,
        original: Optional[Sequence[Point]] = None,
    ) -> ValidationResult:
        """Validate an orthogonalized polyline.

        Args:
            points: Output polyline
            closed: Whether the polyline is closed
            original: Input polyline, used for deviation metrics

        Returns:
            ValidationResult with all issues found
        """
        result = ValidationResult(
            is_valid=True, issues=[], total_errors=0, total_warnings=0
        )
        n = len(points)

        if n < 2:
            result.add_issue(
                ValidationIssue(
                    vertex_index=-1,
                    issue_type="too_few_points",
                    severity="error",
                    message=f"Polyline has {n} point(s); at least 2 are required",
                    value=float(n),
                    limit=2.0,
                )
            )
            return result

        self._validate_edges(points, closed, result)
        self._validate_vertices(points, closed, result)

        if original is not None:
            result.metrics.update(self.deviation_metrics(original, points, closed))

        return result

    def _validate_edges(
        self, points: Sequence[Point], closed: bool, result: ValidationResult
    ) -> None:
        n = len(points)
        edge_count = n if closed else n - 1
        severity = "error" if self.require_orthogonal else "warning"

        for i in range(edge_count):
            a = points[i]
            b = points[(i + 1) % n]
            dx = abs(b.x - a.x)
            dy = abs(b.y - a.y)

            if dx >= self.tolerance and dy >= self.tolerance:
                result.add_issue(
                    ValidationIssue(
                        vertex_index=i,
                        issue_type="diagonal_edge",
                        severity=severity,
                        message=f"Edge {i} is not axis-aligned (dx={dx:.3f}, dy={dy:.3f})",
                        value=min(dx, dy),
                        limit=self.tolerance,
                    )
                )

            length = (b - a).length()
            if (
                closed
                and i == n - 1
                and n > 2
                and dx < DUPLICATE_TOLERANCE
                and dy < DUPLICATE_TOLERANCE
            ):
                result.add_issue(
                    ValidationIssue(
                        vertex_index=i,
                        issue_type="duplicate_closing_vertex",
                        severity="error",
                        message="Last vertex repeats the first vertex",
                        value=length,
                        limit=DUPLICATE_TOLERANCE,
                    )
                )
            elif length < self.min_edge_length:
                result.add_issue(
                    ValidationIssue(
                        vertex_index=i,
                        issue_type="short_edge",
                        severity="warning",
                        message=f"Edge {i} length {length:.3f} is below minimum",
                        value=length,
                        limit=self.min_edge_length,
                    )
                )

    def _validate_vertices(
        self, points: Sequence[Point], closed: bool, result: ValidationResult
    ) -> None:
        n = len(points)
        if n < 3:
            return

        indices = range(n) if closed else range(1, n - 1)
        for i in indices:
            if self._cleaner.is_axis_collinear(
                points[(i - 1) % n], points[i], points[(i + 1) % n]
            ):
                result.add_issue(
                    ValidationIssue(
                        vertex_index=i,
                        issue_type="collinear_vertex",
                        severity="warning",
                        message=f"Vertex {i} is redundant on a straight edge",
                    )
                )

    def deviation_metrics(
        self, original: Sequence[Point], points: Sequence[Point], closed: bool
    ) -> Dict[str, float]:
        """Compare output against input outline.

        Returns:
            hausdorff_distance, plus original_area, area and
            area_change_percent for closed outlines of 3+ points. Empty when
            either outline is too short or holds non-finite coordinates.
        """
        if len(original) < 2 or len(points) < 2:
            return {}
        if not (_all_finite(original) and _all_finite(points)):
            return {}

        before = [p.to_tuple() for p in original]
        after = [p.to_tuple() for p in points]
        if closed:
            before.append(before[0])
            after.append(after[0])

        metrics = {
            "hausdorff_distance": float(
                LineString(before).hausdorff_distance(LineString(after))
            )
        }

        if closed and len(original) >= 3 and len(points) >= 3:
            original_area = Polygon(before).area
            area = Polygon(after).area
            metrics["original_area"] = float(original_area)
            metrics["area"] = float(area)
            if original_area > 0:
                metrics["area_change_percent"] = float(
                    (area - original_area) / original_area * 100
                )

        return metrics


def _all_finite(points: Sequence[Point]) -> bool:
    return all(math.isfinite(p.x) and math.isfinite(p.y) for p in points)
