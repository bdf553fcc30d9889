"""JSON report generation for orthogonalization runs."""

import json
import math
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from .. import __version__
from ..core.models import Point
from ..core.pipeline import EntityResult, PipelineResult


class JSONReporter:
    """Generate structured JSON reports for orthogonalization runs."""

    def __init__(self, indent: int = 2, include_points: bool = True) -> None:
        """Initialize JSON reporter.

        Args:
            indent: JSON indentation for readable output
            include_points: Include original and output vertex lists
        """
        self.indent = indent
        self.include_points = include_points

    def build_report(self, result: PipelineResult) -> Dict[str, Any]:
        """Build the report as a dictionary."""
        return {
            "metadata": {
                "input_file": result.input_file,
                "output_file": result.output_file,
                "analysis_date": datetime.now().isoformat(),
                "generator": "orthopolyline",
                "version": __version__,
            },
            "settings": result.settings.to_dict(),
            "summary": result.summary,
            "entities": [self._build_entity_data(e) for e in result.entities],
            "warnings": list(result.warnings),
            "errors": list(result.errors),
        }

    def generate_report(self, result: PipelineResult, output_path: Path) -> None:
        """Write the report to a JSON file.

        Args:
            result: Pipeline result
            output_path: Output JSON file path
        """
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(
                self.build_report(result),
                f,
                indent=self.indent,
                ensure_ascii=False,
                allow_nan=False,
            )

    def _build_entity_data(self, entity: EntityResult) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "handle": entity.handle,
            "layer": entity.layer,
            "type": entity.dxftype,
            "closed": entity.closed,
            "processed": entity.processed,
            "message": entity.message,
            "points_in": len(entity.original_points),
            "points_out": len(entity.output_points),
        }

        if entity.validation is not None:
            data["validation"] = {
                "is_valid": entity.validation.is_valid,
                "summary": entity.validation.get_summary(),
                "issues": [
                    {
                        "vertex": issue.vertex_index,
                        "type": issue.issue_type,
                        "severity": issue.severity,
                        "message": issue.message,
                    }
                    for issue in entity.validation.issues
                ],
                "metrics": {
                    k: _number(v) for k, v in entity.validation.metrics.items()
                },
            }

        if self.include_points:
            data["original_points"] = _points_data(entity.original_points)
            data["output_points"] = _points_data(entity.output_points)

        return data


def _points_data(points: List[Point]) -> List[Dict[str, Optional[float]]]:
    return [{"x": _number(p.x), "y": _number(p.y)} for p in points]


def _number(value: float) -> Optional[float]:
    """Round for output; NaN and infinities become null."""
    if not math.isfinite(value):
        return None
    return round(value, 6)


def generate_json_report(result: PipelineResult, output_path: Path) -> None:
    """Convenience function to write a JSON report."""
    JSONReporter().generate_report(result, output_path)
