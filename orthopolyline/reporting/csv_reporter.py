"""CSV report generation for orthogonalization runs."""

import csv
from pathlib import Path
from typing import Any, List

from ..core.pipeline import EntityResult, PipelineResult


class CSVReporter:
    """Write one CSV row per polyline."""

    def __init__(self) -> None:
        """Initialize CSV reporter."""
        self.headers = [
            "Handle",
            "Layer",
            "Type",
            "Closed",
            "Processed",
            "Points In",
            "Points Out",
            "Errors",
            "Warnings",
            "Hausdorff Distance",
            "Area Change (%)",
            "Message",
        ]

    def generate_report(self, result: PipelineResult, output_path: Path) -> None:
        """Generate entity details CSV report.

        Args:
            result: Pipeline result
            output_path: Output CSV file path
        """
        with open(output_path, "w", newline="", encoding="utf-8") as csvfile:
            writer = csv.writer(csvfile)
            writer.writerow(self.headers)
            for entity in result.entities:
                writer.writerow(self._row(entity))

    def _row(self, entity: EntityResult) -> List[Any]:
        validation = entity.validation
        metrics = validation.metrics if validation else {}

        return [
            entity.handle,
            entity.layer,
            entity.dxftype,
            entity.closed,
            entity.processed,
            len(entity.original_points),
            len(entity.output_points),
            validation.total_errors if validation else "",
            validation.total_warnings if validation else "",
            _fmt(metrics.get("hausdorff_distance")),
            _fmt(metrics.get("area_change_percent")),
            entity.message,
        ]


def _fmt(value: Any) -> str:
    return "" if value is None else f"{value:.4f}"


def generate_csv_report(result: PipelineResult, output_path: Path) -> None:
    """Convenience function to write a CSV report."""
    CSVReporter().generate_report(result, output_path)
