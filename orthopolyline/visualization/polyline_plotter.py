"""Before/after plotting of orthogonalized polylines."""

from pathlib import Path
from typing import List, Optional, Tuple

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from ..core.models import Point
from ..core.pipeline import EntityResult, PipelineResult


class PolylinePlotter:
    """Plotter comparing original and orthogonalized outlines."""

    def __init__(self, figsize: Tuple[float, float] = (11.69, 8.27)):
        """Initialize plotter.

        Args:
            figsize: Figure size in inches (width, height)
                     Default is A4 landscape (11.69" x 8.27")
        """
        self.figsize = figsize
        self.colors = {
            "original": "#2E86AB",  # Blue
            "orthogonal": "#C73E1D",  # Red
            "skipped": "#999999",  # Gray
            "annotations": "#333333",  # Dark gray
        }

    def create_figure(self) -> Tuple[Figure, Axes]:
        """Create matplotlib figure and axes."""
        fig, ax = plt.subplots(figsize=self.figsize)
        ax.set_aspect("equal")
        ax.grid(True, alpha=0.3)
        ax.set_xlabel("X", fontsize=12)
        ax.set_ylabel("Y", fontsize=12)
        return fig, ax

    def plot_polyline(
        self,
        ax: Axes,
        points: List[Point],
        closed: bool,
        color: str = "blue",
        linestyle: str = "-",
        linewidth: float = 2.0,
        label: Optional[str] = None,
        alpha: float = 1.0,
        marker: Optional[str] = None,
    ) -> None:
        """Plot a polyline, drawing the closing edge when closed."""
        if len(points) < 2:
            return

        x_coords = [p.x for p in points]
        y_coords = [p.y for p in points]
        if closed:
            x_coords.append(points[0].x)
            y_coords.append(points[0].y)

        ax.plot(
            x_coords,
            y_coords,
            color=color,
            linestyle=linestyle,
            linewidth=linewidth,
            label=label,
            alpha=alpha,
            marker=marker,
        )

    def plot_comparison(self, ax: Axes, entity: EntityResult, show_labels: bool = True) -> None:
        """Plot one entity's original outline and, if processed, its result."""
        self.plot_polyline(
            ax,
            entity.original_points,
            entity.closed,
            color=self.colors["original"] if entity.processed else self.colors["skipped"],
            linewidth=1.0,
            alpha=0.7,
            label="Original" if show_labels else None,
        )

        if entity.processed:
            self.plot_polyline(
                ax,
                entity.output_points,
                entity.closed,
                color=self.colors["orthogonal"],
                linewidth=2.5,
                marker="o",
                label="Orthogonalized" if show_labels else None,
            )

    def plot_result(self, result: PipelineResult, title: Optional[str] = None) -> Figure:
        """Plot every entity of a pipeline result on one figure."""
        fig, ax = self.create_figure()

        for i, entity in enumerate(result.entities):
            self.plot_comparison(ax, entity, show_labels=i == 0)

        ax.set_title(
            title or f"{result.strategy}: {result.processed_count} polylines processed",
            fontsize=14,
            color=self.colors["annotations"],
        )
        if result.entities:
            ax.legend(loc="best")
        return fig


def plot_pipeline_result(
    result: PipelineResult, output_path: Path, title: Optional[str] = None
) -> Path:
    """Convenience function: plot a pipeline result to an image file.

    Args:
        result: Pipeline result
        output_path: Image path (format from suffix)
        title: Optional figure title

    Returns:
        Path of the written image
    """
    plotter = PolylinePlotter()
    fig = plotter.plot_result(result, title)
    try:
        fig.savefig(output_path, dpi=150, bbox_inches="tight")
    finally:
        plt.close(fig)
    return Path(output_path)
