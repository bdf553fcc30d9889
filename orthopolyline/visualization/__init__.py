"""Visualization of orthogonalization results."""

from .polyline_plotter import PolylinePlotter, plot_pipeline_result

__all__ = [
    "PolylinePlotter",
    "plot_pipeline_result",
]
