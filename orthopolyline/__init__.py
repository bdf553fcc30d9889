"""orthopolyline - Straighten noisy outlines into axis-aligned polylines."""

__version__ = "0.1.0"

# Core models
from .core.models import Orientation, OrthogonalizeSettings, Point, Run

# Orthogonalization strategies
from .geometry import (
    BaseOrthogonalizer,
    ClusterSnapOrthogonalizer,
    OrthogonalizerFactory,
    SimplifyFitOrthogonalizer,
    orthogonalize,
)

# DXF pipeline
from .core.pipeline import EntityResult, OrthogonalizationPipeline, PipelineResult

__all__ = [
    "orthogonalize",
    "OrthogonalizerFactory",
    "BaseOrthogonalizer",
    "SimplifyFitOrthogonalizer",
    "ClusterSnapOrthogonalizer",
    "OrthogonalizationPipeline",
    "PipelineResult",
    "EntityResult",
    "OrthogonalizeSettings",
    "Point",
    "Orientation",
    "Run",
]
