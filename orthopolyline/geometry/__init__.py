"""Geometry processing for polyline orthogonalization."""

from .base_orthogonalizer import BaseOrthogonalizer
from .cleaner import PolylineCleaner
from .cluster_snap import ClusterSnapOrthogonalizer, cluster_1d, nearest_level
from .orthogonalizer_factory import OrthogonalizerFactory, orthogonalize
from .runs import RunBuilder, reconstruct_corners
from .simplifier import DouglasPeuckerSimplifier
from .simplify_fit import SimplifyFitOrthogonalizer
from .validator import OrthogonalityValidator, ValidationIssue, ValidationResult

__all__ = [
    "BaseOrthogonalizer",
    "ClusterSnapOrthogonalizer",
    "DouglasPeuckerSimplifier",
    "OrthogonalityValidator",
    "OrthogonalizerFactory",
    "PolylineCleaner",
    "RunBuilder",
    "SimplifyFitOrthogonalizer",
    "ValidationIssue",
    "ValidationResult",
    "cluster_1d",
    "nearest_level",
    "orthogonalize",
    "reconstruct_corners",
]
