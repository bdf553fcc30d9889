"""Base interface for orthogonalization strategies."""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from ..core.models import OrthogonalizeSettings, Point, PointLike
from .cleaner import PolylineCleaner
from .primitives import to_points

logger = logging.getLogger(__name__)


class BaseOrthogonalizer(ABC):
    """Abstract base class for orthogonalization strategies.

    Subclasses implement the strategy-specific middle of the pipeline; the
    de-duplication filter and the shared cleanup live here.
    """

    def __init__(self, settings: Optional[OrthogonalizeSettings] = None, **kwargs):
        """Initialize strategy.

        Args:
            settings: Tuning parameters (library defaults if None)
            **kwargs: Individual overrides applied on top of settings
        """
        if settings is None:
            settings = OrthogonalizeSettings.from_defaults(**kwargs)
        elif kwargs:
            settings = OrthogonalizeSettings.from_defaults(settings.to_dict(), **kwargs)
        self.settings = settings
        self.cleaner = PolylineCleaner(
            min_step=settings.min_step,
            min_edge_length=settings.min_edge_length,
        )
        self.name = self.__class__.__name__

    def orthogonalize(
        self, points: Optional[Iterable[PointLike]], closed: bool
    ) -> List[Point]:
        """Turn a noisy outline into one with only horizontal and vertical edges.

        Args:
            points: Input vertices; never modified
            closed: Whether an implicit edge joins the last point to the first

        Returns:
            New list of points. Fewer than 2 points means the outline could
            not be rebuilt.
        """
        pts = to_points(points)
        if len(pts) < 2:
            return pts

        filtered = self.cleaner.filter_min_step(pts, closed)
        result = self._orthogonalize(filtered, closed)
        logger.debug(
            f"{self.get_methodology_code()}: {len(pts)} -> {len(filtered)} "
            f"-> {len(result)} points (closed={closed})"
        )
        return result

    @abstractmethod
    def _orthogonalize(self, points: List[Point], closed: bool) -> List[Point]:
        """Strategy body, called with de-duplicated points."""
        pass

    @abstractmethod
    def get_methodology_name(self) -> str:
        """Get human-readable name of the strategy."""
        pass

    @abstractmethod
    def get_methodology_code(self) -> str:
        """Get code identifier for the strategy (e.g., 'simplify_fit')."""
        pass
