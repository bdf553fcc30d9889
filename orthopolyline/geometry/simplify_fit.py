"""Simplify-and-fit orthogonalization."""

import logging
from typing import List, Optional

from ..core.models import OrthogonalizeSettings, Point
from .base_orthogonalizer import BaseOrthogonalizer
from .runs import RunBuilder, reconstruct_corners
from .simplifier import DouglasPeuckerSimplifier

logger = logging.getLogger(__name__)


class SimplifyFitOrthogonalizer(BaseOrthogonalizer):
    """Simplify the outline, fit H/V runs by median and intersect them.

    The more accurate of the two strategies. Its cost is dominated by the
    simplifier, which is quadratic in the worst case.
    """

    def __init__(self, settings: Optional[OrthogonalizeSettings] = None, **kwargs):
        super().__init__(settings, **kwargs)
        self.simplifier = DouglasPeuckerSimplifier(
            eps=self.settings.eps, max_depth=self.settings.max_simplify_depth
        )
        self.run_builder = RunBuilder()

    def _orthogonalize(self, points: List[Point], closed: bool) -> List[Point]:
        simplified = self.simplifier.simplify(points, closed)
        if len(simplified) < 2:
            return simplified

        runs = self.run_builder.build(simplified, closed)
        if len(runs) < 2:
            logger.debug(f"Only {len(runs)} run(s); returning simplified points")
            return simplified

        rebuilt = reconstruct_corners(runs, closed)
        # Merged wraparound runs can yield the same corner twice
        rebuilt = self.cleaner.remove_duplicates(rebuilt, closed)
        return self.cleaner.clean(rebuilt, closed)

    def get_methodology_name(self) -> str:
        return "Simplify and Fit"

    def get_methodology_code(self) -> str:
        return "simplify_fit"
