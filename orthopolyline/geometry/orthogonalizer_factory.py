"""Factory for creating orthogonalizers based on strategy selection."""

from typing import Dict, Iterable, List, Optional, Type

from ..config import DEFAULT_STRATEGY
from ..core.models import OrthogonalizeSettings, Point, PointLike
from .base_orthogonalizer import BaseOrthogonalizer
from .cluster_snap import ClusterSnapOrthogonalizer
from .simplify_fit import SimplifyFitOrthogonalizer

# Registry of available orthogonalization strategies
ORTHOGONALIZER_REGISTRY: Dict[str, Type[BaseOrthogonalizer]] = {
    "simplify_fit": SimplifyFitOrthogonalizer,
    "cluster_snap": ClusterSnapOrthogonalizer,
}


class OrthogonalizerFactory:
    """Factory for creating orthogonalizers."""

    @staticmethod
    def create(
        strategy: str = DEFAULT_STRATEGY,
        settings: Optional[OrthogonalizeSettings] = None,
        **kwargs,
    ) -> BaseOrthogonalizer:
        """Create an orthogonalizer instance.

        Args:
            strategy: Strategy code (e.g., "simplify_fit")
            settings: Tuning parameters
            **kwargs: Individual setting overrides

        Returns:
            Orthogonalizer instance

        Raises:
            ValueError: If strategy is not recognized
        """
        if strategy not in ORTHOGONALIZER_REGISTRY:
            available = ", ".join(ORTHOGONALIZER_REGISTRY.keys())
            raise ValueError(
                f"Unknown orthogonalization strategy: {strategy}. "
                f"Available options: {available}"
            )

        return ORTHOGONALIZER_REGISTRY[strategy](settings, **kwargs)

    @staticmethod
    def get_available_strategies() -> List[str]:
        """Get list of available strategy codes."""
        return list(ORTHOGONALIZER_REGISTRY.keys())

    @staticmethod
    def get_strategy_info(strategy: str) -> Dict[str, str]:
        """Get information about a specific strategy.

        Raises:
            ValueError: If strategy is not recognized
        """
        if strategy not in ORTHOGONALIZER_REGISTRY:
            raise ValueError(f"Unknown strategy: {strategy}")

        strategy_class = ORTHOGONALIZER_REGISTRY[strategy]
        temp_instance = strategy_class()

        return {
            "code": temp_instance.get_methodology_code(),
            "name": temp_instance.get_methodology_name(),
            "class": strategy_class.__name__,
        }

    @staticmethod
    def register(code: str, strategy_class: Type[BaseOrthogonalizer]) -> None:
        """Register a new orthogonalization strategy."""
        ORTHOGONALIZER_REGISTRY[code] = strategy_class


def orthogonalize(
    points: Optional[Iterable[PointLike]],
    closed: bool,
    strategy: str = DEFAULT_STRATEGY,
    **settings,
) -> List[Point]:
    """Convenience function: orthogonalize one polyline.

    Args:
        points: Input vertices
        closed: Whether the polyline is closed
        strategy: Strategy code
        **settings: min_step, eps, cluster_tol, min_edge_length,
            max_simplify_depth

    Returns:
        Orthogonalized points
    """
    return OrthogonalizerFactory.create(strategy, **settings).orthogonalize(
        points, closed
    )
