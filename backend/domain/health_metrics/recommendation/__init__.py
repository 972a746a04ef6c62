"""Diet recommendation for health metrics."""

from .catalog import DEFAULT_DIET_CATALOG, DietCatalog
from .diet_service import DietRecommendationService, recommend_diet

__all__ = [
    "DEFAULT_DIET_CATALOG",
    "DietCatalog",
    "DietRecommendationService",
    "recommend_diet",
]
