"""Health metrics domain - BMI, BMR, TDEE, projection and diet plans."""

from .calculation.metrics_engine import MetricsEngine, compute_metrics
from .projection.projection_service import WeightProjectionService, project_weight
from .recommendation.diet_service import DietRecommendationService, recommend_diet

__all__ = [
    "MetricsEngine",
    "compute_metrics",
    "WeightProjectionService",
    "project_weight",
    "DietRecommendationService",
    "recommend_diet",
]
