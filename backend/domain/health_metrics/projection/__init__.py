"""Weight projection for health metrics."""

from .projection_service import DEFAULT_PERIODS, WeightProjectionService, project_weight

__all__ = [
    "DEFAULT_PERIODS",
    "WeightProjectionService",
    "project_weight",
]
