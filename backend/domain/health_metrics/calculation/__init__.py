"""Calculation services for health metrics."""

from .bmi_service import BMIService
from .bmr_service import BMRService
from .metrics_engine import MetricsEngine, compute_metrics
from .tdee_service import TDEEService

__all__ = [
    "BMIService",
    "BMRService",
    "TDEEService",
    "MetricsEngine",
    "compute_metrics",
]
