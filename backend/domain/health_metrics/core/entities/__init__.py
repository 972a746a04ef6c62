"""Entities for health metrics domain."""

from .health_report import HealthReport

__all__ = [
    "HealthReport",
]
