"""Factories for health metrics domain."""

from .health_input_factory import HealthInputFactory

__all__ = [
    "HealthInputFactory",
]
