"""Domain exceptions for health metrics."""

from .domain_errors import (
    HealthMetricsError,
    InvalidInputError,
    MalformedPersistedStateError,
    UnknownPreferenceError,
)

__all__ = [
    "HealthMetricsError",
    "InvalidInputError",
    "UnknownPreferenceError",
    "MalformedPersistedStateError",
]
