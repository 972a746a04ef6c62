"""Domain exceptions for health metrics."""


class HealthMetricsError(Exception):
    """Base exception for health metrics domain errors."""

    pass


class InvalidInputError(HealthMetricsError):
    """Raised when a biometric input violates a domain constraint.

    Attributes:
        field: Name of the offending input field
        reason: Human-readable explanation
    """

    def __init__(self, field: str, reason: str):
        super().__init__(f"Invalid {field}: {reason}")
        self.field = field
        self.reason = reason


class UnknownPreferenceError(HealthMetricsError):
    """Raised when a diet preference is not in the catalog."""

    def __init__(self, preference: object):
        super().__init__(f"Unknown diet preference: {preference!r}")
        self.preference = preference


class MalformedPersistedStateError(HealthMetricsError):
    """Raised when a stored report cannot be parsed back into domain values."""

    def __init__(self, reason: str):
        super().__init__(f"Malformed persisted report: {reason}")
        self.reason = reason
