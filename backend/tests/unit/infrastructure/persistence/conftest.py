"""Shared fixtures for report persistence tests."""

import pytest

from domain.health_metrics.calculation.metrics_engine import compute_metrics
from domain.health_metrics.core.entities import HealthReport
from domain.health_metrics.core.value_objects import HealthInput


@pytest.fixture
def sample_report() -> HealthReport:
    """Report with non-trivial floats to exercise precision."""
    health_input = HealthInput(
        age=37,
        gender="female",
        height_cm=167.3,
        weight_kg=61.7,
        activity_factor=1.375,
        goal="gain",
        diet_preference="non-veg",
    )
    return HealthReport(
        inputs=health_input,
        results=compute_metrics(health_input),
        date="2026-10-19",
    )
