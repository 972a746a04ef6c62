"""Shared fixtures for health metrics application tests."""

import pytest

from application.health_metrics.orchestrators.health_report_orchestrator import (
    HealthReportOrchestrator,
)
from domain.health_metrics.calculation.metrics_engine import MetricsEngine
from domain.health_metrics.core.value_objects import HealthInput
from domain.health_metrics.projection.projection_service import (
    WeightProjectionService,
)
from domain.health_metrics.recommendation.diet_service import (
    DietRecommendationService,
)
from infrastructure.persistence.in_memory.report_repository import (
    InMemoryReportRepository,
)


@pytest.fixture
def orchestrator() -> HealthReportOrchestrator:
    """Orchestrator with real domain services."""
    return HealthReportOrchestrator(
        engine=MetricsEngine(),
        projection_service=WeightProjectionService(),
        diet_service=DietRecommendationService(),
    )


@pytest.fixture
def repository() -> InMemoryReportRepository:
    """Empty in-memory report slot."""
    return InMemoryReportRepository()


@pytest.fixture
def sample_input() -> HealthInput:
    """30y male, 180 cm, 80 kg, moderate activity, losing weight, vegan."""
    return HealthInput(
        age=30,
        gender="male",
        height_cm=180.0,
        weight_kg=80.0,
        activity_factor=1.55,
        goal="lose",
        diet_preference="vegan",
    )
