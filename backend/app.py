"""Composition root for the health metrics application.

Wires domain services, the report repository and the application
handlers into a single context consumed by the presentation layer.
"""

from __future__ import annotations

import logging as _logging
from dataclasses import dataclass
from typing import Optional

from application.health_metrics.commands.analyze_health import AnalyzeHealthHandler
from application.health_metrics.orchestrators.health_report_orchestrator import (
    HealthReportOrchestrator,
)
from application.health_metrics.presenters.report_presenter import ReportPresenter
from application.health_metrics.queries.restore_last_report import (
    RestoreLastReportHandler,
)
from domain.health_metrics.calculation.metrics_engine import MetricsEngine
from domain.health_metrics.core.ports.report_repository import IReportRepository
from domain.health_metrics.projection.projection_service import (
    WeightProjectionService,
)
from domain.health_metrics.recommendation.diet_service import (
    DietRecommendationService,
)
from infrastructure.config import get_projection_periods, load_environment
from infrastructure.persistence.report_repository_factory import (
    get_report_repository,
)

_logger = _logging.getLogger("app")


@dataclass(frozen=True)
class HealthMetricsContext:
    """All dependencies the presentation layer needs.

    Attributes:
        orchestrator: Runs engine, projection and diet recommendation
        analyze_handler: Analyzes a submission and stores the report
        restore_handler: Restores the last stored report
        presenter: Builds display-ready values
        repository: Report slot
    """

    orchestrator: HealthReportOrchestrator
    analyze_handler: AnalyzeHealthHandler
    restore_handler: RestoreLastReportHandler
    presenter: ReportPresenter
    repository: IReportRepository


def create_context(repository: Optional[IReportRepository] = None) -> HealthMetricsContext:
    """Create context with all dependencies.

    Args:
        repository: Report slot override (defaults to configured singleton)

    Returns:
        HealthMetricsContext ready for use
    """
    load_environment()
    repository = repository or get_report_repository()

    orchestrator = HealthReportOrchestrator(
        engine=MetricsEngine(),
        projection_service=WeightProjectionService(),
        diet_service=DietRecommendationService(),
        projection_periods=get_projection_periods(),
    )

    _logger.debug("Health metrics context created", extra={"repository": type(repository).__name__})

    return HealthMetricsContext(
        orchestrator=orchestrator,
        analyze_handler=AnalyzeHealthHandler(orchestrator=orchestrator, repository=repository),
        restore_handler=RestoreLastReportHandler(orchestrator=orchestrator, repository=repository),
        presenter=ReportPresenter(),
        repository=repository,
    )
