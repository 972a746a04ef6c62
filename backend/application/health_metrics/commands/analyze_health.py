"""AnalyzeHealthCommand - compute a report and store it as the last one."""

import logging
from dataclasses import dataclass
from datetime import date as DateType
from typing import Optional

from domain.health_metrics.core.entities.health_report import HealthReport
from domain.health_metrics.core.ports.report_repository import (
    IReportRepository,
)
from domain.health_metrics.core.value_objects.health_input import HealthInput

from ..orchestrators.health_report_orchestrator import (
    HealthAnalysis,
    HealthReportOrchestrator,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalyzeHealthCommand:
    """Command to analyze one submission.

    Attributes:
        health_input: Validated biometric input
        report_date: Date stamped on the stored report (defaults to today)
    """

    health_input: HealthInput
    report_date: Optional[DateType] = None


class AnalyzeHealthHandler:
    """Handler for AnalyzeHealthCommand.

    1. Runs the analysis via orchestrator
    2. Overwrites the stored report with the new input/result pair

    Nothing is stored when the analysis fails.
    """

    def __init__(
        self,
        orchestrator: HealthReportOrchestrator,
        repository: IReportRepository,
    ):
        self._orchestrator = orchestrator
        self._repository = repository

    async def handle(self, command: AnalyzeHealthCommand) -> HealthAnalysis:
        """
        Handle analysis command.

        Args:
            command: AnalyzeHealthCommand with the input

        Returns:
            HealthAnalysis for the input

        Raises:
            InvalidInputError: If the input violates a domain constraint
            UnknownPreferenceError: If the diet preference is unknown
        """
        analysis = self._orchestrator.analyze(command.health_input)

        report = HealthReport(
            inputs=analysis.inputs,
            results=analysis.result,
            date=(command.report_date or DateType.today()).isoformat(),
        )
        await self._repository.save(report)

        logger.info("Health report stored", extra={"report_date": report.date})

        return analysis
