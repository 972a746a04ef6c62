"""RestoreLastReportQuery - reload the previous session's report."""

import logging
from dataclasses import dataclass
from typing import Optional

from domain.health_metrics.core.ports.report_repository import (
    IReportRepository,
)

from ..orchestrators.health_report_orchestrator import (
    HealthAnalysis,
    HealthReportOrchestrator,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RestoreLastReportQuery:
    """Query for the last stored report. Carries no parameters."""


class RestoreLastReportHandler:
    """Handler for RestoreLastReportQuery.

    An empty slot is a normal first-run state and yields None.
    Malformed stored data is not swallowed.
    """

    def __init__(
        self,
        orchestrator: HealthReportOrchestrator,
        repository: IReportRepository,
    ):
        self._orchestrator = orchestrator
        self._repository = repository

    async def handle(self, query: RestoreLastReportQuery) -> Optional[HealthAnalysis]:
        """
        Handle restore query.

        Args:
            query: RestoreLastReportQuery

        Returns:
            Optional[HealthAnalysis]: Rebuilt analysis, None if nothing stored

        Raises:
            MalformedPersistedStateError: If the stored report is unreadable
        """
        report = await self._repository.load()
        if report is None:
            logger.debug("No stored health report to restore")
            return None

        logger.info("Restoring health report", extra={"report_date": report.date})
        return self._orchestrator.rebuild(report)
