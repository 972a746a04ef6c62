"""In-memory implementation of IReportRepository."""

from typing import Optional

import structlog

from domain.health_metrics.core.entities.health_report import HealthReport
from domain.health_metrics.core.ports.report_repository import (
    IReportRepository,
)
from infrastructure.persistence.serialization import (
    deserialize_report,
    serialize_report,
)

logger = structlog.get_logger(__name__)


class InMemoryReportRepository(IReportRepository):
    """
    In-memory report slot.

    Keeps the serialized record rather than the object, so loads go
    through the same parsing path as the file backend. Data is lost
    when the process stops.
    """

    def __init__(self) -> None:
        """Initialize empty slot."""
        self._payload: Optional[str] = None

    async def save(self, report: HealthReport) -> None:
        """
        Store report, replacing the previous one.

        Args:
            report: Report to store
        """
        self._payload = serialize_report(report)
        logger.debug("Report saved", backend="inmemory", date=report.date)

    async def load(self) -> Optional[HealthReport]:
        """
        Read stored report.

        Returns:
            Stored report, None if nothing was saved
        """
        if self._payload is None:
            return None
        return deserialize_report(self._payload)

    async def clear(self) -> None:
        """Empty the slot."""
        self._payload = None

    def is_empty(self) -> bool:
        """
        Check whether a report is stored.

        Returns:
            True if nothing was saved since creation or last clear
        """
        return self._payload is None
