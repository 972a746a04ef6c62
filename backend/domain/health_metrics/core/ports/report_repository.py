"""IReportRepository port - storage slot for the last report."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.health_report import HealthReport


class IReportRepository(ABC):
    """Port for last-report persistence.

    A single slot: save() overwrites, load() returns whatever was
    written last. Infrastructure adapters implement this interface.
    """

    @abstractmethod
    async def save(self, report: HealthReport) -> None:
        """Store report, replacing any previous one.

        Args:
            report: Report to store
        """
        pass

    @abstractmethod
    async def load(self) -> Optional[HealthReport]:
        """Read the stored report.

        Returns:
            Optional[HealthReport]: Stored report, None if the slot is empty

        Raises:
            MalformedPersistedStateError: If stored data cannot be parsed
        """
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Empty the slot."""
        pass
