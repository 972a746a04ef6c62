"""JSON-file implementation of IReportRepository."""

import os
from pathlib import Path
from typing import Optional

import structlog

from domain.health_metrics.core.entities.health_report import HealthReport
from domain.health_metrics.core.exceptions.domain_errors import (
    MalformedPersistedStateError,
)
from domain.health_metrics.core.ports.report_repository import (
    IReportRepository,
)
from infrastructure.persistence.serialization import (
    deserialize_report,
    serialize_report,
)

logger = structlog.get_logger(__name__)


class JsonFileReportRepository(IReportRepository):
    """
    Report slot backed by a single JSON file.

    Each save replaces the file, so only the last report survives.
    A missing file means no report has been stored yet.
    """

    def __init__(self, path: Path) -> None:
        """
        Initialize repository.

        Args:
            path: JSON file holding the slot (parent dirs created on save)
        """
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    async def save(self, report: HealthReport) -> None:
        """
        Write report to the file, replacing previous content.

        Args:
            report: Report to store
        """
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        tmp_path.write_text(serialize_report(report), encoding="utf-8")
        os.replace(tmp_path, self._path)
        logger.debug("Report saved", path=str(self._path), date=report.date)

    async def load(self) -> Optional[HealthReport]:
        """
        Read report from the file.

        Returns:
            Stored report, None if the file does not exist

        Raises:
            MalformedPersistedStateError: If file content is not a valid record
        """
        if not self._path.exists():
            logger.debug("Report slot empty", path=str(self._path))
            return None

        payload = self._path.read_bytes()
        try:
            report = deserialize_report(payload)
        except MalformedPersistedStateError:
            logger.warning("Stored report is malformed", path=str(self._path))
            raise

        logger.debug("Report loaded", path=str(self._path), date=report.date)
        return report

    async def clear(self) -> None:
        """Delete the file if present."""
        self._path.unlink(missing_ok=True)
