"""Factory for creating report repository instances."""

from typing import Optional

import structlog

from domain.health_metrics.core.ports.report_repository import (
    IReportRepository,
)
from infrastructure.config import (
    get_report_repository_backend,
    get_report_storage_path,
    load_environment,
)
from infrastructure.persistence.in_memory.report_repository import (
    InMemoryReportRepository,
)
from infrastructure.persistence.json_file.report_repository import (
    JsonFileReportRepository,
)

logger = structlog.get_logger(__name__)

# Singleton instance
_report_repository: Optional[IReportRepository] = None


def create_report_repository() -> IReportRepository:
    """
    Create report repository based on REPORT_REPOSITORY configuration.

    Environment Variables:
        REPORT_REPOSITORY: 'inmemory' (default) or 'file'
        REPORT_STORAGE_PATH: JSON file path (used when type='file')

    Returns:
        IReportRepository implementation

    Default:
        Returns InMemoryReportRepository if REPORT_REPOSITORY not set
    """
    load_environment()
    repo_type = get_report_repository_backend()

    if repo_type == "inmemory":
        return InMemoryReportRepository()

    elif repo_type == "file":
        return JsonFileReportRepository(get_report_storage_path())

    else:
        # Unknown type - graceful fallback to inmemory
        logger.warning("Unknown REPORT_REPOSITORY, using inmemory", backend=repo_type)
        return InMemoryReportRepository()


def get_report_repository() -> IReportRepository:
    """
    Get singleton report repository instance.

    Lazy initialization on first call.

    Returns:
        IReportRepository singleton
    """
    global _report_repository
    if _report_repository is None:
        _report_repository = create_report_repository()
    return _report_repository


def reset_report_repository() -> None:
    """
    Reset singleton instance.

    Useful for testing to ensure clean state.
    """
    global _report_repository
    _report_repository = None
