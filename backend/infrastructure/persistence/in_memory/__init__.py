"""In-memory persistence implementations."""

from infrastructure.persistence.in_memory.report_repository import (
    InMemoryReportRepository,
)

__all__ = [
    "InMemoryReportRepository",
]
