"""JSON file persistence implementations."""

from infrastructure.persistence.json_file.report_repository import (
    JsonFileReportRepository,
)

__all__ = [
    "JsonFileReportRepository",
]
