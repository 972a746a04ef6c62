"""Unit tests for report_repository_factory.

Tests focus on:
- Repository creation with different env vars
- Singleton behavior
- Reset functionality for testing
"""

import pytest

from infrastructure.persistence.in_memory.report_repository import (
    InMemoryReportRepository,
)
from infrastructure.persistence.json_file.report_repository import (
    JsonFileReportRepository,
)
from infrastructure.persistence.report_repository_factory import (
    create_report_repository,
    get_report_repository,
    reset_report_repository,
)


@pytest.fixture(autouse=True)
def _reset_singleton():
    reset_report_repository()
    yield
    reset_report_repository()


class TestCreateReportRepository:
    """Test create_report_repository factory function."""

    def test_create_inmemory_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default creates InMemoryReportRepository."""
        monkeypatch.delenv("REPORT_REPOSITORY", raising=False)

        assert isinstance(create_report_repository(), InMemoryReportRepository)

    def test_create_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        """Test file backend uses REPORT_STORAGE_PATH."""
        monkeypatch.setenv("REPORT_REPOSITORY", "file")
        monkeypatch.setenv("REPORT_STORAGE_PATH", str(tmp_path / "report.json"))

        repository = create_report_repository()

        assert isinstance(repository, JsonFileReportRepository)
        assert repository.path == tmp_path / "report.json"

    def test_case_insensitive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test env var is case insensitive."""
        monkeypatch.setenv("REPORT_REPOSITORY", "INMEMORY")

        assert isinstance(create_report_repository(), InMemoryReportRepository)

    def test_unknown_falls_back_to_inmemory(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test unknown backend falls back to in-memory."""
        monkeypatch.setenv("REPORT_REPOSITORY", "mongodb")

        assert isinstance(create_report_repository(), InMemoryReportRepository)


class TestGetReportRepository:
    """Test singleton accessor."""

    def test_singleton(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the same instance is returned."""
        monkeypatch.delenv("REPORT_REPOSITORY", raising=False)

        assert get_report_repository() is get_report_repository()

    def test_reset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test reset creates a new instance."""
        monkeypatch.delenv("REPORT_REPOSITORY", raising=False)
        first = get_report_repository()

        reset_report_repository()

        assert get_report_repository() is not first
