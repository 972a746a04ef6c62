"""Unit tests for report repository implementations.

Tests focus on:
- Empty slot on first run
- Save/load round trip
- Last-write-wins overwrite
- Clear
- Malformed file content (JSON file backend)
"""

import json

import pytest

from domain.health_metrics.core.entities import HealthReport
from domain.health_metrics.core.exceptions.domain_errors import (
    MalformedPersistedStateError,
)
from domain.health_metrics.core.ports.report_repository import IReportRepository
from infrastructure.persistence.in_memory.report_repository import (
    InMemoryReportRepository,
)
from infrastructure.persistence.json_file.report_repository import (
    JsonFileReportRepository,
)


@pytest.fixture(params=["inmemory", "file"])
def repository(request, tmp_path) -> IReportRepository:
    """Each backend, starting empty."""
    if request.param == "inmemory":
        return InMemoryReportRepository()
    return JsonFileReportRepository(tmp_path / "slot" / "lastHealthReport.json")


class TestReportRepositoryContract:
    """Behaviour shared by every backend."""

    @pytest.mark.asyncio
    async def test_empty_slot(self, repository):
        """Test load before any save."""
        assert await repository.load() is None

    @pytest.mark.asyncio
    async def test_save_and_load(self, repository, sample_report):
        """Test stored report reads back equal."""
        await repository.save(sample_report)

        assert await repository.load() == sample_report

    @pytest.mark.asyncio
    async def test_last_write_wins(self, repository, sample_report):
        """Test second save replaces the first."""
        newer = HealthReport(
            inputs=sample_report.inputs,
            results=sample_report.results,
            date="2026-10-20",
        )

        await repository.save(sample_report)
        await repository.save(newer)

        loaded = await repository.load()
        assert loaded.date == "2026-10-20"

    @pytest.mark.asyncio
    async def test_clear(self, repository, sample_report):
        """Test clear empties the slot."""
        await repository.save(sample_report)
        await repository.clear()

        assert await repository.load() is None

    @pytest.mark.asyncio
    async def test_clear_empty_slot(self, repository):
        """Test clearing an empty slot is a no-op."""
        await repository.clear()

        assert await repository.load() is None


class TestInMemoryReportRepository:
    """In-memory specifics."""

    @pytest.mark.asyncio
    async def test_is_empty(self, sample_report):
        """Test emptiness flag."""
        repository = InMemoryReportRepository()
        assert repository.is_empty()

        await repository.save(sample_report)

        assert not repository.is_empty()


class TestJsonFileReportRepository:
    """JSON file specifics."""

    @pytest.mark.asyncio
    async def test_writes_json_record(self, tmp_path, sample_report):
        """Test file content is the JSON record."""
        path = tmp_path / "lastHealthReport.json"
        repository = JsonFileReportRepository(path)

        await repository.save(sample_report)

        record = json.loads(path.read_text(encoding="utf-8"))
        assert record["date"] == "2026-10-19"
        assert not path.with_name(path.name + ".tmp").exists()

    @pytest.mark.asyncio
    async def test_creates_parent_directories(self, tmp_path, sample_report):
        """Test missing directories are created on save."""
        path = tmp_path / "a" / "b" / "report.json"

        await JsonFileReportRepository(path).save(sample_report)

        assert path.exists()

    @pytest.mark.asyncio
    async def test_malformed_file(self, tmp_path):
        """Test corrupted file raises instead of returning None."""
        path = tmp_path / "lastHealthReport.json"
        path.write_text("{broken", encoding="utf-8")

        with pytest.raises(MalformedPersistedStateError):
            await JsonFileReportRepository(path).load()

    @pytest.mark.asyncio
    async def test_undecodable_file(self, tmp_path):
        """Test bytes that are not UTF-8 raise MalformedPersistedStateError."""
        path = tmp_path / "lastHealthReport.json"
        path.write_bytes(b"\xff\xfe garbage")

        with pytest.raises(MalformedPersistedStateError):
            await JsonFileReportRepository(path).load()

    @pytest.mark.asyncio
    async def test_survives_new_instance(self, tmp_path, sample_report):
        """Test a fresh repository on the same path sees the report."""
        path = tmp_path / "lastHealthReport.json"
        await JsonFileReportRepository(path).save(sample_report)

        assert await JsonFileReportRepository(path).load() == sample_report
