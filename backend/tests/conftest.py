"""Shared test configuration.

Loads .env.test when present and isolates configuration environment
variables so a developer's .env cannot change test behaviour.
"""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest
from dotenv import load_dotenv

env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)

CONFIG_VARS = ("REPORT_REPOSITORY", "REPORT_STORAGE_PATH", "PROJECTION_PERIODS")


@pytest.fixture(autouse=True)
def _clear_config_env(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Generator[None, None, None]:
    """Remove REPORT_* and PROJECTION_* variables before each test.

    The file backend is pointed at a temporary directory so no test can
    write to the home directory. Tests needing a value set it with
    monkeypatch.setenv.
    """
    for name in CONFIG_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    yield
