"""Configuration utilities for infrastructure layer."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from domain.health_metrics.projection.projection_service import DEFAULT_PERIODS

REPORT_SLOT_NAME = "lastHealthReport"

_env_loaded = False


def load_environment(env_file: Optional[Path] = None) -> None:
    """
    Load .env into the process environment once.

    Values already present in the environment win over the file.

    Args:
        env_file: Explicit .env path (defaults to python-dotenv lookup)
    """
    global _env_loaded
    if _env_loaded:
        return
    if env_file is not None:
        load_dotenv(env_file)
    else:
        load_dotenv()
    _env_loaded = True


def get_report_repository_backend() -> str:
    """
    Get report repository backend name.

    Returns:
        "inmemory" or "file" from REPORT_REPOSITORY, defaults to "inmemory"
    """
    return os.getenv("REPORT_REPOSITORY", "inmemory").strip().lower()


def get_report_storage_path() -> Path:
    """
    Get JSON file path for the file-backed report slot.

    Example .env:
        REPORT_REPOSITORY=file
        REPORT_STORAGE_PATH=~/.happyme/lastHealthReport.json

    Returns:
        Expanded path from REPORT_STORAGE_PATH, defaults to
        ~/.happyme/lastHealthReport.json
    """
    raw = os.getenv("REPORT_STORAGE_PATH")
    if not raw:
        return Path.home() / ".happyme" / f"{REPORT_SLOT_NAME}.json"
    return Path(os.path.expandvars(raw)).expanduser()


def get_projection_periods() -> int:
    """
    Get number of weight projection periods.

    Returns:
        PROJECTION_PERIODS as int, defaults to 4

    Raises:
        ValueError: If PROJECTION_PERIODS is not a positive integer
    """
    raw = os.getenv("PROJECTION_PERIODS")
    if not raw:
        return DEFAULT_PERIODS
    try:
        periods = int(raw)
    except ValueError as e:
        raise ValueError(f"PROJECTION_PERIODS must be an integer, got {raw!r}") from e
    if periods < 1:
        raise ValueError(f"PROJECTION_PERIODS must be positive, got {periods}")
    return periods
