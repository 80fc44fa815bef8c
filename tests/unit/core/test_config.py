"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import RecallsConfig
from core.errors import RecallsConfigError


def test_from_env_reads_paths(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should resolve raw and store paths from environment."""
    monkeypatch.setenv("PLAINRECALLS_RAW_DIR", "./.tmp-raw")
    monkeypatch.setenv("PLAINRECALLS_DB_PATH", "./.tmp-store/recalls.db")

    config = RecallsConfig.from_env()

    assert config.raw_dir.name == ".tmp-raw"
    assert config.db_path.name == "recalls.db"


def test_from_env_uses_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset tuning values should fall back to defaults."""
    monkeypatch.delenv("PLAINRECALLS_BATCH_SIZE", raising=False)
    monkeypatch.delenv("PLAINRECALLS_WORKERS", raising=False)

    config = RecallsConfig.from_env()

    assert (config.batch_size, config.normalize_workers) == (5000, 4)


def test_from_env_raises_for_invalid_batch_size(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for non-numeric batch sizes."""
    monkeypatch.setenv("PLAINRECALLS_BATCH_SIZE", "lots")

    with pytest.raises(RecallsConfigError):
        RecallsConfig.from_env()


def test_from_env_raises_for_non_positive_workers(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for zero workers."""
    monkeypatch.setenv("PLAINRECALLS_WORKERS", "0")

    with pytest.raises(RecallsConfigError):
        RecallsConfig.from_env()
