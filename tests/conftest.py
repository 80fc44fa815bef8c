"""Pytest configuration shared by recall pipeline tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Make the flat ``src`` packages importable without installation."""
    src_path = Path(__file__).resolve().parent.parent / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _isolated_recalls_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host PLAINRECALLS_* variables out of test configuration."""
    for name in (
        "PLAINRECALLS_RAW_DIR",
        "PLAINRECALLS_DB_PATH",
        "PLAINRECALLS_BATCH_SIZE",
        "PLAINRECALLS_WORKERS",
    ):
        monkeypatch.delenv(name, raising=False)
