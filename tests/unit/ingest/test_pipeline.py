"""Unit tests for recall build orchestration."""

from __future__ import annotations

from contextlib import closing
from dataclasses import replace
from pathlib import Path
import sqlite3

import pytest

from core.config import RecallsConfig
from core.errors import RecallsIngestError
from core.types import BuildOptions, SourceSpec
from ingest.pipeline import build_recall_store
from tests.fixture_paths import fixture_path


def _config(tmp_path: Path) -> RecallsConfig:
    return replace(
        RecallsConfig.from_env(),
        raw_dir=fixture_path("raw"),
        db_path=tmp_path / "recalls.db",
        batch_size=2,
    )


def _query(db_path: Path, sql: str) -> list[tuple[object, ...]]:
    with closing(sqlite3.connect(db_path)) as connection:
        return connection.execute(sql).fetchall()


def test_build_recall_store_drops_duplicate_recall_numbers(tmp_path: Path) -> None:
    """Two listings with one recall number should keep the first."""
    result = build_recall_store(BuildOptions(), _config(tmp_path))

    rows = _query(
        result.db_path,
        "SELECT title FROM recalls WHERE recall_id = 'fda_food-F-0001-2023'",
    )

    assert rows == [("Peanut butter cookies, 12 oz boxes",)]


def test_build_recall_store_skips_missing_sources(tmp_path: Path) -> None:
    """A missing source file should not abort the build."""
    result = build_recall_store(BuildOptions(), _config(tmp_path))

    assert result.agency_counts.get("fda_device", 0) == 0
    assert result.recall_count == 9


def test_build_recall_store_honors_source_order_override(tmp_path: Path) -> None:
    """Only the listed sources should be loaded."""
    sources = (SourceSpec(agency="usda", file_name="usda.json", shape="fsis"),)

    result = build_recall_store(BuildOptions(sources=sources), _config(tmp_path))

    assert result.recall_count == 1
    assert dict(result.category_counts) == {"meat-poultry": 1}


def test_build_recall_store_is_deterministic_across_runs(tmp_path: Path) -> None:
    """Rebuilding identical input should yield identical ids and slugs."""
    config = _config(tmp_path)

    build_recall_store(BuildOptions(), config)
    first = _query(config.db_path, "SELECT recall_id, slug FROM recalls ORDER BY 1")
    build_recall_store(BuildOptions(), config)
    second = _query(config.db_path, "SELECT recall_id, slug FROM recalls ORDER BY 1")

    assert first == second


def test_build_recall_store_raises_for_missing_raw_dir(tmp_path: Path) -> None:
    """A missing raw directory should fail before touching the store."""
    config = replace(_config(tmp_path), raw_dir=tmp_path / "missing")

    with pytest.raises(RecallsIngestError):
        build_recall_store(BuildOptions(), config)

    assert not config.db_path.exists()
