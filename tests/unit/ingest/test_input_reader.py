"""Unit tests for raw source file reading."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import RecallsIngestError
from core.types import SourceSpec
from ingest.input_reader import ensure_raw_dir, read_source_records
from tests.fixture_paths import fixture_path

_CPSC = SourceSpec(agency="cpsc", file_name="cpsc.json", shape="cpsc")


def test_read_source_records_loads_json_array() -> None:
    """Reader should return every array element."""
    records = read_source_records(fixture_path("raw"), _CPSC)

    assert len(records) == 3


def test_read_source_records_treats_missing_file_as_empty(tmp_path: Path) -> None:
    """A missing source file should contribute zero records."""
    assert read_source_records(tmp_path, _CPSC) == []


def test_read_source_records_skips_invalid_json(tmp_path: Path) -> None:
    """Unparseable source files should contribute zero records."""
    (tmp_path / "cpsc.json").write_text("[{broken", encoding="utf-8")

    assert read_source_records(tmp_path, _CPSC) == []


def test_read_source_records_skips_non_array_payload(tmp_path: Path) -> None:
    """Sources must be JSON arrays."""
    (tmp_path / "cpsc.json").write_text('{"results": []}', encoding="utf-8")

    assert read_source_records(tmp_path, _CPSC) == []


def test_ensure_raw_dir_raises_for_missing_directory(tmp_path: Path) -> None:
    """A missing raw directory is a configuration mistake."""
    with pytest.raises(RecallsIngestError):
        ensure_raw_dir(tmp_path / "does-not-exist")
