"""Unit tests for YAML source manifest parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import RecallsSourceManifestError
from core.source_manifest import load_source_manifest
from core.types import SourceSpec
from tests.fixture_paths import fixture_path


def test_load_source_manifest_reads_ordered_sources() -> None:
    """Manifest sources should load in file order."""
    sources = load_source_manifest(str(fixture_path("sources.yaml")))

    assert sources == (
        SourceSpec(agency="nhtsa", file_name="nhtsa.json", shape="nhtsa"),
        SourceSpec(agency="usda", file_name="usda.json", shape="fsis"),
    )


def test_load_source_manifest_rejects_unknown_shape(tmp_path: Path) -> None:
    """Unsupported shapes should fail validation."""
    manifest = tmp_path / "sources.yaml"
    manifest.write_text(
        "version: 1\nsources:\n  - agency: cpsc\n    file: cpsc.json\n    shape: xml\n",
        encoding="utf-8",
    )

    with pytest.raises(RecallsSourceManifestError):
        load_source_manifest(str(manifest))


def test_load_source_manifest_rejects_unknown_agency(tmp_path: Path) -> None:
    """Agencies outside the fixed taxonomy should fail validation."""
    manifest = tmp_path / "sources.yaml"
    manifest.write_text(
        "version: 1\nsources:\n  - agency: faa\n    file: faa.json\n    shape: fda\n",
        encoding="utf-8",
    )

    with pytest.raises(RecallsSourceManifestError):
        load_source_manifest(str(manifest))


def test_load_source_manifest_rejects_duplicate_files(tmp_path: Path) -> None:
    """A raw file may be listed only once."""
    row = "  - agency: cpsc\n    file: cpsc.json\n    shape: cpsc\n"
    manifest = tmp_path / "sources.yaml"
    manifest.write_text(f"version: 1\nsources:\n{row}{row}", encoding="utf-8")

    with pytest.raises(RecallsSourceManifestError):
        load_source_manifest(str(manifest))


def test_load_source_manifest_rejects_missing_file(tmp_path: Path) -> None:
    """Missing manifest files should fail clearly."""
    with pytest.raises(RecallsSourceManifestError):
        load_source_manifest(str(tmp_path / "missing.yaml"))


def test_load_source_manifest_rejects_wrong_version(tmp_path: Path) -> None:
    """Only version 1 manifests are supported."""
    manifest = tmp_path / "sources.yaml"
    manifest.write_text("version: 2\nsources: []\n", encoding="utf-8")

    with pytest.raises(RecallsSourceManifestError):
        load_source_manifest(str(manifest))
