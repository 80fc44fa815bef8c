"""Unit tests for CLI command handling."""

from __future__ import annotations

from pathlib import Path

import pytest

from cli.main import main
from tests.fixture_paths import fixture_path


def _base_args(tmp_path: Path) -> list[str]:
    return ["--raw-dir", str(fixture_path("raw")), "--db-path", str(tmp_path / "recalls.db")]


def test_cli_build_prints_store_summary(tmp_path: Path, capsys) -> None:
    """CLI build should print the store path and counts."""
    exit_code = main([*_base_args(tmp_path), "build", "--batch-size", "3"])
    output = capsys.readouterr().out

    assert exit_code == 0
    assert "recalls=9" in output and "manufacturers=5" in output


def test_cli_build_accepts_source_manifest(tmp_path: Path, capsys) -> None:
    """CLI build should load only manifest sources."""
    args = [*_base_args(tmp_path), "build", "--sources", str(fixture_path("sources.yaml"))]

    exit_code = main(args)
    output = capsys.readouterr().out

    assert exit_code == 0 and "recalls=2" in output


def test_cli_stats_prints_year_histogram(tmp_path: Path, capsys) -> None:
    """CLI stats should read precomputed statistics."""
    main([*_base_args(tmp_path), "build"])
    capsys.readouterr()

    exit_code = main([*_base_args(tmp_path), "stats"])
    output = capsys.readouterr().out.splitlines()

    assert exit_code == 0
    assert output[:3] == ["total_recalls=9", "year_min=2021", "year_max=2024"]
    assert output[3] == "2024\t2"


def test_cli_search_filters_by_agency(tmp_path: Path, capsys) -> None:
    """CLI search should print matching rows and a total line."""
    main([*_base_args(tmp_path), "build"])
    capsys.readouterr()

    exit_code = main([*_base_args(tmp_path), "search", "--agency", "nhtsa"])
    output = capsys.readouterr().out.splitlines()

    assert exit_code == 0
    assert output[0].startswith("2023-06-15\tnhtsa\t23v123000-ford-2020-2022-air-bags")
    assert output[-1] == "total=1\tpage=1\tper_page=50"


def test_cli_rejects_unknown_category(tmp_path: Path) -> None:
    """Category filters are limited to the fixed taxonomy."""
    with pytest.raises(SystemExit):
        main([*_base_args(tmp_path), "search", "--category", "weapons"])
