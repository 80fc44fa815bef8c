"""Unit tests for the read-query interface."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import RecallsStoreError
from core.types import Manufacturer, Recall, RecallQuery, RecallStoreContents
from store.recall_queries import RecallReader
from store.recall_store import RecallStoreWriter


def _write_store(db_path: Path) -> None:
    recalls = (
        Recall(agency="cpsc", recall_number="1", recall_id="cpsc-1", slug="1-crib",
               title="Crib slats", date_reported="2024-02-01", category_id="children",
               recalling_firm="Maker", manufacturer_id="maker"),
        Recall(agency="cpsc", recall_number="2", recall_id="cpsc-2", slug="2-lamp",
               title="Desk lamp", date_reported="2022-05-05", category_id="household"),
        Recall(agency="nhtsa", recall_number="23V1", recall_id="nhtsa-23V1", slug="23v1-ford",
               title="FORD 2020: BRAKES", date_reported="2023-01-01", category_id="vehicles",
               recalling_firm="FORD", manufacturer_id="ford", severity=1),
    )
    contents = RecallStoreContents(
        recalls=recalls,
        manufacturers=(
            Manufacturer("maker", "Maker", 1, "2024-02-01"),
            Manufacturer("ford", "FORD", 1, "2023-01-01"),
        ),
        category_counts={"children": 1, "household": 1, "vehicles": 1},
        agency_counts={"cpsc": 2, "nhtsa": 1},
    )
    RecallStoreWriter(db_path).write(contents)


@pytest.fixture
def reader(tmp_path: Path):
    db_path = tmp_path / "recalls.db"
    _write_store(db_path)
    with RecallReader(db_path) as store_reader:
        yield store_reader


def test_search_recalls_orders_newest_first(reader: RecallReader) -> None:
    """Unfiltered search should sort by reported date descending."""
    page = reader.search_recalls(RecallQuery())

    assert [recall.recall_id for recall in page.recalls] == ["cpsc-1", "nhtsa-23V1", "cpsc-2"]
    assert page.total == 3


def test_search_recalls_filters_by_agency_and_text(reader: RecallReader) -> None:
    """Equality filters and substring search should combine."""
    page = reader.search_recalls(RecallQuery(text="lamp", agency="cpsc"))

    assert [recall.slug for recall in page.recalls] == ["2-lamp"]


def test_search_recalls_matches_recall_number_and_firm(reader: RecallReader) -> None:
    """Substring search should cover firm names and recall numbers."""
    by_number = reader.search_recalls(RecallQuery(text="23V"))
    by_firm = reader.search_recalls(RecallQuery(text="Maker"))

    assert by_number.total == 1 and by_firm.total == 1


def test_search_recalls_filters_by_date_range(reader: RecallReader) -> None:
    """Date bounds should be inclusive."""
    page = reader.search_recalls(RecallQuery(date_from="2023-01-01", date_to="2023-12-31"))

    assert [recall.recall_id for recall in page.recalls] == ["nhtsa-23V1"]


def test_search_recalls_paginates(reader: RecallReader) -> None:
    """Offset pagination should keep the full total."""
    page = reader.search_recalls(RecallQuery(page=2, per_page=2))

    assert [recall.recall_id for recall in page.recalls] == ["cpsc-2"]
    assert (page.total, page.page, page.per_page) == (3, 2, 2)


def test_search_recalls_rejects_invalid_page(reader: RecallReader) -> None:
    """Pages are one-based."""
    with pytest.raises(RecallsStoreError):
        reader.search_recalls(RecallQuery(page=0))


def test_get_recall_by_slug_round_trips_fields(reader: RecallReader) -> None:
    """Stored rows should map back to recalls."""
    recall = reader.get_recall_by_slug("23v1-ford")

    assert recall is not None
    assert (recall.severity, recall.manufacturer_id, recall.category_id) == (1, "ford", "vehicles")
    assert reader.get_recall_by_slug("missing") is None


def test_list_agencies_skips_empty_agencies(reader: RecallReader) -> None:
    """Agencies without recalls are hidden."""
    assert [agency.agency_id for agency in reader.list_agencies()] == ["cpsc", "nhtsa"]


def test_list_categories_includes_whole_taxonomy(reader: RecallReader) -> None:
    """All categories are listed, busiest first."""
    categories = reader.list_categories()

    assert len(categories) == 12
    assert categories[0].recall_count == 1


def test_top_manufacturers_limits_rows(reader: RecallReader) -> None:
    """Manufacturer listing should respect the limit."""
    assert len(reader.top_manufacturers(limit=1)) == 1


def test_read_statistics_parses_stats_table(reader: RecallReader) -> None:
    """Stored statistics should parse into typed values."""
    statistics = reader.read_statistics()

    assert statistics.total_recalls == 3
    assert (statistics.year_min, statistics.year_max) == ("2022", "2024")
    assert [bucket.year for bucket in statistics.recalls_by_year] == ["2024", "2023", "2022"]


def test_reader_raises_for_missing_store(tmp_path: Path) -> None:
    """Opening a store that was never built should fail."""
    with pytest.raises(RecallsStoreError):
        RecallReader(tmp_path / "missing.db")
