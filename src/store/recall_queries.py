"""Read-query interface over a finished recall store.

This module provides the parameterized lookups the serving layer relies
on. It opens stores read-only and reads global aggregates from
``_stats`` rather than computing them per request.
"""

from __future__ import annotations

import json
from pathlib import Path
import sqlite3

from core.constants import (
    DEFAULT_TOP_MANUFACTURERS,
    STAT_RECALLS_BY_YEAR,
    STAT_TOTAL_RECALLS,
    STAT_YEAR_MAX,
    STAT_YEAR_MIN,
    STATS_TABLE_NAME,
)
from core.errors import RecallsStoreError
from core.types import (
    AgencySummary,
    CategorySummary,
    Manufacturer,
    Recall,
    RecallPage,
    RecallQuery,
    RecallStatistics,
    YearCount,
)
from store.record_payload import (
    agency_from_row,
    category_from_row,
    manufacturer_from_row,
    recall_from_row,
)

_SEARCH_COLUMNS = ("title", "product_description", "recalling_firm", "recall_number")


class RecallReader:
    """Read-only query facade for a completed store."""

    def __init__(self, db_path: Path) -> None:
        """Open a store for reading.

        Args:
            db_path: Path of a completed store.

        Raises:
            RecallsStoreError: If the store file does not exist.
        """
        if not db_path.exists():
            raise RecallsStoreError(
                f"Recall store not found at {db_path}. Run the build command first."
            )
        self._connection = sqlite3.connect(f"{db_path.resolve().as_uri()}?mode=ro", uri=True)
        self._connection.row_factory = sqlite3.Row

    def close(self) -> None:
        """Close the underlying connection."""
        self._connection.close()

    def __enter__(self) -> "RecallReader":
        return self

    def __exit__(self, *_: object) -> None:
        self.close()

    def search_recalls(self, query: RecallQuery) -> RecallPage:
        """Filter, search, and paginate recalls newest first.

        Args:
            query: Filters and pagination request.

        Returns:
            One page of recalls with the total match count.

        Raises:
            RecallsStoreError: If pagination values are invalid.
        """
        if query.page < 1 or query.per_page < 1:
            raise RecallsStoreError(
                f"Invalid pagination page={query.page} per_page={query.per_page}. "
                "Use positive values."
            )
        where_sql, params = _build_where_clause(query)
        total = self._connection.execute(
            f"SELECT COUNT(*) FROM recalls{where_sql}", params
        ).fetchone()[0]
        offset = (query.page - 1) * query.per_page
        rows = self._connection.execute(
            f"SELECT * FROM recalls{where_sql} "
            "ORDER BY date_reported DESC, recall_id LIMIT ? OFFSET ?",
            [*params, query.per_page, offset],
        ).fetchall()
        return RecallPage(
            recalls=tuple(recall_from_row(row) for row in rows),
            total=int(total),
            page=query.page,
            per_page=query.per_page,
        )

    def get_recall_by_slug(self, slug: str) -> Recall | None:
        """Return one recall by slug, or None."""
        row = self._connection.execute("SELECT * FROM recalls WHERE slug = ?", (slug,)).fetchone()
        return recall_from_row(row) if row else None

    def list_categories(self) -> list[CategorySummary]:
        """Return categories ordered by recall count."""
        rows = self._connection.execute(
            "SELECT * FROM categories ORDER BY recall_count DESC, category_id"
        ).fetchall()
        return [category_from_row(row) for row in rows]

    def list_agencies(self) -> list[AgencySummary]:
        """Return agencies with recalls ordered by recall count."""
        rows = self._connection.execute(
            "SELECT * FROM agencies WHERE recall_count > 0 ORDER BY recall_count DESC, agency_id"
        ).fetchall()
        return [agency_from_row(row) for row in rows]

    def top_manufacturers(self, limit: int = DEFAULT_TOP_MANUFACTURERS) -> list[Manufacturer]:
        """Return manufacturers with the most recalls."""
        rows = self._connection.execute(
            "SELECT * FROM manufacturers ORDER BY recall_count DESC, manufacturer_id LIMIT ?",
            (limit,),
        ).fetchall()
        return [manufacturer_from_row(row) for row in rows]

    def read_statistics(self) -> RecallStatistics:
        """Parse the precomputed ``_stats`` table.

        Returns:
            Stored global statistics.

        Raises:
            RecallsStoreError: If required keys are missing.
        """
        rows = self._connection.execute(f"SELECT key, value FROM {STATS_TABLE_NAME}").fetchall()
        values = {str(row["key"]): row["value"] for row in rows}
        if STAT_TOTAL_RECALLS not in values:
            raise RecallsStoreError(
                "Recall store statistics are missing. Rebuild the store to refresh _stats."
            )
        histogram = json.loads(values.get(STAT_RECALLS_BY_YEAR) or "[]")
        return RecallStatistics(
            total_recalls=int(values[STAT_TOTAL_RECALLS]),
            year_min=values.get(STAT_YEAR_MIN),
            year_max=values.get(STAT_YEAR_MAX),
            recalls_by_year=tuple(
                YearCount(year=str(item["year"]), count=int(item["count"])) for item in histogram
            ),
        )


def _build_where_clause(query: RecallQuery) -> tuple[str, list[object]]:
    """Build a parameterized WHERE clause from query filters.

    Args:
        query: Filters to translate.

    Returns:
        SQL fragment (empty or starting with ``WHERE``) and parameters.
    """
    clauses: list[str] = []
    params: list[object] = []
    equality_filters = (
        ("agency", query.agency),
        ("category_id", query.category_id),
        ("manufacturer_id", query.manufacturer_id),
    )
    for column, value in equality_filters:
        if value:
            clauses.append(f"{column} = ?")
            params.append(value)
    if query.date_from:
        clauses.append("date_reported >= ?")
        params.append(query.date_from)
    if query.date_to:
        clauses.append("date_reported <= ?")
        params.append(query.date_to)
    if query.text:
        pattern = f"%{query.text}%"
        clauses.append("(" + " OR ".join(f"{column} LIKE ?" for column in _SEARCH_COLUMNS) + ")")
        params.extend(pattern for _ in _SEARCH_COLUMNS)
    if not clauses:
        return "", params
    return " WHERE " + " AND ".join(clauses), params
