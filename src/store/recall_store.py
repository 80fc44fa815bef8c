"""Recall store writer.

This module materializes one build run into a SQLite database. The store
is built into a sibling temporary file and atomically swapped into place,
so readers only ever see a previous or a fully written store.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
import sqlite3
from typing import Iterable, Sequence

from core.constants import (
    BUILD_FILE_SUFFIX,
    DEFAULT_BATCH_SIZE,
    STAT_RECALLS_BY_YEAR,
    STAT_TOTAL_RECALLS,
    STAT_YEAR_MAX,
    STAT_YEAR_MIN,
    STATS_TABLE_NAME,
)
from core.errors import RecallsStoreError
from core.logging_config import get_logger
from core.taxonomy import AGENCIES, CATEGORIES
from core.types import RecallStoreContents
from store.record_payload import (
    agency_to_row,
    category_to_row,
    manufacturer_to_row,
    recall_to_row,
)
from store.schema import (
    AGENCY_COLUMNS,
    CATEGORY_COLUMNS,
    MANUFACTURER_COLUMNS,
    RECALL_COLUMNS,
    SCHEMA_SCRIPT,
    insert_statement,
)

_LOGGER = get_logger(__name__)


class RecallStoreWriter:
    """Atomic full-rebuild writer for the recall store.

    Agencies and categories are written in one transaction each.
    Manufacturers and recalls are written in batched transactions,
    and ``_stats`` is refreshed from the committed recall rows last.
    """

    def __init__(self, db_path: Path, batch_size: int = DEFAULT_BATCH_SIZE) -> None:
        """Initialize the writer.

        Args:
            db_path: Destination store path replaced on success.
            batch_size: Rows per insert transaction.

        Raises:
            RecallsStoreError: If batch size is not positive.
        """
        if batch_size < 1:
            raise RecallsStoreError(
                f"Invalid store batch size {batch_size}. Use a positive row count."
            )
        self._db_path = db_path
        self._batch_size = batch_size

    @property
    def build_path(self) -> Path:
        """Return the temporary path used while building."""
        return self._db_path.with_name(self._db_path.name + BUILD_FILE_SUFFIX)

    def write(self, contents: RecallStoreContents) -> Path:
        """Write a complete store and swap it into place.

        Args:
            contents: Recalls, manufacturers, and derived counts.

        Returns:
            Final store path.

        Raises:
            RecallsStoreError: If schema creation, any insert batch,
                or the final swap fails. The previous store is kept.
        """
        build_path = self.build_path
        build_path.parent.mkdir(parents=True, exist_ok=True)
        _remove_if_exists(build_path)
        connection = sqlite3.connect(build_path)
        try:
            self._write_contents(connection, contents)
        except sqlite3.Error as error:
            connection.close()
            _remove_if_exists(build_path)
            raise RecallsStoreError(
                f"Failed to write recall store at {build_path}: {error}. "
                "The previous store was left untouched; fix the cause and rebuild."
            ) from error
        connection.close()
        try:
            os.replace(build_path, self._db_path)
        except OSError as error:
            _remove_if_exists(build_path)
            raise RecallsStoreError(
                f"Failed to replace recall store at {self._db_path}: {error}. "
                "Check directory permissions and rebuild."
            ) from error
        _LOGGER.info(
            "store_written",
            db_path=str(self._db_path),
            recall_count=len(contents.recalls),
            manufacturer_count=len(contents.manufacturers),
            batch_size=self._batch_size,
        )
        return self._db_path

    def _write_contents(
        self,
        connection: sqlite3.Connection,
        contents: RecallStoreContents,
    ) -> None:
        connection.executescript(SCHEMA_SCRIPT)
        with connection:
            connection.executemany(
                insert_statement("agencies", AGENCY_COLUMNS),
                [agency_to_row(agency, contents.agency_counts) for agency in AGENCIES],
            )
        with connection:
            connection.executemany(
                insert_statement("categories", CATEGORY_COLUMNS),
                [category_to_row(category, contents.category_counts) for category in CATEGORIES],
            )
        self._insert_batches(
            connection,
            insert_statement("manufacturers", MANUFACTURER_COLUMNS),
            [manufacturer_to_row(manufacturer) for manufacturer in contents.manufacturers],
        )
        self._insert_batches(
            connection,
            insert_statement("recalls", RECALL_COLUMNS),
            [recall_to_row(recall) for recall in contents.recalls],
        )
        refresh_statistics(connection)

    def _insert_batches(
        self,
        connection: sqlite3.Connection,
        statement: str,
        rows: Sequence[tuple[object, ...]],
    ) -> None:
        for batch in _batched(rows, self._batch_size):
            with connection:
                connection.executemany(statement, batch)


def refresh_statistics(connection: sqlite3.Connection) -> None:
    """Recompute ``_stats`` from committed recall rows.

    Args:
        connection: Open store connection.
    """
    total_recalls = connection.execute("SELECT COUNT(*) FROM recalls").fetchone()[0]
    year_min, year_max = connection.execute(
        "SELECT MIN(SUBSTR(date_reported, 1, 4)), MAX(SUBSTR(date_reported, 1, 4)) "
        "FROM recalls WHERE date_reported IS NOT NULL"
    ).fetchone()
    by_year = connection.execute(
        "SELECT SUBSTR(date_reported, 1, 4) AS year, COUNT(*) AS count FROM recalls "
        "WHERE date_reported IS NOT NULL GROUP BY year ORDER BY year DESC"
    ).fetchall()
    histogram = [{"year": year, "count": count} for year, count in by_year]
    stats_rows = [
        (STAT_TOTAL_RECALLS, str(total_recalls)),
        (STAT_YEAR_MIN, year_min),
        (STAT_YEAR_MAX, year_max),
        (STAT_RECALLS_BY_YEAR, json.dumps(histogram)),
    ]
    with connection:
        connection.executemany(
            f"INSERT OR REPLACE INTO {STATS_TABLE_NAME} (key, value) VALUES (?, ?)",
            stats_rows,
        )


def _batched(
    rows: Sequence[tuple[object, ...]],
    batch_size: int,
) -> Iterable[Sequence[tuple[object, ...]]]:
    for start in range(0, len(rows), batch_size):
        yield rows[start : start + batch_size]


def _remove_if_exists(path: Path) -> None:
    if path.exists():
        path.unlink()
