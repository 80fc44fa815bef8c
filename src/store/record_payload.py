"""Row mapping between typed models and store tuples.

This module centralizes column-ordered row conversion.
It is reused by the store writer and the read-query interface.
"""

from __future__ import annotations

import sqlite3
from typing import Mapping

from core.taxonomy import Agency, Category
from core.types import AgencySummary, CategorySummary, Manufacturer, Recall
from store.schema import RECALL_COLUMNS


def recall_to_row(recall: Recall) -> tuple[object, ...]:
    """Serialize a recall into a ``recalls`` row.

    Args:
        recall: Fully identified recall.

    Returns:
        Values ordered like ``RECALL_COLUMNS``.
    """
    return tuple(getattr(recall, column) for column in RECALL_COLUMNS)


def recall_from_row(row: sqlite3.Row) -> Recall:
    """Deserialize a ``recalls`` row into a Recall.

    Args:
        row: Row fetched with ``sqlite3.Row`` factory.

    Returns:
        Parsed Recall.
    """
    values = {column: row[column] for column in RECALL_COLUMNS}
    text_values = {
        column: value if value is not None else ""
        for column, value in values.items()
        if column not in {"severity", "date_reported", "date_initiated", "manufacturer_id"}
    }
    return Recall(
        **text_values,
        severity=int(values["severity"]),
        date_reported=values["date_reported"],
        date_initiated=values["date_initiated"],
        manufacturer_id=values["manufacturer_id"],
    )


def manufacturer_to_row(manufacturer: Manufacturer) -> tuple[object, ...]:
    """Serialize a manufacturer roll-up into a ``manufacturers`` row."""
    return (
        manufacturer.manufacturer_id,
        manufacturer.name,
        manufacturer.slug,
        manufacturer.recall_count,
        manufacturer.latest_recall_date,
    )


def manufacturer_from_row(row: sqlite3.Row) -> Manufacturer:
    """Deserialize a ``manufacturers`` row."""
    return Manufacturer(
        manufacturer_id=str(row["manufacturer_id"]),
        name=str(row["name"]),
        recall_count=int(row["recall_count"]),
        latest_recall_date=row["latest_recall_date"],
    )


def category_to_row(category: Category, counts: Mapping[str, int]) -> tuple[object, ...]:
    """Serialize static category metadata with its derived count."""
    return (
        category.category_id,
        category.name,
        category.slug,
        category.description,
        counts.get(category.category_id, 0),
    )


def category_from_row(row: sqlite3.Row) -> CategorySummary:
    """Deserialize a ``categories`` row."""
    return CategorySummary(
        category_id=str(row["category_id"]),
        category_name=str(row["category_name"]),
        slug=str(row["slug"]),
        description=str(row["description"] or ""),
        recall_count=int(row["recall_count"]),
    )


def agency_to_row(agency: Agency, counts: Mapping[str, int]) -> tuple[object, ...]:
    """Serialize static agency metadata with its derived count."""
    return (
        agency.agency_id,
        agency.name,
        agency.slug,
        agency.description,
        agency.url,
        counts.get(agency.agency_id, 0),
    )


def agency_from_row(row: sqlite3.Row) -> AgencySummary:
    """Deserialize an ``agencies`` row."""
    return AgencySummary(
        agency_id=str(row["agency_id"]),
        agency_name=str(row["agency_name"]),
        slug=str(row["slug"]),
        description=str(row["description"] or ""),
        url=str(row["url"] or ""),
        recall_count=int(row["recall_count"]),
    )
