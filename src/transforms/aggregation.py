"""Recall roll-ups and global statistics.

This module folds the deduplicated recall list into manufacturer rows,
per-category and per-agency counts, and the year histogram that read
paths consume instead of aggregating at request time.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import replace
from typing import Iterable, Sequence

from core.types import Manufacturer, Recall, RecallStatistics, YearCount
from transforms.identity_assignment import slugify


def build_manufacturers(recalls: Iterable[Recall]) -> list[Manufacturer]:
    """Group recalls by slugified firm name.

    Args:
        recalls: Deduplicated recalls.

    Returns:
        Manufacturer roll-ups in first-seen order.
    """
    names: dict[str, str] = {}
    counts: Counter[str] = Counter()
    latest_dates: dict[str, str | None] = {}
    for recall in recalls:
        firm = recall.recalling_firm.strip()
        manufacturer_id = slugify(firm)
        if not manufacturer_id:
            continue
        names.setdefault(manufacturer_id, firm)
        counts[manufacturer_id] += 1
        latest = latest_dates.get(manufacturer_id)
        # Zero-padded ISO dates compare chronologically as strings.
        if recall.date_reported and (latest is None or recall.date_reported > latest):
            latest_dates[manufacturer_id] = recall.date_reported
    return [
        Manufacturer(
            manufacturer_id=manufacturer_id,
            name=name,
            recall_count=counts[manufacturer_id],
            latest_recall_date=latest_dates.get(manufacturer_id),
        )
        for manufacturer_id, name in names.items()
    ]


def attach_manufacturer_ids(
    recalls: Iterable[Recall],
    manufacturers: Sequence[Manufacturer],
) -> list[Recall]:
    """Set ``manufacturer_id`` on recalls whose firm has a roll-up row.

    Args:
        recalls: Deduplicated recalls.
        manufacturers: Roll-ups built from the same recalls.

    Returns:
        Recalls with manufacturer back-references.
    """
    known_ids = {manufacturer.manufacturer_id for manufacturer in manufacturers}
    linked: list[Recall] = []
    for recall in recalls:
        manufacturer_id = slugify(recall.recalling_firm.strip())
        if manufacturer_id in known_ids:
            linked.append(replace(recall, manufacturer_id=manufacturer_id))
        else:
            linked.append(replace(recall, manufacturer_id=None))
    return linked


def count_by_category(recalls: Iterable[Recall]) -> dict[str, int]:
    """Count recalls per category id."""
    return dict(Counter(recall.category_id for recall in recalls))


def count_by_agency(recalls: Iterable[Recall]) -> dict[str, int]:
    """Count recalls per agency id."""
    return dict(Counter(recall.agency for recall in recalls))


def compute_statistics(recalls: Sequence[Recall]) -> RecallStatistics:
    """Compute total count, year range, and per-year histogram.

    Args:
        recalls: Deduplicated recalls.

    Returns:
        Global statistics; year fields are None when no record is dated.
    """
    year_counts = Counter(
        recall.date_reported[:4] for recall in recalls if recall.date_reported
    )
    histogram = tuple(
        YearCount(year=year, count=year_counts[year])
        for year in sorted(year_counts, reverse=True)
    )
    return RecallStatistics(
        total_recalls=len(recalls),
        year_min=min(year_counts) if year_counts else None,
        year_max=max(year_counts) if year_counts else None,
        recalls_by_year=histogram,
    )
