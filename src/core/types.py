"""Shared typed models.

This module defines immutable data models used by ingest, transforms,
store, and SDK layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Mapping

from core.constants import DEFAULT_PAGE_SIZE, DEFAULT_SEVERITY

SourceShape = Literal["fda", "cpsc", "nhtsa", "fsis"]


@dataclass(frozen=True)
class SourceSpec:
    """One raw source file and the shape used to normalize it.

    Attributes:
        agency: Agency tag stamped on every record of this source.
        file_name: JSON array file name under the raw directory.
        shape: Raw record layout family.
    """

    agency: str
    file_name: str
    shape: SourceShape


@dataclass(frozen=True)
class Recall:
    """Canonical recall record.

    Identity fields (``recall_id``, ``slug``) and foreign keys
    (``category_id``, ``manufacturer_id``) start empty and are filled by
    later pipeline stages through ``dataclasses.replace``.
    """

    agency: str
    recall_number: str = ""
    title: str = ""
    product_description: str = ""
    reason: str = ""
    hazard: str = ""
    remedy: str = ""
    classification: str = ""
    severity: int = DEFAULT_SEVERITY
    date_reported: str | None = None
    date_initiated: str | None = None
    status: str = ""
    affected_count: str = ""
    distribution: str = ""
    recalling_firm: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    url: str = ""
    recall_id: str = ""
    slug: str = ""
    category_id: str = ""
    manufacturer_id: str | None = None


@dataclass(frozen=True)
class Manufacturer:
    """Manufacturer roll-up keyed by slugified firm name.

    Attributes:
        manufacturer_id: Slug of the trimmed firm name.
        name: First-seen display name.
        recall_count: Number of recalls sharing the slug.
        latest_recall_date: Greatest ISO ``date_reported`` or None.
    """

    manufacturer_id: str
    name: str
    recall_count: int
    latest_recall_date: str | None

    @property
    def slug(self) -> str:
        """Return the URL slug, identical to the manufacturer id."""
        return self.manufacturer_id


@dataclass(frozen=True)
class YearCount:
    """One histogram bucket of recalls per reported year."""

    year: str
    count: int


@dataclass(frozen=True)
class RecallStatistics:
    """Precomputed global aggregates.

    Attributes:
        total_recalls: Number of recall rows.
        year_min: Earliest reported year, None without dated records.
        year_max: Latest reported year, None without dated records.
        recalls_by_year: Histogram ordered by year descending.
    """

    total_recalls: int
    year_min: str | None
    year_max: str | None
    recalls_by_year: tuple[YearCount, ...] = ()


@dataclass(frozen=True)
class RecallStoreContents:
    """Everything the store writer persists in one run.

    Attributes:
        recalls: Deduplicated recalls with all identities assigned.
        manufacturers: Manufacturer roll-ups.
        category_counts: Recall count per category id.
        agency_counts: Recall count per agency id.
    """

    recalls: tuple[Recall, ...]
    manufacturers: tuple[Manufacturer, ...]
    category_counts: Mapping[str, int] = field(default_factory=dict)
    agency_counts: Mapping[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class BuildOptions:
    """Build command options.

    Attributes:
        raw_dir: Optional raw directory override.
        db_path: Optional destination store override.
        batch_size: Optional insert batch size override.
        sources: Optional ordered source list; defaults when omitted.
    """

    raw_dir: Path | None = None
    db_path: Path | None = None
    batch_size: int | None = None
    sources: tuple[SourceSpec, ...] | None = None


@dataclass(frozen=True)
class BuildResult:
    """Summary of one completed build run.

    Attributes:
        db_path: Path of the freshly written store.
        input_count: Normalized records before deduplication.
        recall_count: Recalls written after deduplication.
        manufacturer_count: Manufacturer rows written.
        agency_counts: Recall count per agency id.
        category_counts: Recall count per category id.
        statistics: Global aggregates of the written recalls.
    """

    db_path: Path
    input_count: int
    recall_count: int
    manufacturer_count: int
    agency_counts: Mapping[str, int]
    category_counts: Mapping[str, int]
    statistics: RecallStatistics


@dataclass(frozen=True)
class RecallQuery:
    """Read-side recall filter and pagination request.

    Attributes:
        text: Optional substring matched against title, description,
            firm, and recall number.
        agency: Optional exact agency id.
        category_id: Optional exact category id.
        manufacturer_id: Optional exact manufacturer id.
        date_from: Optional inclusive lower ``date_reported`` bound.
        date_to: Optional inclusive upper ``date_reported`` bound.
        page: One-based page number.
        per_page: Rows per page.
    """

    text: str | None = None
    agency: str | None = None
    category_id: str | None = None
    manufacturer_id: str | None = None
    date_from: str | None = None
    date_to: str | None = None
    page: int = 1
    per_page: int = DEFAULT_PAGE_SIZE


@dataclass(frozen=True)
class RecallPage:
    """One page of recall query results."""

    recalls: tuple[Recall, ...]
    total: int
    page: int
    per_page: int


@dataclass(frozen=True)
class CategorySummary:
    """Stored category row."""

    category_id: str
    category_name: str
    slug: str
    description: str
    recall_count: int


@dataclass(frozen=True)
class AgencySummary:
    """Stored agency row."""

    agency_id: str
    agency_name: str
    slug: str
    description: str
    url: str
    recall_count: int
