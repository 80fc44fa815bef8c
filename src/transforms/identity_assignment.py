"""Stable slug and recall id assignment.

Slugs are derived from human-readable text and made unique within one
build run by appending ``-1``, ``-2``, ... in input order. The caller owns
the set of already-used slugs, so each run starts from a fresh set.
"""

from __future__ import annotations

from dataclasses import replace
import re
from typing import Iterable

from core.constants import MAX_SLUG_LENGTH, SLUG_TITLE_PREFIX_LENGTH, UNKNOWN_SLUG
from core.types import Recall

_NON_ALPHANUMERIC_RUN = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """Build a URL-safe slug.

    Args:
        text: Free text to slugify.

    Returns:
        Lowercase hyphen-separated slug of at most 200 characters,
        possibly empty.
    """
    collapsed = _NON_ALPHANUMERIC_RUN.sub("-", (text or "").lower())
    return collapsed.strip("-")[:MAX_SLUG_LENGTH]


def assign_identities(records: Iterable[Recall], used_slugs: set[str]) -> list[Recall]:
    """Assign unique slugs and recall ids in input order.

    Args:
        records: Classified recalls in source concatenation order.
        used_slugs: Slugs already taken in this run; updated in place.

    Returns:
        Recalls with ``slug`` and ``recall_id`` set.
    """
    assigned: list[Recall] = []
    for record in records:
        slug = _claim_slug(_base_slug(record), used_slugs)
        recall_id = build_recall_id(record.agency, record.recall_number, slug)
        assigned.append(replace(record, slug=slug, recall_id=recall_id))
    return assigned


def build_recall_id(agency: str, recall_number: str, slug: str) -> str:
    """Build the store-wide recall id from agency and source identifier."""
    return f"{agency}-{recall_number or slug}"


def _base_slug(record: Recall) -> str:
    base = slugify(f"{record.recall_number}-{record.title[:SLUG_TITLE_PREFIX_LENGTH]}")
    if base:
        return base
    return slugify(record.recall_number) or UNKNOWN_SLUG


def _claim_slug(base: str, used_slugs: set[str]) -> str:
    slug = base
    suffix = 1
    while slug in used_slugs:
        slug = f"{base}-{suffix}"
        suffix += 1
    used_slugs.add(slug)
    return slug
