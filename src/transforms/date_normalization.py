"""Source date normalization.

Upstream feeds report dates as ``YYYYMMDD``, ``DD/MM/YYYY``, ISO
datetimes, or plain ISO dates. Every accepted value is returned as a
zero-padded ``YYYY-MM-DD`` string so that string order equals
chronological order downstream.
"""

from __future__ import annotations

from datetime import date
import re

_COMPACT_DATE = re.compile(r"^(\d{4})(\d{2})(\d{2})$")
_SLASH_DATE = re.compile(r"^(\d{2})/(\d{2})/(\d{4})$")
_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_DATETIME_SEPARATOR = "T"


def normalize_date(value: object) -> str | None:
    """Normalize a raw source date to ``YYYY-MM-DD``.

    Args:
        value: Raw date value from a source record.

    Returns:
        ISO date string, or None for missing or unrecognized input.
    """
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None
    compact_match = _COMPACT_DATE.match(text)
    if compact_match:
        year, month, day = compact_match.groups()
        return _validated(f"{year}-{month}-{day}")
    slash_match = _SLASH_DATE.match(text)
    if slash_match:
        day, month, year = slash_match.groups()
        return _validated(f"{year}-{month}-{day}")
    if _DATETIME_SEPARATOR in text:
        date_part = text.lstrip(_DATETIME_SEPARATOR).split(_DATETIME_SEPARATOR, 1)[0]
        return _validated(date_part)
    return _validated(text)


def _validated(candidate: str) -> str | None:
    """Return candidate when it is a real zero-padded calendar date."""
    if not _ISO_DATE.match(candidate):
        return None
    try:
        date.fromisoformat(candidate)
    except ValueError:
        return None
    return candidate
