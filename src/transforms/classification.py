"""Category and severity classification.

Category assignment is deterministic substring matching over a fixed,
ordered taxonomy. Severity helpers map source vocabularies onto the
1 (most serious) to 3 (least serious) tier scale.
"""

from __future__ import annotations

from dataclasses import replace
import re

from core.constants import (
    DEFAULT_SEVERITY,
    FALLBACK_CATEGORY_ID,
    LEAST_SERIOUS_SEVERITY,
    MOST_SERIOUS_SEVERITY,
)
from core.taxonomy import CATEGORIES
from core.types import Recall

AGENCY_CATEGORY_OVERRIDES: dict[str, str] = {
    "nhtsa": "vehicles",
    "usda": "meat-poultry",
    "fda_device": "medical-devices",
}
AGENCY_CATEGORY_FALLBACKS: dict[str, str] = {
    "fda_food": "food",
    "fda_drug": "drugs",
}
_CLASS_MARKER = re.compile(r"\b(I{1,3})\b")
_SERIOUS_CONSEQUENCE_TERMS = ("death", "crash", "fire")


def assign_category(agency: str, text: str) -> str:
    """Assign one category id to a recall.

    Single-domain agencies map straight to their category. Otherwise the
    first category in declaration order with a keyword contained in the
    text wins, then the agency fallback, then the generic fallback.

    Args:
        agency: Agency tag of the record.
        text: Concatenated title, description, and reason.

    Returns:
        A category id, never empty.
    """
    override = AGENCY_CATEGORY_OVERRIDES.get(agency)
    if override:
        return override
    lowered = (text or "").lower()
    for category in CATEGORIES:
        if any(keyword in lowered for keyword in category.keywords):
            return category.category_id
    return AGENCY_CATEGORY_FALLBACKS.get(agency, FALLBACK_CATEGORY_ID)


def classify_recall(recall: Recall) -> Recall:
    """Return the recall with its category id assigned."""
    text = f"{recall.title} {recall.product_description} {recall.reason}"
    return replace(recall, category_id=assign_category(recall.agency, text))


def classification_to_severity(classification: str) -> int:
    """Map a ``Class I/II/III`` style code onto a severity tier.

    Args:
        classification: Free-text classification from the source.

    Returns:
        1 for class I, 3 for class III, otherwise 2.
    """
    markers = set(_CLASS_MARKER.findall((classification or "").upper()))
    if "I" in markers and "II" not in markers:
        return MOST_SERIOUS_SEVERITY
    if "III" in markers:
        return LEAST_SERIOUS_SEVERITY
    return DEFAULT_SEVERITY


def consequence_to_severity(consequence: str) -> int:
    """Return tier 1 when a consequence mentions death, crash, or fire."""
    lowered = (consequence or "").lower()
    if any(term in lowered for term in _SERIOUS_CONSEQUENCE_TERMS):
        return MOST_SERIOUS_SEVERITY
    return DEFAULT_SEVERITY
