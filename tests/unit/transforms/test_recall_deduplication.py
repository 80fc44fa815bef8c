"""Unit tests for first-wins recall deduplication."""

from __future__ import annotations

from core.types import Recall
from transforms.recall_deduplication import remove_duplicate_recalls


def test_remove_duplicate_recalls_keeps_first_record() -> None:
    """Later records with the same id should be dropped."""
    records = [
        Recall(agency="fda_food", recall_id="fda_food-1", title="first"),
        Recall(agency="fda_food", recall_id="fda_food-1", title="second"),
        Recall(agency="fda_food", recall_id="fda_food-2", title="third"),
    ]

    deduped = remove_duplicate_recalls(records)

    assert [record.title for record in deduped] == ["first", "third"]


def test_remove_duplicate_recalls_is_idempotent() -> None:
    """Deduplicating twice should not change the result."""
    records = [Recall(agency="cpsc", recall_id=f"cpsc-{index % 2}") for index in range(5)]

    once = remove_duplicate_recalls(records)

    assert remove_duplicate_recalls(once) == once
