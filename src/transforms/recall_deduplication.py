"""First-wins recall deduplication.

Independent sources, or repeated listings from one source, can carry the
same upstream identifier. Only the first record per ``recall_id`` in
concatenation order is kept; later ones are dropped without merging.
"""

from __future__ import annotations

from typing import Iterable

from core.types import Recall


def remove_duplicate_recalls(records: Iterable[Recall]) -> list[Recall]:
    """Remove duplicate recalls by recall id.

    Args:
        records: Recalls with identities assigned.

    Returns:
        Ordered recalls with later duplicates removed.
    """
    unique_records: list[Recall] = []
    seen_ids: set[str] = set()
    for record in records:
        if record.recall_id in seen_ids:
            continue
        seen_ids.add(record.recall_id)
        unique_records.append(record)
    return unique_records
