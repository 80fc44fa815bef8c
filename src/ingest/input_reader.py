"""Raw source file readers for recall builds.

This module loads one downloaded JSON array per source. A missing or
unreadable source file is logged and contributes zero records so a build
proceeds with whatever sources are available.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.errors import RecallsIngestError
from core.logging_config import get_logger
from core.types import SourceSpec

_LOGGER = get_logger(__name__)


def ensure_raw_dir(raw_dir: Path) -> None:
    """Validate that the raw source directory exists.

    Args:
        raw_dir: Directory holding raw JSON files.

    Raises:
        RecallsIngestError: If the directory is missing.
    """
    if not raw_dir.is_dir():
        raise RecallsIngestError(
            f"Failed to read raw sources at {raw_dir}: directory does not exist. "
            "Set PLAINRECALLS_RAW_DIR or pass --raw-dir with downloaded source files."
        )


def read_source_records(raw_dir: Path, source: SourceSpec) -> list[object]:
    """Load the raw JSON array for one source.

    Args:
        raw_dir: Directory holding raw JSON files.
        source: Source to load.

    Returns:
        Decoded array elements, or an empty list when the file is
        missing, not valid JSON, or not a JSON array.
    """
    file_path = raw_dir / source.file_name
    if not file_path.is_file():
        _LOGGER.warning("source_missing", agency=source.agency, path=str(file_path))
        return []
    try:
        payload = json.loads(file_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as error:
        _LOGGER.error(
            "source_unreadable",
            agency=source.agency,
            path=str(file_path),
            error=str(error),
        )
        return []
    if not isinstance(payload, list):
        _LOGGER.error(
            "source_unreadable",
            agency=source.agency,
            path=str(file_path),
            error=f"expected JSON array, got {type(payload).__name__}",
        )
        return []
    _LOGGER.info(
        "source_loaded",
        agency=source.agency,
        path=str(file_path),
        record_count=len(payload),
    )
    return payload
