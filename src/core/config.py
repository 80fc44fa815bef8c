"""Runtime configuration model for PlainRecalls.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_DB_PATH,
    DEFAULT_NORMALIZE_WORKERS,
    DEFAULT_RAW_DIR,
)
from core.errors import RecallsConfigError


@dataclass(frozen=True)
class RecallsConfig:
    """Validated runtime configuration.

    Attributes:
        raw_dir: Directory holding one downloaded JSON array per source.
        db_path: Destination SQLite store path.
        batch_size: Rows per insert transaction for large tables.
        normalize_workers: Thread count for per-source normalization.
    """

    raw_dir: Path
    db_path: Path
    batch_size: int
    normalize_workers: int

    @classmethod
    def from_env(cls) -> "RecallsConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            RecallsConfigError: If environment values are invalid.
        """
        raw_dir_value = os.getenv("PLAINRECALLS_RAW_DIR", str(DEFAULT_RAW_DIR))
        db_path_value = os.getenv("PLAINRECALLS_DB_PATH", str(DEFAULT_DB_PATH))
        batch_size = _parse_positive_int(
            "PLAINRECALLS_BATCH_SIZE",
            os.getenv("PLAINRECALLS_BATCH_SIZE", str(DEFAULT_BATCH_SIZE)),
        )
        normalize_workers = _parse_positive_int(
            "PLAINRECALLS_WORKERS",
            os.getenv("PLAINRECALLS_WORKERS", str(DEFAULT_NORMALIZE_WORKERS)),
        )
        return cls(
            raw_dir=Path(raw_dir_value).expanduser().resolve(),
            db_path=Path(db_path_value).expanduser().resolve(),
            batch_size=batch_size,
            normalize_workers=normalize_workers,
        )


def _parse_positive_int(variable_name: str, raw_value: str) -> int:
    """Parse a positive integer environment value.

    Args:
        variable_name: Environment variable name for error context.
        raw_value: Raw string from environment.

    Returns:
        Parsed positive integer.

    Raises:
        RecallsConfigError: If value is not a positive integer.
    """
    try:
        parsed_value = int(raw_value)
    except ValueError as error:
        raise RecallsConfigError(
            f"Invalid {variable_name} value: "
            f"expected integer, got '{raw_value}'. "
            f"Set {variable_name} to a numeric value."
        ) from error
    if parsed_value < 1:
        raise RecallsConfigError(
            f"Invalid {variable_name} value: expected a positive integer, "
            f"got {parsed_value}. Set {variable_name} to 1 or more."
        )
    return parsed_value
