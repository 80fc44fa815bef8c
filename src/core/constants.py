"""Core constants used across PlainRecalls modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_RAW_DIR = Path("raw")
DEFAULT_DB_PATH = Path("plainrecalls.db")
DEFAULT_BATCH_SIZE = 5000
DEFAULT_NORMALIZE_WORKERS = 4
BUILD_FILE_SUFFIX = ".building"
MAX_TITLE_LENGTH = 500
MAX_SLUG_LENGTH = 200
SLUG_TITLE_PREFIX_LENGTH = 80
VEHICLE_COMPONENT_PREFIX_LENGTH = 200
UNKNOWN_SLUG = "unknown"
DEFAULT_SEVERITY = 2
MOST_SERIOUS_SEVERITY = 1
LEAST_SERIOUS_SEVERITY = 3
FALLBACK_CATEGORY_ID = "household"
UNITED_STATES = "United States"
NHTSA_RECALL_URL_PREFIX = "https://www.nhtsa.gov/recalls?nhtsaId="
ACTIVE_STATUS = "Active"
CLOSED_STATUS = "Closed"
DEFAULT_PAGE_SIZE = 50
DEFAULT_TOP_MANUFACTURERS = 100
SOURCE_MANIFEST_VERSION = 1
STATS_TABLE_NAME = "_stats"
STAT_TOTAL_RECALLS = "total_recalls"
STAT_YEAR_MIN = "year_min"
STAT_YEAR_MAX = "year_max"
STAT_RECALLS_BY_YEAR = "recalls_by_year"
