"""Recall store schema definitions.

Column names and order are a stable contract with the serving layer.
Indexes back its filter, sort, and prefix-search patterns.
"""

from __future__ import annotations

from core.constants import STATS_TABLE_NAME

RECALL_COLUMNS: tuple[str, ...] = (
    "recall_id",
    "agency",
    "recall_number",
    "slug",
    "title",
    "product_description",
    "reason",
    "hazard",
    "remedy",
    "classification",
    "severity",
    "date_reported",
    "date_initiated",
    "status",
    "affected_count",
    "manufacturer_id",
    "distribution",
    "category_id",
    "recalling_firm",
    "city",
    "state",
    "country",
    "url",
)
CATEGORY_COLUMNS: tuple[str, ...] = (
    "category_id",
    "category_name",
    "slug",
    "description",
    "recall_count",
)
MANUFACTURER_COLUMNS: tuple[str, ...] = (
    "manufacturer_id",
    "name",
    "slug",
    "recall_count",
    "latest_recall_date",
)
AGENCY_COLUMNS: tuple[str, ...] = (
    "agency_id",
    "agency_name",
    "slug",
    "description",
    "url",
    "recall_count",
)

SCHEMA_SCRIPT = f"""
DROP TABLE IF EXISTS recalls;
DROP TABLE IF EXISTS categories;
DROP TABLE IF EXISTS manufacturers;
DROP TABLE IF EXISTS agencies;
DROP TABLE IF EXISTS {STATS_TABLE_NAME};

CREATE TABLE recalls (
  recall_id TEXT PRIMARY KEY,
  agency TEXT NOT NULL,
  recall_number TEXT NOT NULL,
  slug TEXT UNIQUE NOT NULL,
  title TEXT NOT NULL,
  product_description TEXT,
  reason TEXT,
  hazard TEXT,
  remedy TEXT,
  classification TEXT,
  severity INTEGER DEFAULT 2 CHECK (severity IN (1, 2, 3)),
  date_reported TEXT,
  date_initiated TEXT,
  status TEXT,
  affected_count TEXT,
  manufacturer_id TEXT,
  distribution TEXT,
  category_id TEXT NOT NULL,
  recalling_firm TEXT,
  city TEXT,
  state TEXT,
  country TEXT,
  url TEXT
);

CREATE TABLE categories (
  category_id TEXT PRIMARY KEY,
  category_name TEXT NOT NULL,
  slug TEXT UNIQUE NOT NULL,
  description TEXT,
  recall_count INTEGER DEFAULT 0
);

CREATE TABLE manufacturers (
  manufacturer_id TEXT PRIMARY KEY,
  name TEXT NOT NULL,
  slug TEXT UNIQUE NOT NULL,
  recall_count INTEGER DEFAULT 0,
  latest_recall_date TEXT
);

CREATE TABLE agencies (
  agency_id TEXT PRIMARY KEY,
  agency_name TEXT NOT NULL,
  slug TEXT UNIQUE NOT NULL,
  description TEXT,
  url TEXT,
  recall_count INTEGER DEFAULT 0
);

CREATE TABLE {STATS_TABLE_NAME} (
  key TEXT PRIMARY KEY,
  value TEXT
);

CREATE INDEX idx_recalls_agency ON recalls(agency);
CREATE INDEX idx_recalls_date ON recalls(date_reported DESC);
CREATE INDEX idx_recalls_category ON recalls(category_id);
CREATE INDEX idx_recalls_manufacturer ON recalls(manufacturer_id);
CREATE INDEX idx_recalls_severity ON recalls(severity);
CREATE INDEX idx_recalls_status ON recalls(status);
CREATE INDEX idx_recalls_slug ON recalls(slug);
CREATE INDEX idx_recalls_title ON recalls(title);
CREATE INDEX idx_recalls_firm ON recalls(recalling_firm);
CREATE INDEX idx_recalls_number ON recalls(recall_number);
CREATE INDEX idx_manufacturers_slug ON manufacturers(slug);
CREATE INDEX idx_categories_slug ON categories(slug);
"""


def insert_statement(table_name: str, columns: tuple[str, ...]) -> str:
    """Build a positional INSERT statement for a table.

    Args:
        table_name: Target table.
        columns: Column names in insert order.

    Returns:
        Parameterized INSERT SQL.
    """
    placeholders = ", ".join("?" for _ in columns)
    return f"INSERT INTO {table_name} ({', '.join(columns)}) VALUES ({placeholders})"
