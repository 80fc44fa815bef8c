"""Public SDK surface for PlainRecalls.

This module provides a stable import path for store builders and readers.
It re-exports the primary client and typed option models.
"""

from __future__ import annotations

from core.config import RecallsConfig
from core.source_manifest import load_source_manifest
from core.types import (
    BuildOptions,
    BuildResult,
    Recall,
    RecallPage,
    RecallQuery,
    RecallStatistics,
    SourceSpec,
)
from store.recall_queries import RecallReader
from store.recall_sdk import RecallsClient

__all__ = [
    "BuildOptions",
    "BuildResult",
    "Recall",
    "RecallPage",
    "RecallQuery",
    "RecallReader",
    "RecallStatistics",
    "RecallsClient",
    "RecallsConfig",
    "SourceSpec",
    "load_source_manifest",
]
