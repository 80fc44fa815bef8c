"""Python SDK for recall store operations.

This module exposes high-level APIs for building the store and
reading it back through the read-query interface.
"""

from __future__ import annotations

from core.config import RecallsConfig
from core.types import BuildOptions, BuildResult, RecallStatistics
from ingest.pipeline import build_recall_store
from store.recall_queries import RecallReader


class RecallsClient:
    """Primary SDK entry point for recall store workflows."""

    def __init__(self, config: RecallsConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or RecallsConfig.from_env()

    @property
    def config(self) -> RecallsConfig:
        """Return the runtime configuration."""
        return self._config

    def build(self, options: BuildOptions | None = None) -> BuildResult:
        """Rebuild the recall store from raw source files.

        Args:
            options: Optional per-build overrides.

        Returns:
            Build summary.

        Raises:
            RecallsIngestError: If the raw source directory is missing.
            RecallsStoreError: If writing the store fails.
        """
        return build_recall_store(options or BuildOptions(), self._config)

    def reader(self) -> RecallReader:
        """Open the configured store for read queries.

        Returns:
            Read-only query facade; close it when done.

        Raises:
            RecallsStoreError: If the store does not exist.
        """
        return RecallReader(self._config.db_path)

    def statistics(self) -> RecallStatistics:
        """Return precomputed statistics of the configured store."""
        with self.reader() as reader:
            return reader.read_statistics()
