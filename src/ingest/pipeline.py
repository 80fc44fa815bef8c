"""Recall build orchestration.

This module coordinates source loading, normalization, classification,
identity assignment, deduplication, aggregation, and the store write
for one full-rebuild batch run.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, replace
from pathlib import Path

from core.config import RecallsConfig
from core.logging_config import get_logger
from core.taxonomy import DEFAULT_SOURCES
from core.types import (
    BuildOptions,
    BuildResult,
    Recall,
    RecallStatistics,
    RecallStoreContents,
    SourceSpec,
)
from ingest.input_reader import ensure_raw_dir, read_source_records
from store.recall_store import RecallStoreWriter
from transforms.aggregation import (
    attach_manufacturer_ids,
    build_manufacturers,
    compute_statistics,
    count_by_agency,
    count_by_category,
)
from transforms.classification import classify_recall
from transforms.identity_assignment import assign_identities
from transforms.recall_deduplication import remove_duplicate_recalls
from transforms.source_normalizers import normalize_records

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class AggregatedRecalls:
    """Aggregation output handed to the store writer."""

    contents: RecallStoreContents
    statistics: RecallStatistics


class RecallBuildRunner:
    """Runner for one full recall store rebuild."""

    def __init__(self, options: BuildOptions, config: RecallsConfig) -> None:
        self._config = _apply_overrides(config, options)
        self._sources = options.sources or DEFAULT_SOURCES

    def run(self) -> BuildResult:
        """Execute the build and return its summary."""
        ensure_raw_dir(self._config.raw_dir)
        classified = self._load_classified_records()
        # A fresh slug set per run keeps assignment reproducible.
        identified = assign_identities(classified, set())
        deduplicated = remove_duplicate_recalls(identified)
        _LOGGER.info(
            "recalls_deduplicated",
            input_count=len(identified),
            output_count=len(deduplicated),
            dropped_count=len(identified) - len(deduplicated),
        )
        aggregated = aggregate_recalls(deduplicated)
        writer = RecallStoreWriter(self._config.db_path, self._config.batch_size)
        db_path = writer.write(aggregated.contents)
        result = BuildResult(
            db_path=db_path,
            input_count=len(classified),
            recall_count=len(aggregated.contents.recalls),
            manufacturer_count=len(aggregated.contents.manufacturers),
            agency_counts=aggregated.contents.agency_counts,
            category_counts=aggregated.contents.category_counts,
            statistics=aggregated.statistics,
        )
        _log_build_completion(result)
        return result

    def _load_classified_records(self) -> list[Recall]:
        """Normalize and classify every source, preserving source order."""
        worker_count = min(self._config.normalize_workers, max(len(self._sources), 1))
        with ThreadPoolExecutor(max_workers=worker_count) as executor:
            batches = list(executor.map(self._load_source, self._sources))
        return [record for batch in batches for record in batch]

    def _load_source(self, source: SourceSpec) -> list[Recall]:
        raw_records = read_source_records(self._config.raw_dir, source)
        normalized = normalize_records(source.shape, source.agency, raw_records)
        classified = [classify_recall(record) for record in normalized]
        _LOGGER.info(
            "records_normalized",
            agency=source.agency,
            shape=source.shape,
            record_count=len(classified),
        )
        return classified


def build_recall_store(options: BuildOptions, config: RecallsConfig) -> BuildResult:
    """Run the full recall build and replace the store.

    Args:
        options: Build request options.
        config: Runtime configuration.

    Returns:
        Build summary.

    Raises:
        RecallsIngestError: If the raw source directory is missing.
        RecallsStoreError: If writing the store fails.
    """
    runner = RecallBuildRunner(options, config)
    return runner.run()


def aggregate_recalls(recalls: list[Recall]) -> AggregatedRecalls:
    """Build manufacturer roll-ups, counts, and statistics.

    Args:
        recalls: Deduplicated recalls.

    Returns:
        Store contents plus global statistics.
    """
    manufacturers = build_manufacturers(recalls)
    linked = attach_manufacturer_ids(recalls, manufacturers)
    contents = RecallStoreContents(
        recalls=tuple(linked),
        manufacturers=tuple(manufacturers),
        category_counts=count_by_category(linked),
        agency_counts=count_by_agency(linked),
    )
    return AggregatedRecalls(contents=contents, statistics=compute_statistics(linked))


def _apply_overrides(config: RecallsConfig, options: BuildOptions) -> RecallsConfig:
    """Apply per-build option overrides onto runtime config."""
    overrides: dict[str, object] = {}
    if options.raw_dir is not None:
        overrides["raw_dir"] = Path(options.raw_dir).expanduser().resolve()
    if options.db_path is not None:
        overrides["db_path"] = Path(options.db_path).expanduser().resolve()
    if options.batch_size is not None:
        overrides["batch_size"] = options.batch_size
    return replace(config, **overrides)


def _log_build_completion(result: BuildResult) -> None:
    """Log build completion with contextual metadata."""
    _LOGGER.info(
        "build_completed",
        db_path=str(result.db_path),
        input_count=result.input_count,
        recall_count=result.recall_count,
        manufacturer_count=result.manufacturer_count,
        agency_counts=dict(result.agency_counts),
        year_min=result.statistics.year_min,
        year_max=result.statistics.year_max,
    )
