"""Typed source-manifest parsing for recall builds.

This module loads and validates optional YAML files that override the
default ordered list of raw sources. Source order is significant: it is
the concatenation order that fixes slug assignment and first-wins
deduplication.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Sequence, cast, get_args

from core.constants import SOURCE_MANIFEST_VERSION
from core.errors import RecallsDependencyError, RecallsSourceManifestError
from core.taxonomy import agency_ids
from core.types import SourceShape, SourceSpec

SUPPORTED_SOURCE_SHAPES: tuple[str, ...] = get_args(SourceShape)


def load_source_manifest(manifest_path: str) -> tuple[SourceSpec, ...]:
    """Load and validate a YAML source manifest from disk.

    Args:
        manifest_path: File path to YAML source manifest.

    Returns:
        Ordered source specs.

    Raises:
        RecallsDependencyError: If PyYAML is unavailable.
        RecallsSourceManifestError: If file is invalid or schema checks fail.
    """
    payload = _load_yaml_payload(manifest_path)
    root_mapping = _expect_mapping(payload, "source manifest root")
    _validate_root_keys(root_mapping)
    _parse_version(root_mapping)
    return _parse_sources(root_mapping)


def _load_yaml_payload(manifest_path: str) -> object:
    try:
        import yaml  # type: ignore[import-untyped]
    except ImportError as error:  # pragma: no cover - dependency failure
        raise RecallsDependencyError(
            "YAML source manifests require PyYAML. Install with 'pip install pyyaml'."
        ) from error
    manifest_file = Path(manifest_path).expanduser().resolve()
    if not manifest_file.exists():
        raise RecallsSourceManifestError(
            f"Source manifest does not exist at {manifest_file}. Provide a valid YAML file path."
        )
    try:
        payload = cast(object, yaml.safe_load(manifest_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise RecallsSourceManifestError(
            f"Failed to read source manifest at {manifest_file}: {error}. "
            "Check file permissions and retry."
        ) from error
    except yaml.YAMLError as error:
        raise RecallsSourceManifestError(
            f"Failed to parse YAML source manifest at {manifest_file}: {error}. "
            "Fix YAML syntax and retry."
        ) from error
    if payload is None:
        raise RecallsSourceManifestError(
            f"Source manifest at {manifest_file} is empty. Define 'version' and 'sources'."
        )
    return payload


def _expect_mapping(value: object, context: str) -> Mapping[str, object]:
    if isinstance(value, Mapping):
        normalized_mapping = {}
        for key, payload in value.items():
            if not isinstance(key, str):
                raise RecallsSourceManifestError(
                    f"Invalid {context}: expected string keys, got {type(key).__name__}."
                )
            normalized_mapping[key] = payload
        return normalized_mapping
    raise RecallsSourceManifestError(
        f"Invalid {context}: expected object mapping, got {type(value).__name__}."
    )


def _expect_sequence(value: object, context: str) -> Sequence[object]:
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return value
    raise RecallsSourceManifestError(
        f"Invalid {context}: expected list, got {type(value).__name__}."
    )


def _parse_version(root_mapping: Mapping[str, object]) -> int:
    raw_version = root_mapping.get("version")
    if not isinstance(raw_version, int):
        raise RecallsSourceManifestError(
            "Source manifest field 'version' must be an integer. Set version: 1."
        )
    if raw_version != SOURCE_MANIFEST_VERSION:
        raise RecallsSourceManifestError(
            f"Unsupported source manifest version {raw_version}. Use version: 1."
        )
    return raw_version


def _parse_sources(root_mapping: Mapping[str, object]) -> tuple[SourceSpec, ...]:
    raw_sources = root_mapping.get("sources")
    if raw_sources is None:
        raise RecallsSourceManifestError(
            "Source manifest missing required field 'sources'. Add a non-empty list."
        )
    source_rows = _expect_sequence(raw_sources, "source manifest sources")
    if len(source_rows) == 0:
        raise RecallsSourceManifestError(
            "Source manifest field 'sources' must include at least one source."
        )
    parsed_sources = [_parse_source(row, index) for index, row in enumerate(source_rows)]
    _validate_unique_files(parsed_sources)
    return tuple(parsed_sources)


def _parse_source(source_value: object, source_index: int) -> SourceSpec:
    context = f"source #{source_index + 1}"
    source_mapping = _expect_mapping(source_value, context)
    unknown_keys = sorted(set(source_mapping) - {"agency", "file", "shape"})
    if unknown_keys:
        raise RecallsSourceManifestError(
            f"Invalid {context}: unknown fields {', '.join(unknown_keys)}."
        )
    agency = _required_string(source_mapping, "agency", context)
    if agency not in agency_ids():
        raise RecallsSourceManifestError(
            f"Unsupported agency '{agency}' in {context}. "
            f"Use one of: {', '.join(agency_ids())}."
        )
    file_name = _required_string(source_mapping, "file", context)
    shape = _required_string(source_mapping, "shape", context)
    if shape not in SUPPORTED_SOURCE_SHAPES:
        raise RecallsSourceManifestError(
            f"Unsupported shape '{shape}' in {context}. "
            f"Use one of: {', '.join(SUPPORTED_SOURCE_SHAPES)}."
        )
    return SourceSpec(agency=agency, file_name=file_name, shape=cast(SourceShape, shape))


def _required_string(mapping: Mapping[str, object], field_name: str, context: str) -> str:
    raw_value = mapping.get(field_name)
    if isinstance(raw_value, str) and raw_value.strip():
        return raw_value.strip()
    raise RecallsSourceManifestError(
        f"Invalid {context}: field '{field_name}' must be a non-empty string."
    )


def _validate_unique_files(sources: Sequence[SourceSpec]) -> None:
    seen_files: set[str] = set()
    for source in sources:
        if source.file_name in seen_files:
            raise RecallsSourceManifestError(
                f"Source manifest lists '{source.file_name}' more than once. "
                "Each raw file may appear only once."
            )
        seen_files.add(source.file_name)


def _validate_root_keys(root_mapping: Mapping[str, object]) -> None:
    allowed_keys = {"version", "sources"}
    unknown_keys = sorted(set(root_mapping) - allowed_keys)
    if unknown_keys:
        raise RecallsSourceManifestError(
            f"Source manifest contains unknown root fields: {', '.join(unknown_keys)}."
        )
