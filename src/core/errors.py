"""PlainRecalls exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class RecallsError(Exception):
    """Base exception for all PlainRecalls failures."""


class RecallsConfigError(RecallsError):
    """Raised for invalid runtime configuration."""


class RecallsSourceManifestError(RecallsError):
    """Raised for invalid or unsupported source manifest files."""


class RecallsIngestError(RecallsError):
    """Raised when raw source inputs cannot be located."""


class RecallsStoreError(RecallsError):
    """Raised for recall store build and read failures."""


class RecallsDependencyError(RecallsError):
    """Raised when an optional runtime dependency is missing."""
