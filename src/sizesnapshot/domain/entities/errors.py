"""Size snapshot exceptions."""

from __future__ import annotations


class SizeSnapshotError(Exception):
    """Base class for all size-snapshot errors."""


class InvalidSizeError(SizeSnapshotError):
    """Raised when a human-readable size cannot be converted to bytes."""


class InvalidUnitError(InvalidSizeError):
    """Raised when a unit carries a metric prefix outside the pretty-bytes vocabulary."""


class MissingAssetError(SizeSnapshotError):
    """Raised when a chunk references an asset absent from the bundler stats."""


class UnsupportedChunkError(SizeSnapshotError):
    """Raised when a chunk maps to more than one asset."""


class BuildRunnerError(SizeSnapshotError):
    """Raised when the bundler build could not produce stats."""


class SnapshotParseError(SizeSnapshotError):
    """Raised when a bundler-plugin snapshot file is unreadable or malformed."""


class ReportReadError(SizeSnapshotError):
    """Raised when the console report of the page build cannot be read."""
