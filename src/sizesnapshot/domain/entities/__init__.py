from .bundle_stats import BundleAsset, BundleStats
from .errors import (
    BuildRunnerError,
    InvalidSizeError,
    InvalidUnitError,
    MissingAssetError,
    ReportReadError,
    SizeSnapshotError,
    SnapshotParseError,
    UnsupportedChunkError,
)
from .report import ArtifactKind, FileTypeGlyph, ReportLine, TreeGlyph
from .size_record import UNKNOWN_GZIP, SizeEntry, SizeRecord, SizeTable

__all__ = [
    "UNKNOWN_GZIP",
    "ArtifactKind",
    "BundleAsset",
    "BundleStats",
    "BuildRunnerError",
    "FileTypeGlyph",
    "InvalidSizeError",
    "InvalidUnitError",
    "MissingAssetError",
    "ReportLine",
    "ReportReadError",
    "SizeEntry",
    "SizeRecord",
    "SizeSnapshotError",
    "SizeTable",
    "SnapshotParseError",
    "TreeGlyph",
    "UnsupportedChunkError",
]
