"""Size source for rollup size-snapshot files."""

from __future__ import annotations

from .normalizer import (
    RollupSnapshotSource,
    normalize_rollup_snapshot,
    read_rollup_snapshot,
    workspace_relative_key,
)

__all__ = [
    "RollupSnapshotSource",
    "normalize_rollup_snapshot",
    "read_rollup_snapshot",
    "workspace_relative_key",
]
