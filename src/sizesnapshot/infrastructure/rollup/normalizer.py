"""Normalizes rollup-plugin-size-snapshot files into size entries."""

from __future__ import annotations

import asyncio
import json
import os
from pathlib import Path, PurePath
from typing import Any

import structlog

from sizesnapshot.domain.entities import SizeEntry, SizeRecord, SnapshotParseError

log = structlog.get_logger(__name__)


def workspace_relative_key(
    snapshot_path: Path, bundle_path: str, workspace_root: Path
) -> str:
    """Re-express a snapshot-relative bundle path relative to the workspace.

    Paths in the snapshot are relative to the snapshot file itself.
    """
    root = os.path.abspath(workspace_root)
    snapshot = os.path.abspath(os.path.join(root, snapshot_path))
    bundle = os.path.normpath(os.path.join(os.path.dirname(snapshot), bundle_path))
    return PurePath(os.path.relpath(bundle, root)).as_posix()


def normalize_rollup_snapshot(
    snapshot: dict[str, Any], snapshot_path: Path, workspace_root: Path
) -> list[SizeEntry]:
    """Map ``{bundle_path: {minified, gzipped}}`` to size entries."""
    entries: list[SizeEntry] = []
    try:
        for bundle_path, sizes in snapshot.items():
            entries.append(
                (
                    workspace_relative_key(snapshot_path, bundle_path, workspace_root),
                    SizeRecord(parsed=sizes["minified"], gzip=sizes["gzipped"]),
                )
            )
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise SnapshotParseError(
            f"malformed size snapshot {snapshot_path}: {e!r}"
        ) from e
    return entries


def _read_json(path: Path) -> Any:
    with path.open(encoding="utf-8") as fh:
        return json.load(fh)


async def read_rollup_snapshot(
    snapshot_path: Path, workspace_root: Path
) -> list[SizeEntry]:
    """Read and normalize one snapshot file.

    Raises:
        SnapshotParseError: File unreadable, not JSON, or entries malformed.
    """
    path = snapshot_path if snapshot_path.is_absolute() else workspace_root / snapshot_path
    try:
        snapshot = await asyncio.to_thread(_read_json, path)
    except (OSError, ValueError) as e:
        raise SnapshotParseError(f"cannot read size snapshot {path}: {e}") from e
    return normalize_rollup_snapshot(snapshot, path, workspace_root)


class RollupSnapshotSource:
    """SizeSourcePort adapter for one snapshot file location."""

    name = "rollup"

    def __init__(self, snapshot_path: Path, workspace_root: Path):
        self._snapshot_path = snapshot_path
        self._workspace_root = workspace_root

    async def collect(self) -> list[SizeEntry]:
        entries = await read_rollup_snapshot(self._snapshot_path, self._workspace_root)
        log.info(
            "rollup_snapshot_read",
            path=str(self._snapshot_path),
            bundles=len(entries),
        )
        return entries
