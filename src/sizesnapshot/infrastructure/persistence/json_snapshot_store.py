"""Size snapshot store backed by a pretty-printed JSON file."""

from __future__ import annotations

import asyncio
import json
import os
from pathlib import Path

import structlog

from sizesnapshot.domain.entities import SizeRecord, SizeTable

log = structlog.get_logger(__name__)


def serialize_table(table: SizeTable) -> str:
    """Serialize a size table to JSON (2-space indent, insertion order)."""
    data = {key: record.to_dict() for key, record in table.items()}
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def deserialize_table(raw: str) -> SizeTable:
    """Parse a size table previously produced by serialize_table()."""
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError(f"size snapshot must be a JSON object, got: {type(data)!r}")
    return {key: SizeRecord.from_dict(value) for key, value in data.items()}


class JsonSnapshotStore:
    """Writes the merged table to a single JSON file.

    The file is replaced atomically so readers never see a partial snapshot.
    """

    def __init__(self, path: Path):
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def _write_sync(self, payload: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_name(f".{self._path.name}.tmp")
        try:
            tmp_path.write_text(payload, encoding="utf-8")
            os.replace(tmp_path, self._path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise

    async def write(self, table: SizeTable) -> None:
        payload = serialize_table(table)
        await asyncio.to_thread(self._write_sync, payload)
        log.info("snapshot_written", path=str(self._path), entries=len(table))

    async def read(self) -> SizeTable:
        raw = await asyncio.to_thread(self._path.read_text, encoding="utf-8")
        return deserialize_table(raw)
