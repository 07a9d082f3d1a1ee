"""Snapshot store port - persistence of the merged size table."""

from __future__ import annotations

from typing import Protocol

from sizesnapshot.domain.entities import SizeTable


class SnapshotStorePort(Protocol):
    """Writes and reads the size snapshot artifact."""

    async def write(self, table: SizeTable) -> None:
        """Persist the complete table (replaces any previous snapshot)."""
        ...

    async def read(self) -> SizeTable:
        """Load a previously written snapshot."""
        ...
