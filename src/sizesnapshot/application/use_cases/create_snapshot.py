"""Size snapshot use case: collect, merge and persist bundle sizes."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable, Sequence

import structlog

from sizesnapshot.domain.entities import SizeEntry, SizeTable
from sizesnapshot.domain.ports import SizeSourcePort, SnapshotStorePort

log = structlog.get_logger(__name__)


def merge_entries(entries: Iterable[SizeEntry]) -> SizeTable:
    """Fold entries into one table. Later entries win on duplicate ids."""
    table: SizeTable = {}
    for key, record in entries:
        if key in table:
            log.debug("snapshot_key_overwritten", key=key)
        table[key] = record
    return table


class CreateSizeSnapshotUseCase:
    """Builds one size snapshot from all configured size sources.

    Flow:
        1. Collect every source concurrently (no data dependencies)
        2. Concatenate entries in source order
        3. Merge into one id -> record table
        4. Write the table (only after every source succeeded)
    """

    def __init__(
        self,
        sources: Sequence[SizeSourcePort],
        store: SnapshotStorePort,
    ):
        """Initialize use case with dependencies.

        Args:
            sources: Size sources, in merge order.
            store: Destination of the merged snapshot.
        """
        self.sources: list[SizeSourcePort] = list(sources)
        self.store: SnapshotStorePort = store

    async def collect(self) -> SizeTable:
        """Collect and merge without persisting.

        Raises:
            SizeSnapshotError: Any source failed; nothing is merged and the
                remaining sources are cancelled.
        """
        tasks = [asyncio.ensure_future(source.collect()) for source in self.sources]
        try:
            results = await asyncio.gather(*tasks)
        except BaseException:
            pending = [task for task in tasks if not task.done()]
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)
            if pending:
                log.debug("size_sources_cancelled", count=len(pending))
            raise
        for source, entries in zip(self.sources, results):
            log.debug("size_source_collected", source=source.name, entries=len(entries))
        return merge_entries(entry for entries in results for entry in entries)

    async def execute(self) -> SizeTable:
        """Collect, merge and persist the snapshot.

        Returns:
            The table that was written.
        """
        table = await self.collect()
        await self.store.write(table)
        log.info("size_snapshot_created", sources=len(self.sources), entries=len(table))
        return table
