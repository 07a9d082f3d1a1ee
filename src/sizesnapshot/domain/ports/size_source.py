"""Size source port - one normalizer family feeding the aggregator."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from sizesnapshot.domain.entities import SizeEntry


@runtime_checkable
class SizeSourcePort(Protocol):
    """Produces canonical size entries from one build output.

    Implementations:
      - WebpackSizeSource (bundler stats object)
      - RollupSnapshotSource (bundler-plugin JSON snapshot)
      - NextReportSource (page-build console output)
    """

    name: str

    async def collect(self) -> list[SizeEntry]:
        """Return all entries of this source. Raises on any failure."""
        ...
