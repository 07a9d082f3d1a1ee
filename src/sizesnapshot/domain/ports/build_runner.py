"""Build runner port - black box producing bundler stats."""

from __future__ import annotations

from typing import Protocol

from sizesnapshot.domain.entities import BundleStats


class BuildRunnerPort(Protocol):
    """Runs (or replays) a bundler build and returns its stats object."""

    async def stats(self) -> BundleStats:
        """Build and return stats. Raises BuildRunnerError on failure."""
        ...
