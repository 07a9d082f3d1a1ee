"""Build runners producing webpack stats.

The full stats of the docs build are several hundred megabytes, so the
CLI runner keeps the ``--json`` output in memory instead of writing a
stats file next to the build.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from contextlib import suppress
from pathlib import Path

import structlog
from pydantic import ValidationError

from sizesnapshot.domain.entities import BuildRunnerError, BundleStats

from .models import WebpackStats

log = structlog.get_logger(__name__)

_STDERR_TAIL_CHARS = 2000


async def _ensure_scratch_dir(scratch_dir: Path) -> None:
    await asyncio.to_thread(scratch_dir.mkdir, parents=True, exist_ok=True)


def _parse_stats(raw: str | bytes, origin: str) -> BundleStats:
    try:
        return WebpackStats.model_validate_json(raw).to_entity()
    except ValidationError as e:
        raise BuildRunnerError(f"invalid webpack stats from {origin}: {e}") from e


class WebpackCliRunner:
    """Runs the webpack CLI as a subprocess and parses its JSON stats."""

    def __init__(self, command: Sequence[str], *, cwd: Path, scratch_dir: Path):
        if not command:
            raise ValueError("webpack command must not be empty")
        self._command = list(command)
        self._cwd = cwd
        self._scratch_dir = scratch_dir

    async def stats(self) -> BundleStats:
        await _ensure_scratch_dir(self._scratch_dir)

        log.info("webpack_build_started", command=self._command, cwd=str(self._cwd))
        try:
            proc = await asyncio.create_subprocess_exec(
                *self._command,
                cwd=self._cwd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise BuildRunnerError(f"cannot start webpack: {e}") from e

        try:
            stdout, stderr = await proc.communicate()
        except BaseException:
            # cancelled or interrupted: the build must not outlive the run
            if proc.returncode is None:
                with suppress(ProcessLookupError):
                    proc.kill()
                await proc.wait()
                log.warning("webpack_build_killed", pid=proc.pid)
            raise
        if proc.returncode != 0:
            tail = stderr.decode("utf-8", errors="replace")[-_STDERR_TAIL_CHARS:]
            raise BuildRunnerError(
                f"webpack exited with status {proc.returncode}: {tail}"
            )

        log.info("webpack_build_finished", stats_bytes=len(stdout))
        return _parse_stats(stdout, "webpack --json")


class WebpackStatsFileRunner:
    """Replays a stats file produced by an earlier ``webpack --json`` run."""

    def __init__(self, stats_file: Path, *, scratch_dir: Path):
        self._stats_file = stats_file
        self._scratch_dir = scratch_dir

    async def stats(self) -> BundleStats:
        await _ensure_scratch_dir(self._scratch_dir)
        try:
            raw = await asyncio.to_thread(self._stats_file.read_bytes)
        except OSError as e:
            raise BuildRunnerError(
                f"cannot read webpack stats {self._stats_file}: {e}"
            ) from e
        log.debug("webpack_stats_loaded", path=str(self._stats_file))
        return _parse_stats(raw, str(self._stats_file))
