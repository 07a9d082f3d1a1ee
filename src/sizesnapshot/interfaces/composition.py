"""Composition root: wires size sources and the snapshot store from config."""

from __future__ import annotations

import structlog

from sizesnapshot.application.use_cases import CreateSizeSnapshotUseCase
from sizesnapshot.domain.ports import BuildRunnerPort, SizeSourcePort
from sizesnapshot.infrastructure.config import AppConfig
from sizesnapshot.infrastructure.nextjs import NextReportSource
from sizesnapshot.infrastructure.persistence.json_snapshot_store import (
    JsonSnapshotStore,
)
from sizesnapshot.infrastructure.rollup import RollupSnapshotSource
from sizesnapshot.infrastructure.webpack import (
    WebpackCliRunner,
    WebpackSizeSource,
    WebpackStatsFileRunner,
)

log = structlog.get_logger(__name__)


def build_build_runner(config: AppConfig) -> BuildRunnerPort:
    """Replay a stats file when configured, otherwise run webpack."""
    scratch_dir = config.resolve(config.scratch_dir)
    if config.webpack_stats_file is not None:
        return WebpackStatsFileRunner(
            config.resolve(config.webpack_stats_file), scratch_dir=scratch_dir
        )
    return WebpackCliRunner(
        config.webpack_command, cwd=config.workspace_root, scratch_dir=scratch_dir
    )


def build_sources(config: AppConfig) -> list[SizeSourcePort]:
    """Size sources in merge order: webpack, rollup snapshots, next report."""
    sources: list[SizeSourcePort] = []

    if config.webpack_enabled:
        sources.append(
            WebpackSizeSource(
                build_build_runner(config),
                compressed_suffix=config.webpack_compressed_suffix,
            )
        )

    for snapshot_path in config.rollup_snapshots:
        sources.append(RollupSnapshotSource(snapshot_path, config.workspace_root))

    if config.next_enabled:
        sources.append(
            NextReportSource(
                config.resolve(config.next_report_file),
                config.next_rules.to_rules(),
            )
        )

    log.debug("size_sources_built", sources=[s.name for s in sources])
    return sources


def build_use_case(config: AppConfig) -> CreateSizeSnapshotUseCase:
    return CreateSizeSnapshotUseCase(
        sources=build_sources(config),
        store=JsonSnapshotStore(config.resolve(config.output_path)),
    )
