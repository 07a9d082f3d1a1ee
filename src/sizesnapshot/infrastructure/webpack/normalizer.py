"""Normalizes a bundler stats object into size entries."""

from __future__ import annotations

import structlog

from sizesnapshot.domain.entities import (
    BundleAsset,
    BundleStats,
    MissingAssetError,
    SizeEntry,
    SizeRecord,
    UnsupportedChunkError,
)
from sizesnapshot.domain.ports import BuildRunnerPort

log = structlog.get_logger(__name__)

DEFAULT_COMPRESSED_SUFFIX = ".gz"


def _single_asset_name(chunk_name: str, asset_names: str | list[str]) -> str:
    if isinstance(asset_names, str):
        return asset_names
    if len(asset_names) == 1:
        return asset_names[0]
    raise UnsupportedChunkError(
        f"chunk '{chunk_name}' maps to {len(asset_names)} assets "
        f"({', '.join(asset_names)}); only single-asset chunks are tracked"
    )


def _lookup(assets: dict[str, BundleAsset], name: str, chunk_name: str) -> BundleAsset:
    try:
        return assets[name]
    except KeyError:
        raise MissingAssetError(
            f"asset '{name}' of chunk '{chunk_name}' not found in stats"
        ) from None


def normalize_bundle_stats(
    stats: BundleStats,
    *,
    compressed_suffix: str = DEFAULT_COMPRESSED_SUFFIX,
) -> list[SizeEntry]:
    """Emit one entry per chunk, keyed by chunk name.

    ``parsed`` is the size of the chunk's asset, ``gzip`` the size of the
    compressed sibling (asset name + ``compressed_suffix``). Both assets
    must be present in the stats.
    """
    assets = {asset.name: asset for asset in stats.assets}

    entries: list[SizeEntry] = []
    for chunk_name, asset_names in stats.assets_by_chunk_name.items():
        asset_name = _single_asset_name(chunk_name, asset_names)
        parsed = _lookup(assets, asset_name, chunk_name)
        compressed = _lookup(assets, f"{asset_name}{compressed_suffix}", chunk_name)
        entries.append(
            (chunk_name, SizeRecord(parsed=parsed.size, gzip=compressed.size))
        )
    return entries


class WebpackSizeSource:
    """SizeSourcePort adapter: runs the bundler and normalizes its stats."""

    name = "webpack"

    def __init__(
        self,
        runner: BuildRunnerPort,
        *,
        compressed_suffix: str = DEFAULT_COMPRESSED_SUFFIX,
    ):
        self._runner = runner
        self._compressed_suffix = compressed_suffix

    async def collect(self) -> list[SizeEntry]:
        stats = await self._runner.stats()
        entries = normalize_bundle_stats(
            stats, compressed_suffix=self._compressed_suffix
        )
        log.info("webpack_sizes_collected", chunks=len(entries))
        return entries
