"""Bundler stats as seen by the size normalizer."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class BundleAsset:
    name: str  # emitted file name, e.g. "main.3f2a.js"
    size: int  # bytes on disk


@dataclass(frozen=True)
class BundleStats:
    """Subset of a bundler stats object needed for size tracking.

    ``assets_by_chunk_name`` maps a logical chunk name to the emitted asset
    name. Bundlers may emit a list of names per chunk (e.g. with source maps).
    """

    assets: list[BundleAsset] = field(default_factory=list)
    assets_by_chunk_name: dict[str, str | list[str]] = field(default_factory=dict)
