"""Size source for webpack-built bundles."""

from __future__ import annotations

from .models import WebpackAsset, WebpackStats
from .normalizer import WebpackSizeSource, normalize_bundle_stats
from .runner import WebpackCliRunner, WebpackStatsFileRunner

__all__ = [
    "WebpackAsset",
    "WebpackCliRunner",
    "WebpackSizeSource",
    "WebpackStats",
    "WebpackStatsFileRunner",
    "normalize_bundle_stats",
]
