"""Common infrastructure utilities."""

from __future__ import annotations

from .parsers import METRIC_PREFIXES, pretty_bytes_inverse

__all__ = [
    "METRIC_PREFIXES",
    "pretty_bytes_inverse",
]
