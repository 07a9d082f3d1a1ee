"""Size source for the page-build (``next build``) console report."""

from __future__ import annotations

from .classifier import NextReportRules, classify_page_url
from .normalizer import NextReportSource, normalize_next_report, read_next_report
from .scanner import PAGE_REPORT_PATTERN, scan_report

__all__ = [
    "PAGE_REPORT_PATTERN",
    "NextReportRules",
    "NextReportSource",
    "classify_page_url",
    "normalize_next_report",
    "read_next_report",
    "scan_report",
]
