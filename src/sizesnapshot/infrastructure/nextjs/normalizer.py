"""Normalizes the ``next build`` page-size report into size entries."""

from __future__ import annotations

import asyncio
from pathlib import Path

import structlog

from sizesnapshot.domain.entities import (
    UNKNOWN_GZIP,
    ArtifactKind,
    ReportReadError,
    SizeEntry,
    SizeRecord,
)
from sizesnapshot.infrastructure.common import pretty_bytes_inverse

from .classifier import NextReportRules, classify_page_url
from .scanner import scan_report

log = structlog.get_logger(__name__)


def normalize_next_report(text: str, rules: NextReportRules) -> list[SizeEntry]:
    """Convert console output of ``next build`` into size entries.

    Hash-named chunks are not tracked individually. Their sizes are summed
    into one aggregate entry (``rules.shared_chunk_id``) that is always
    emitted, with ``tally`` counting the folded chunks. The console report
    has no compressed sizes, so every gzip value is unknown.
    """
    entries: list[SizeEntry] = []
    shared_chunks: list[int] = []

    for line in scan_report(text):
        size = pretty_bytes_inverse(line.size_formatted, line.size_unit)
        kind = classify_page_url(line.page_url, rules)
        if kind is ArtifactKind.ANONYMOUS_CHUNK:
            shared_chunks.append(size)
            continue
        entries.append(
            (
                rules.snapshot_id(kind, line.page_url),
                SizeRecord(parsed=size, gzip=UNKNOWN_GZIP),
            )
        )

    entries.append(
        (
            rules.shared_chunk_id,
            SizeRecord(
                parsed=sum(shared_chunks),
                gzip=UNKNOWN_GZIP,
                tally=len(shared_chunks),
            ),
        )
    )
    return entries


async def read_next_report(path: Path, rules: NextReportRules) -> list[SizeEntry]:
    """Read the captured console output at ``path`` and normalize it."""
    try:
        text = await asyncio.to_thread(path.read_text, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ReportReadError(f"cannot read page report {path}: {e}") from e
    return normalize_next_report(text, rules)


class NextReportSource:
    """SizeSourcePort adapter for the captured ``next build`` output."""

    name = "next"

    def __init__(self, report_path: Path, rules: NextReportRules | None = None):
        self._report_path = report_path
        self._rules = rules or NextReportRules()

    async def collect(self) -> list[SizeEntry]:
        entries = await read_next_report(self._report_path, self._rules)
        shared = entries[-1][1]
        log.info(
            "next_report_parsed",
            path=str(self._report_path),
            entries=len(entries),
            shared_chunks=shared.tally,
        )
        return entries
