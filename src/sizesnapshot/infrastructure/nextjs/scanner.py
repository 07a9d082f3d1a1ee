"""Lazy scanner for the page-size report printed by ``next build``.

The console output is noisy free text. Only lines shaped like

    ├ ○ /about                  2.3 kB

are extracted; everything else is skipped without error. Glyph handling
stays in this module so the rest of the pipeline only sees ReportLine.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from sizesnapshot.domain.entities import FileTypeGlyph, ReportLine, TreeGlyph


def _alternation(glyphs: type[TreeGlyph] | type[FileTypeGlyph]) -> str:
    return "|".join(re.escape(g.value) for g in glyphs)


# Separators are horizontal whitespace only; a match never spans two lines.
PAGE_REPORT_PATTERN: re.Pattern[str] = re.compile(
    rf"(?P<treeViewPresentation>{_alternation(TreeGlyph)})[^\S\r\n]+"
    rf"(?:(?P<fileType>{_alternation(FileTypeGlyph)})[^\S\r\n]+)?"
    r"(?P<pageUrl>\S+)[^\S\r\n]+"
    r"(?P<sizeFormatted>[0-9.]+)[^\S\r\n]+"
    r"(?P<sizeUnit>\w+)",
    re.MULTILINE,
)


def _to_report_line(match: re.Match[str]) -> ReportLine:
    file_type = match.group("fileType")
    return ReportLine(
        presentation=TreeGlyph(match.group("treeViewPresentation")),
        file_type=FileTypeGlyph(file_type) if file_type else None,
        page_url=match.group("pageUrl"),
        size_formatted=match.group("sizeFormatted"),
        size_unit=match.group("sizeUnit"),
    )


def scan_report(
    text: str, pattern: re.Pattern[str] = PAGE_REPORT_PATTERN
) -> Iterator[ReportLine]:
    """Yield every report line found in ``text``, left to right.

    Each call starts a fresh scan. Matches never overlap.
    """
    for match in pattern.finditer(text):
        yield _to_report_line(match)
