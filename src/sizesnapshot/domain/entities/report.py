"""Domain entities for the page-build console report.

Pure value objects, no framework dependencies, no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TreeGlyph(str, Enum):
    """Tree-view marker in front of a report line (only categorizes the line)."""

    TOP = "┌"
    BRANCH = "├"
    BOTTOM = "└"
    TRIANGLE = "▲"
    BULLET = "●"


class FileTypeGlyph(str, Enum):
    """Rendering-mode marker printed between tree glyph and page url."""

    STATIC = "○"
    STATIC_PROPS = "●"
    SERVER = "λ"


class ArtifactKind(Enum):
    """Closed set of artifact categories a report line can describe.

    Order of the members is the order in which they are matched.
    """

    LANDING = "landing"
    APP_SHELL = "app_shell"
    RUNTIME_MAIN = "runtime_main"
    RUNTIME_WEBPACK = "runtime_webpack"
    COMMONS_CHUNK = "commons_chunk"
    FRAMEWORK_CHUNK = "framework_chunk"
    ANONYMOUS_CHUNK = "anonymous_chunk"
    PAGE = "page"


@dataclass(frozen=True)
class ReportLine:
    """One size line extracted from the console report."""

    presentation: TreeGlyph
    page_url: str
    size_formatted: str  # e.g. "2.3"
    size_unit: str  # e.g. "kB"
    file_type: FileTypeGlyph | None = None
