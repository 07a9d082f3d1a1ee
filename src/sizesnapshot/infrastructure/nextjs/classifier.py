"""Maps page urls of the page-build report to stable snapshot ids."""

from __future__ import annotations

import re
from dataclasses import dataclass

from sizesnapshot.domain.entities import ArtifactKind


@dataclass(frozen=True)
class NextReportRules:
    """Identifiers and url patterns used to name report entries.

    Chunk file names contain a content hash which makes them unsuitable
    for tracking, so well-known chunks are collapsed onto stable ids.
    The landing page and the app shell keep the ids they had before the
    report was parsed automatically.
    """

    prefix: str = "docs"
    landing_url: str = "/"
    landing_id: str = "docs.landing"
    app_shell_url: str = "static/pages/_app.js"
    app_shell_id: str = "docs.main"
    runtime_main_pattern: re.Pattern[str] = re.compile(r"^runtime/main\.(.+)\.js$")
    runtime_main_id: str = "docs:shared:runtime/main"
    runtime_webpack_pattern: re.Pattern[str] = re.compile(
        r"^runtime/webpack\.(.+)\.js$"
    )
    runtime_webpack_id: str = "docs:shared:runtime/webpack"
    commons_chunk_pattern: re.Pattern[str] = re.compile(r"^chunks/commons\.(.+)\.js$")
    commons_chunk_id: str = "docs:shared:chunk/commons"
    framework_chunk_pattern: re.Pattern[str] = re.compile(
        r"^chunks/framework\.(.+)\.js$"
    )
    framework_chunk_id: str = "docs:shared:chunk/framework"
    anonymous_chunk_pattern: re.Pattern[str] = re.compile(r"^chunks/(.*)\.js$")
    shared_chunk_id: str = "docs:chunk:shared"

    def snapshot_id(self, kind: ArtifactKind, page_url: str) -> str:
        """Return the snapshot id for a classified page url.

        Raises:
            ValueError: ``kind`` is ANONYMOUS_CHUNK (only tracked in aggregate).
        """
        if kind is ArtifactKind.PAGE:
            return f"{self.prefix}:{page_url}"
        if kind is ArtifactKind.ANONYMOUS_CHUNK:
            raise ValueError("anonymous chunks have no individual snapshot id")
        fixed_ids = {
            ArtifactKind.LANDING: self.landing_id,
            ArtifactKind.APP_SHELL: self.app_shell_id,
            ArtifactKind.RUNTIME_MAIN: self.runtime_main_id,
            ArtifactKind.RUNTIME_WEBPACK: self.runtime_webpack_id,
            ArtifactKind.COMMONS_CHUNK: self.commons_chunk_id,
            ArtifactKind.FRAMEWORK_CHUNK: self.framework_chunk_id,
        }
        return fixed_ids[kind]


def classify_page_url(page_url: str, rules: NextReportRules) -> ArtifactKind:
    """Classify a report page url. First matching rule wins."""
    if page_url == rules.landing_url:
        return ArtifactKind.LANDING
    if page_url == rules.app_shell_url:
        return ArtifactKind.APP_SHELL

    patterned = (
        (rules.runtime_main_pattern, ArtifactKind.RUNTIME_MAIN),
        (rules.runtime_webpack_pattern, ArtifactKind.RUNTIME_WEBPACK),
        (rules.commons_chunk_pattern, ArtifactKind.COMMONS_CHUNK),
        (rules.framework_chunk_pattern, ArtifactKind.FRAMEWORK_CHUNK),
        # must stay last: also matches the named chunks above
        (rules.anonymous_chunk_pattern, ArtifactKind.ANONYMOUS_CHUNK),
    )
    for pattern, kind in patterned:
        if pattern.search(page_url):
            return kind

    return ArtifactKind.PAGE
