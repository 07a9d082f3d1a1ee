"""Tests for the next build report normalizer."""

from __future__ import annotations

from pathlib import Path

import pytest

from sizesnapshot.domain.entities import (
    InvalidUnitError,
    ReportReadError,
    SizeRecord,
)
from sizesnapshot.infrastructure.nextjs import (
    NextReportRules,
    NextReportSource,
    normalize_next_report,
    read_next_report,
)


class TestNormalizeNextReport:
    def test_landing_app_shell_and_shared_pool(self, next_rules: NextReportRules) -> None:
        text = (
            "┌ ○ /                       2.3 kB\n"
            "  ├ static/pages/_app.js    10 kB\n"
            "  ├ chunks/abc.js           1 kB\n"
            "  └ chunks/def.js           2 kB\n"
        )
        entries = normalize_next_report(text, next_rules)

        assert entries == [
            ("docs.landing", SizeRecord(parsed=2300, gzip=-1)),
            ("docs.main", SizeRecord(parsed=10000, gzip=-1)),
            ("docs:chunk:shared", SizeRecord(parsed=3000, gzip=-1, tally=2)),
        ]

    def test_hashed_chunks_have_no_individual_entry(
        self, next_rules: NextReportRules
    ) -> None:
        text = "├ chunks/abc.js 1 kB\n├ chunks/def.js 2 kB\n"
        keys = [key for key, _ in normalize_next_report(text, next_rules)]
        assert keys == ["docs:chunk:shared"]

    def test_empty_pool_still_emits_aggregate(self, next_rules: NextReportRules) -> None:
        entries = normalize_next_report("nothing to see here\n", next_rules)
        assert entries == [
            ("docs:chunk:shared", SizeRecord(parsed=0, gzip=-1, tally=0)),
        ]

    def test_full_build_output(
        self, next_build_output: str, next_rules: NextReportRules
    ) -> None:
        table = dict(normalize_next_report(next_build_output, next_rules))

        assert table == {
            "docs.landing": SizeRecord(parsed=2300, gzip=-1),
            "docs:/about": SizeRecord(parsed=1100, gzip=-1),
            "docs:/blog/[slug]": SizeRecord(parsed=812, gzip=-1),
            "docs:/api/search": SizeRecord(parsed=0, gzip=-1),
            "docs.main": SizeRecord(parsed=10000, gzip=-1),
            "docs:shared:chunk/commons": SizeRecord(parsed=40200, gzip=-1),
            "docs:shared:chunk/framework": SizeRecord(parsed=41800, gzip=-1),
            "docs:shared:runtime/main": SizeRecord(parsed=6400, gzip=-1),
            "docs:shared:runtime/webpack": SizeRecord(parsed=746, gzip=-1),
            "docs:chunk:shared": SizeRecord(parsed=3000, gzip=-1, tally=2),
        }

    def test_aggregate_is_last(
        self, next_build_output: str, next_rules: NextReportRules
    ) -> None:
        entries = normalize_next_report(next_build_output, next_rules)
        assert entries[-1][0] == "docs:chunk:shared"

    def test_hash_variants_collapse_to_one_id(self, next_rules: NextReportRules) -> None:
        text = "├ runtime/main.aaa.js 1 kB\n├ runtime/main.bbb.js 2 kB\n"
        keys = [key for key, _ in normalize_next_report(text, next_rules)]
        assert keys.count("docs:shared:runtime/main") == 2

    def test_invalid_unit_propagates(self, next_rules: NextReportRules) -> None:
        with pytest.raises(InvalidUnitError):
            normalize_next_report("├ /about 2 XB\n", next_rules)


class TestReadNextReport:
    @pytest.mark.asyncio
    async def test_reads_utf8_file(
        self, tmp_path: Path, next_build_output: str, next_rules: NextReportRules
    ) -> None:
        report = tmp_path / "docs.next"
        report.write_text(next_build_output, encoding="utf-8")

        entries = await read_next_report(report, next_rules)
        assert dict(entries)["docs.landing"] == SizeRecord(parsed=2300, gzip=-1)

    @pytest.mark.asyncio
    async def test_missing_file_raises_report_read_error(
        self, tmp_path: Path, next_rules: NextReportRules
    ) -> None:
        with pytest.raises(ReportReadError, match="docs.next"):
            await read_next_report(tmp_path / "docs.next", next_rules)

    @pytest.mark.asyncio
    async def test_undecodable_file_raises_report_read_error(
        self, tmp_path: Path, next_rules: NextReportRules
    ) -> None:
        report = tmp_path / "docs.next"
        report.write_bytes(b"\xff\xfe\xfa not utf-8")
        with pytest.raises(ReportReadError):
            await read_next_report(report, next_rules)


class TestNextReportSource:
    @pytest.mark.asyncio
    async def test_collect(self, tmp_path: Path, next_build_output: str) -> None:
        report = tmp_path / "docs.next"
        report.write_text(next_build_output, encoding="utf-8")

        source = NextReportSource(report)
        entries = await source.collect()

        assert source.name == "next"
        assert len(entries) == 10
        assert entries[-1] == (
            "docs:chunk:shared",
            SizeRecord(parsed=3000, gzip=-1, tally=2),
        )
