"""Shared test fixtures for sizesnapshot test suite."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable
from unittest.mock import AsyncMock

import pytest

from sizesnapshot.domain.entities import SizeEntry, SizeRecord
from sizesnapshot.infrastructure.nextjs import NextReportRules

# ---------------------------------------------------------------------------
# Raw build outputs
# ---------------------------------------------------------------------------

NEXT_BUILD_OUTPUT = """\
> next build

Creating an optimized production build...
Compiled successfully.

Automatically optimizing pages...

Page                                                           Size     First Load JS
┌ ○ /                                                          2.3 kB         160 kB
├ ○ /about                                                     1.1 kB         159 kB
├ ● /blog/[slug]                                               812 B          158 kB
└ λ /api/search                                                0 B            157 kB
+ First Load JS shared by all                                  157 kB
  ├ static/pages/_app.js                                       10 kB
  ├ chunks/commons.5b2f09a1.js                                 40.2 kB
  ├ chunks/framework.c6faae25.js                               41.8 kB
  ├ chunks/0c3b5a87f2.4e5d1c.js                                1 kB
  ├ chunks/9f1de4a3bb.0a1b2c.js                                2 kB
  ├ runtime/main.1a2b3c4d.js                                   6.4 kB
  └ runtime/webpack.7f8e9d0c.js                                746 B

λ  (Server)  server-side renders at runtime (uses getInitialProps or getServerSideProps)
○  (Static)  automatically rendered as static HTML (uses no initial props)
●  (SSG)     automatically generated as static HTML + JSON (uses getStaticProps)
"""


@pytest.fixture()
def next_build_output() -> str:
    """Console output of a docs build with pages, named and hashed chunks."""
    return NEXT_BUILD_OUTPUT


@pytest.fixture()
def next_rules() -> NextReportRules:
    return NextReportRules()


@pytest.fixture()
def webpack_stats_json() -> dict[str, Any]:
    """Minimal webpack ``--json`` stats with gzip siblings for every asset."""
    return {
        "hash": "4e1b5c0f",
        "version": "4.41.2",
        "assets": [
            {"name": "@material-ui/core.js", "size": 91234, "chunks": [0]},
            {"name": "@material-ui/core.js.gz", "size": 25012, "chunks": []},
            {"name": "@material-ui/lab.js", "size": 31002, "chunks": [1]},
            {"name": "@material-ui/lab.js.gz", "size": 9021, "chunks": []},
        ],
        "assetsByChunkName": {
            "@material-ui/core": "@material-ui/core.js",
            "@material-ui/lab": "@material-ui/lab.js",
        },
        "chunks": [{"id": 0}, {"id": 1}],
        "modules": [],
    }


@pytest.fixture()
def workspace(tmp_path: Path, webpack_stats_json: dict[str, Any]) -> Path:
    """Workspace laid out like the monorepo the snapshot is taken from."""
    root = tmp_path / "workspace"

    snapshot = root / "packages" / "material-ui" / "size-snapshot.json"
    snapshot.parent.mkdir(parents=True)
    snapshot.write_text(
        json.dumps(
            {
                "build/umd/material-ui.production.min.js": {
                    "bundled": 1273548,
                    "minified": 320153,
                    "gzipped": 88761,
                },
                "build/esm/index.js": {
                    "bundled": 156273,
                    "minified": 94125,
                    "gzipped": 23856,
                },
            }
        ),
        encoding="utf-8",
    )

    build_dir = root / "scripts" / "sizeSnapshot" / "build"
    build_dir.mkdir(parents=True)
    (build_dir / "docs.next").write_text(NEXT_BUILD_OUTPUT, encoding="utf-8")
    (root / "webpack-stats.json").write_text(
        json.dumps(webpack_stats_json), encoding="utf-8"
    )
    return root


# ---------------------------------------------------------------------------
# Mock port fixtures
# ---------------------------------------------------------------------------


def _make_source(name: str, entries: list[SizeEntry]) -> AsyncMock:
    source = AsyncMock()
    source.name = name
    source.collect.return_value = entries
    return source


@pytest.fixture()
def make_source() -> Callable[[str, list[SizeEntry]], AsyncMock]:
    """Factory for mock SizeSourcePorts returning fixed entries."""
    return _make_source


@pytest.fixture()
def mock_store() -> AsyncMock:
    """Mock SnapshotStorePort."""
    store = AsyncMock()
    store.write.return_value = None
    return store


@pytest.fixture()
def sample_entries() -> list[SizeEntry]:
    return [
        ("@material-ui/core", SizeRecord(parsed=91234, gzip=25012)),
        ("docs.landing", SizeRecord(parsed=2300, gzip=-1)),
        ("docs:chunk:shared", SizeRecord(parsed=3000, gzip=-1, tally=2)),
    ]
