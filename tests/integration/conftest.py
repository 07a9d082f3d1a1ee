"""Shared fixtures for integration tests.

These tests use real infrastructure components (config loader, JSON
snapshot store, stats file runner) against files in tmp_path.
"""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop SIZESNAPSHOT_* variables leaking in from the calling shell."""
    for name in list(os.environ):
        if name.startswith("SIZESNAPSHOT_"):
            monkeypatch.delenv(name)
