"""Hardcoded default configuration values."""

from __future__ import annotations

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {
    "app_name": "sizesnapshot",
    "environment": "dev",
    "workspace": {
        "root": ".",
        "output_path": "size-snapshot.json",
        "scratch_dir": "scripts/sizeSnapshot/build",
    },
    "webpack": {
        "enabled": True,
        "command": [
            "npx",
            "webpack",
            "--config",
            "scripts/sizeSnapshot/webpack.config.js",
            "--json",
        ],
        "stats_file": None,
        "compressed_suffix": ".gz",
    },
    "rollup": {
        "snapshots": ["packages/material-ui/size-snapshot.json"],
    },
    "next": {
        "enabled": True,
        "report_file": "scripts/sizeSnapshot/build/docs.next",
    },
    "logging": {
        "level": "INFO",
        "format": None,  # Derived from environment in schema.py
    },
}
