from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import structlog

from sizesnapshot.infrastructure.config import load_config
from sizesnapshot.infrastructure.logging.setup import configure_logging
from sizesnapshot.interfaces.composition import build_use_case

log = structlog.get_logger(__name__)


def _parse_args(argv: Iterable[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sizesnapshot",
        description="Write a unified bundle size snapshot of the workspace.",
    )

    # Config wiring flags (no business logic)
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file.",
    )
    parser.add_argument(
        "--dotenv",
        default=None,
        help="Path to .env file.",
    )
    parser.add_argument(
        "--workspace-root",
        default=None,
        help="Override workspace root (overrides SIZESNAPSHOT_WORKSPACE_ROOT).",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Override snapshot destination (relative to workspace root).",
    )
    parser.add_argument(
        "--webpack-stats",
        default=None,
        help="Use a pre-generated webpack stats JSON instead of running webpack.",
    )
    parser.add_argument(
        "--skip-webpack",
        action="store_true",
        help="Do not collect webpack chunk sizes.",
    )
    parser.add_argument(
        "--skip-next",
        action="store_true",
        help="Do not collect next page sizes.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override log level.",
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "console"],
        help="Override log format.",
    )

    return parser.parse_args(argv)


def _cli_overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if args.workspace_root:
        overrides["workspace_root"] = args.workspace_root
    if args.output:
        overrides["output_path"] = args.output
    if args.webpack_stats:
        overrides["webpack_stats_file"] = args.webpack_stats
    if args.skip_webpack:
        overrides["webpack_enabled"] = False
    if args.skip_next:
        overrides["next_enabled"] = False
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.log_format:
        overrides["log_format"] = args.log_format
    return overrides


def start(argv: Iterable[str] | None = None) -> int:
    """
    Process entrypoint.

    Returns the process exit status: 0 on success, 1 if any size source or
    the snapshot write failed (nothing is written in that case).
    """
    if argv is None:
        argv = sys.argv[1:]

    args = _parse_args(argv)

    config = load_config(
        config_path=Path(args.config) if args.config else None,
        dotenv_path=Path(args.dotenv) if args.dotenv else None,
        cli_overrides=_cli_overrides(args),
    )
    configure_logging(config)

    use_case = build_use_case(config)
    try:
        asyncio.run(use_case.execute())
    except Exception:
        log.exception("snapshot_failed")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(start())
