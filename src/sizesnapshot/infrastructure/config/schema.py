"""Pydantic configuration models with validation."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import (
    AliasChoices,
    AliasPath,
    BaseModel,
    Field,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

from sizesnapshot.infrastructure.nextjs.classifier import NextReportRules

Environment = Literal["dev", "test", "prod"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["json", "console"]


def _normalize_path(value: Any) -> Path:
    """
    Normalize a path-like value without causing filesystem side-effects.

    This function MUST NOT create directories or files.
    """
    if isinstance(value, Path):
        return value.expanduser()
    if isinstance(value, str):
        return Path(value).expanduser()
    raise TypeError(f"Expected path-like value, got: {type(value)!r}")


class NextRulesConfig(BaseModel):
    """Snapshot ids and chunk patterns for the ``next build`` report.

    All values configurable via YAML (next.rules section).
    """

    prefix: str = Field(
        default="docs",
        description="Namespace prefix for page ids ('<prefix>:<page url>').",
    )
    landing_url: str = Field(default="/", description="Page url of the landing page.")
    landing_id: str = Field(default="docs.landing")
    app_shell_url: str = Field(
        default="static/pages/_app.js",
        description="Url of the app shell chunk.",
    )
    app_shell_id: str = Field(default="docs.main")

    runtime_main_pattern: str = Field(default=r"^runtime/main\.(.+)\.js$")
    runtime_main_id: str = Field(default="docs:shared:runtime/main")
    runtime_webpack_pattern: str = Field(default=r"^runtime/webpack\.(.+)\.js$")
    runtime_webpack_id: str = Field(default="docs:shared:runtime/webpack")
    commons_chunk_pattern: str = Field(default=r"^chunks/commons\.(.+)\.js$")
    commons_chunk_id: str = Field(default="docs:shared:chunk/commons")
    framework_chunk_pattern: str = Field(default=r"^chunks/framework\.(.+)\.js$")
    framework_chunk_id: str = Field(default="docs:shared:chunk/framework")
    anonymous_chunk_pattern: str = Field(
        default=r"^chunks/(.*)\.js$",
        description="Hash-named chunks, tracked only as tally + summed size.",
    )
    shared_chunk_id: str = Field(default="docs:chunk:shared")

    @field_validator(
        "runtime_main_pattern",
        "runtime_webpack_pattern",
        "commons_chunk_pattern",
        "framework_chunk_pattern",
        "anonymous_chunk_pattern",
    )
    @classmethod
    def _validate_pattern(cls, v: str) -> str:
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"invalid regular expression {v!r}: {e}") from e
        return v

    def to_rules(self) -> NextReportRules:
        return NextReportRules(
            prefix=self.prefix,
            landing_url=self.landing_url,
            landing_id=self.landing_id,
            app_shell_url=self.app_shell_url,
            app_shell_id=self.app_shell_id,
            runtime_main_pattern=re.compile(self.runtime_main_pattern),
            runtime_main_id=self.runtime_main_id,
            runtime_webpack_pattern=re.compile(self.runtime_webpack_pattern),
            runtime_webpack_id=self.runtime_webpack_id,
            commons_chunk_pattern=re.compile(self.commons_chunk_pattern),
            commons_chunk_id=self.commons_chunk_id,
            framework_chunk_pattern=re.compile(self.framework_chunk_pattern),
            framework_chunk_id=self.framework_chunk_id,
            anonymous_chunk_pattern=re.compile(self.anonymous_chunk_pattern),
            shared_chunk_id=self.shared_chunk_id,
        )


class AppConfig(BaseModel):
    """
    Canonical application configuration (validated, final).

    Note:
    - YAML is expected to be sectioned (workspace/webpack/rollup/next/logging).
    - Environment variables are handled by EnvOverrides(BaseSettings) to allow strict
      precedence control (defaults < YAML < ENV < CLI) in load.py.
    - Relative paths are relative to workspace_root (see resolve()).
    """

    # General
    app_name: str = Field(default="sizesnapshot", description="Application name.")
    environment: Environment = Field(
        default="dev",
        description="Runtime environment (affects defaults like log format).",
    )

    # Workspace (YAML section: workspace.*)
    workspace_root: Path = Field(
        default=Path("."),
        validation_alias=AliasChoices(
            "workspace_root",
            AliasPath("workspace", "root"),
        ),
        description="Repository root all other paths are relative to.",
    )
    output_path: Path = Field(
        default=Path("size-snapshot.json"),
        validation_alias=AliasChoices(
            "output_path",
            AliasPath("workspace", "output_path"),
        ),
        description="Destination of the size snapshot artifact.",
    )
    scratch_dir: Path = Field(
        default=Path("scripts/sizeSnapshot/build"),
        validation_alias=AliasChoices(
            "scratch_dir",
            AliasPath("workspace", "scratch_dir"),
        ),
        description="Scratch build-output directory (created before the webpack run).",
    )

    # Webpack (YAML section: webpack.*)
    webpack_enabled: bool = Field(
        default=True,
        validation_alias=AliasChoices(
            "webpack_enabled",
            AliasPath("webpack", "enabled"),
        ),
        description="Collect chunk sizes from a webpack build.",
    )
    webpack_command: list[str] = Field(
        default_factory=lambda: [
            "npx",
            "webpack",
            "--config",
            "scripts/sizeSnapshot/webpack.config.js",
            "--json",
        ],
        validation_alias=AliasChoices(
            "webpack_command",
            AliasPath("webpack", "command"),
        ),
        description="argv of the webpack build; must print stats JSON to stdout.",
    )
    webpack_stats_file: Optional[Path] = Field(
        default=None,
        validation_alias=AliasChoices(
            "webpack_stats_file",
            AliasPath("webpack", "stats_file"),
        ),
        description="Use a pre-generated stats file instead of running webpack.",
    )
    webpack_compressed_suffix: str = Field(
        default=".gz",
        validation_alias=AliasChoices(
            "webpack_compressed_suffix",
            AliasPath("webpack", "compressed_suffix"),
        ),
        description="Suffix of the compressed sibling of every asset.",
    )

    # Rollup (YAML section: rollup.*)
    rollup_snapshots: list[Path] = Field(
        default_factory=lambda: [Path("packages/material-ui/size-snapshot.json")],
        validation_alias=AliasChoices(
            "rollup_snapshots",
            AliasPath("rollup", "snapshots"),
        ),
        description="rollup-plugin-size-snapshot files to include.",
    )

    # Next (YAML section: next.*)
    next_enabled: bool = Field(
        default=True,
        validation_alias=AliasChoices(
            "next_enabled",
            AliasPath("next", "enabled"),
        ),
        description="Collect page sizes from the captured 'next build' output.",
    )
    next_report_file: Path = Field(
        default=Path("scripts/sizeSnapshot/build/docs.next"),
        validation_alias=AliasChoices(
            "next_report_file",
            AliasPath("next", "report_file"),
        ),
        description="Captured console output of 'next build'.",
    )
    next_rules: NextRulesConfig = Field(
        default_factory=NextRulesConfig,
        validation_alias=AliasChoices(
            "next_rules",
            AliasPath("next", "rules"),
        ),
    )

    # Logging (YAML section: logging.*)
    log_level: LogLevel = Field(
        default="INFO",
        validation_alias=AliasChoices(
            "log_level",
            AliasPath("logging", "level"),
        ),
        description="Log level.",
    )
    log_format: Optional[LogFormat] = Field(
        default=None,
        validation_alias=AliasChoices(
            "log_format",
            AliasPath("logging", "format"),
        ),
        description=(
            "Log renderer format (console/json). If unset, derived from environment."
        ),
    )

    @field_validator(
        "workspace_root", "output_path", "scratch_dir", "next_report_file", mode="before"
    )
    @classmethod
    def _validate_paths(cls, v: Any) -> Path:
        return _normalize_path(v)

    @field_validator("webpack_stats_file", mode="before")
    @classmethod
    def _validate_optional_path(cls, v: Any) -> Path | None:
        if v is None:
            return None
        return _normalize_path(v)

    @field_validator("rollup_snapshots", mode="before")
    @classmethod
    def _validate_path_list(cls, v: Any) -> list[Path]:
        if v is None:
            return []
        if isinstance(v, (str, Path)):
            raise TypeError("rollup snapshots must be a list of paths")
        return [_normalize_path(item) for item in v]

    @field_validator("webpack_command")
    @classmethod
    def _validate_command(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("webpack_command must not be empty")
        return v

    @model_validator(mode="after")
    def _derive_defaults(self) -> "AppConfig":
        # Default log format: console in dev/test, json in prod.
        if self.log_format is None:
            self.log_format = "json" if self.environment == "prod" else "console"
        return self

    def resolve(self, path: Path) -> Path:
        """Resolve a configured path against the workspace root."""
        if path.is_absolute():
            return path
        return self.workspace_root / path

    def to_sectioned_dict(self) -> dict[str, Any]:
        """
        Dump configuration in the sectioned shape used by config.yaml/docs.
        """
        return {
            "app_name": self.app_name,
            "environment": self.environment,
            "workspace": {
                "root": str(self.workspace_root),
                "output_path": str(self.output_path),
                "scratch_dir": str(self.scratch_dir),
            },
            "webpack": {
                "enabled": self.webpack_enabled,
                "command": list(self.webpack_command),
                "stats_file": (
                    str(self.webpack_stats_file) if self.webpack_stats_file else None
                ),
                "compressed_suffix": self.webpack_compressed_suffix,
            },
            "rollup": {"snapshots": [str(p) for p in self.rollup_snapshots]},
            "next": {
                "enabled": self.next_enabled,
                "report_file": str(self.next_report_file),
                "rules": self.next_rules.model_dump(),
            },
            "logging": {"level": self.log_level, "format": self.log_format},
        }


class EnvOverrides(BaseSettings):
    """
    Environment-variable overrides (all optional).

    Intended usage:
    - load.py creates EnvOverrides() to read SIZESNAPSHOT_* variables,
      converts to dict of set values, merges into YAML/defaults,
      then validates AppConfig.

    Supported env var examples (flat, explicit):
    - SIZESNAPSHOT_WORKSPACE_ROOT
    - SIZESNAPSHOT_WEBPACK_STATS_FILE
    - SIZESNAPSHOT_ROLLUP_SNAPSHOTS='["packages/a/size-snapshot.json"]'
    - SIZESNAPSHOT_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="SIZESNAPSHOT_",
        extra="ignore",
        case_sensitive=False,
    )

    app_name: Optional[str] = None
    environment: Optional[Environment] = None

    workspace_root: Optional[Path] = None
    output_path: Optional[Path] = None
    scratch_dir: Optional[Path] = None

    webpack_enabled: Optional[bool] = None
    webpack_command: Optional[list[str]] = None
    webpack_stats_file: Optional[Path] = None
    webpack_compressed_suffix: Optional[str] = None

    rollup_snapshots: Optional[list[Path]] = None

    next_enabled: Optional[bool] = None
    next_report_file: Optional[Path] = None

    log_level: Optional[LogLevel] = None
    log_format: Optional[LogFormat] = None

    @field_validator(
        "workspace_root",
        "output_path",
        "scratch_dir",
        "webpack_stats_file",
        "next_report_file",
        mode="before",
    )
    @classmethod
    def _validate_paths(cls, v: Any) -> Any:
        if v is None:
            return None
        return _normalize_path(v)

    def to_update_dict(self) -> dict[str, Any]:
        """
        Return only values that were actually provided (non-None), for merging.
        """
        return self.model_dump(exclude_none=True)
