from __future__ import annotations

from .load import load_config
from .schema import AppConfig, EnvOverrides, NextRulesConfig

__all__ = ["AppConfig", "EnvOverrides", "NextRulesConfig", "load_config"]
