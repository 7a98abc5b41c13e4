from __future__ import annotations

import json
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from loguru import logger

DEFAULT_QUOTA_ROOT = "/home/quotas"
DEFAULT_ADMIN_PATTERN = r"^(root|[bghz]z.*)"


@dataclass(frozen=True)
class ConfigPaths:
    path: Path


@dataclass(frozen=True)
class Settings:
    quota_root: str = DEFAULT_QUOTA_ROOT
    admin_group_pattern: str = DEFAULT_ADMIN_PATTERN
    cache_snapshots: bool = False
    log_path: str | None = None
    log_level: str = "INFO"


class ConfigService:
    def __init__(self, paths: ConfigPaths | None = None) -> None:
        self.paths = paths or ConfigPaths(path=self.default_path())

    @staticmethod
    def default_path() -> Path:
        xdg = os.environ.get("XDG_CONFIG_HOME")
        if xdg:
            base = Path(xdg)
        else:
            base = Path.home() / ".config"
        return base / "quota_control" / "config.json"

    def load(self) -> dict[str, Any]:
        p = self.paths.path
        if not p.exists():
            return {}
        try:
            with open(p, "r", encoding="utf-8") as f:
                obj = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("ignoring config {}: {}", p, e)
            return {}
        if not isinstance(obj, dict):
            logger.warning("ignoring config {}: top level is not an object", p)
            return {}
        return obj

    def settings(self, overrides: dict[str, Any] | None = None) -> Settings:
        """Merge the config file with non-empty overrides (CLI flags win)."""
        cfg = self.load()
        for k, v in (overrides or {}).items():
            if v is not None:
                cfg[k] = v

        pattern = str(cfg.get("admin_group_pattern") or DEFAULT_ADMIN_PATTERN)
        try:
            re.compile(pattern)
        except re.error as e:
            logger.warning("invalid admin_group_pattern {!r} ({}), using default", pattern, e)
            pattern = DEFAULT_ADMIN_PATTERN

        cache = cfg.get("cache_snapshots", False)
        if not isinstance(cache, bool):
            logger.warning("invalid cache_snapshots {!r} (expected true or false), caching disabled", cache)
            cache = False

        log_path = cfg.get("log_path")
        return Settings(
            quota_root=str(cfg.get("quota_root") or DEFAULT_QUOTA_ROOT),
            admin_group_pattern=pattern,
            cache_snapshots=cache,
            log_path=str(log_path) if log_path else None,
            log_level=str(cfg.get("log_level") or "INFO").upper(),
        )
