from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from .log import get_logger

log = get_logger(__name__)

_TRUE = ("1", "true", "yes", "y", "on")


def _env_int(name: str, default: int) -> int:
    v = os.getenv(name)
    if v is None or v == "":
        return default
    try:
        return int(v)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None or v == "":
        return default
    return v.strip().lower() in _TRUE


def _env_str(name: str, default: str) -> str:
    v = os.getenv(name)
    return default if v is None else v


@dataclass
class Settings:
    # Dashboard document the CLI reads and writes.
    dashboard_file: str = "lofi_start_config.json"
    json_indent: int = 2

    # The private vault is unlocked by the auth layer; the CLI can only assume it.
    private_unlocked: bool = False

    # Logging / UX
    log_level: str = "WARNING"
    no_color: bool = False

    @staticmethod
    def from_env() -> "Settings":
        s = Settings()
        s.dashboard_file = _env_str("LOFI_DASHBOARD_FILE", s.dashboard_file)
        s.json_indent = _env_int("LOFI_JSON_INDENT", s.json_indent)
        s.private_unlocked = _env_bool("LOFI_PRIVATE_UNLOCKED", s.private_unlocked)
        s.log_level = _env_str("LOFI_LOG_LEVEL", s.log_level)
        s.no_color = _env_bool("LOFI_NO_COLOR", s.no_color)
        return s

    @staticmethod
    def from_file(path: Path) -> "Settings":
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"{path}: not valid YAML ({e})") from e
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a mapping of settings")
        s = Settings.from_env()
        known = {f.name for f in fields(Settings)}
        for k, v in data.items():
            if k in known:
                setattr(s, k, v)
            else:
                log.warning("Ignoring unknown setting %r in %s", k, path)
        return s


def load_settings(config_path: Optional[str]) -> Settings:
    if config_path:
        return Settings.from_file(Path(config_path))
    return Settings.from_env()
