from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict

import yaml


DEFAULT_CONFIG_PATH = Path("config.yaml")

SEARCH_DEFAULTS: Dict[str, Any] = {
    "depth_min": 1,
    "depth_max": 26,
    "matches_max": 10,
    "seed_min": 1,
    "seed_max": 4294967295,
    "format": "utf16",
    "nesting_max": 0,
}


def load_config(path: str | os.PathLike | None = None) -> Dict[str, Any]:
    cfg_path = Path(path) if path else DEFAULT_CONFIG_PATH
    with open(cfg_path, "r") as f:
        return yaml.safe_load(f) or {}


def load_config_or_defaults(path: str | os.PathLike | None = None) -> Dict[str, Any]:
    """Like `load_config`, but an absent default config file yields `{}`.

    An explicitly requested path must exist.
    """
    if path is None and not DEFAULT_CONFIG_PATH.exists():
        return {}
    return load_config(path)


def search_settings(cfg: Dict[str, Any]) -> Dict[str, Any]:
    settings = dict(SEARCH_DEFAULTS)
    settings["catalogs"] = (cfg.get("paths") or {}).get("catalogs", ".")
    settings.update(cfg.get("search") or {})
    return settings


__all__ = [
    "load_config",
    "load_config_or_defaults",
    "search_settings",
    "DEFAULT_CONFIG_PATH",
    "SEARCH_DEFAULTS",
]
