from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict

import yaml


DEFAULT_CONFIG_PATH = Path("config.yaml")


def load_config(path: str | os.PathLike | None = None) -> Dict[str, Any]:
    cfg_path = Path(path) if path else DEFAULT_CONFIG_PATH
    with open(cfg_path, "r") as f:
        cfg = yaml.safe_load(f) or {}
    # relative paths inside the file are resolved against its directory
    cfg.setdefault("_base_dir", str(cfg_path.resolve().parent))
    return cfg


def resolve_path(cfg: Dict[str, Any], value: str | os.PathLike) -> Path:
    path = Path(value)
    if path.is_absolute():
        return path
    return Path(cfg.get("_base_dir", ".")) / path


__all__ = ["load_config", "resolve_path", "DEFAULT_CONFIG_PATH"]
