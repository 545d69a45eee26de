"""Loads YAML/JSON configuration files and global store settings."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


def load_config(path: str) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError("Unsupported config format")


def load_meta_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the store's meta configuration."""
    if path is None:
        path = Path(__file__).resolve().parents[2] / "configs" / "memory_config.yaml"
    if path.exists():
        return load_config(str(path))
    return {}


META_CONFIG: Dict[str, Any] = load_meta_config()
THREAD_SAFE: bool = bool(META_CONFIG.get("thread_safe", True))
GROWTH_WARNING_CELLS: int = int(META_CONFIG.get("growth_warning_cells", 1_000_000))
PLACEHOLDER_UPDATE_VALUE: Any = META_CONFIG.get("placeholder_update_value", 1)
LOG_GROWTH: bool = bool(META_CONFIG.get("log_growth", False))


def set_thread_safe(value: bool) -> None:
    """Override whether new stores guard operations with a lock."""
    global THREAD_SAFE
    THREAD_SAFE = value
    META_CONFIG["thread_safe"] = value


def set_growth_warning_cells(value: int) -> None:
    """Override the grid size above which growth logs a warning."""
    global GROWTH_WARNING_CELLS
    GROWTH_WARNING_CELLS = value
    META_CONFIG["growth_warning_cells"] = value


def set_placeholder_update_value(value: Any) -> None:
    """Override the constant written by the placeholder update sweep."""
    global PLACEHOLDER_UPDATE_VALUE
    PLACEHOLDER_UPDATE_VALUE = value
    META_CONFIG["placeholder_update_value"] = value


def set_log_growth(value: bool) -> None:
    """Enable or disable per-write growth logging."""
    global LOG_GROWTH
    LOG_GROWTH = value
    META_CONFIG["log_growth"] = value


def print_runtime_config() -> None:
    """Print a summary of the current runtime configuration."""
    info = {
        "thread_safe": THREAD_SAFE,
        "growth_warning_cells": GROWTH_WARNING_CELLS,
        "placeholder_update_value": PLACEHOLDER_UPDATE_VALUE,
        "log_growth": LOG_GROWTH,
    }
    print("Runtime configuration:")
    for k, v in info.items():
        print(f"  {k}: {v}")
