"""Configuration and runtime path bootstrapping."""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from planner.task_store import MAX_CAPACITY

DEFAULT_CONFIG: dict[str, Any] = {
    "schedule": {"capacity": 10, "months": 12},
    "logging": {"level": "WARNING"},
    "paths": {"audit_log_path": "logs/audit.jsonl"},
    "ui": {"clear_screen": False},
}


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML from file, returning empty mapping when missing."""
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except (yaml.YAMLError, UnicodeDecodeError) as exc:
        raise ValueError(f"Cannot parse config file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge dictionaries."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def ensure_runtime_dirs(root: Path, config: dict[str, Any]) -> dict[str, Path | None]:
    """Create the audit log directory and return resolved paths.

    An empty ``paths.audit_log_path`` disables the audit log.
    """
    raw_audit = config.get("paths", {}).get("audit_log_path") or ""
    if not raw_audit:
        return {"audit_log_path": None}
    audit_log_path = (root / raw_audit).resolve()
    audit_log_path.parent.mkdir(parents=True, exist_ok=True)
    return {"audit_log_path": audit_log_path}


def configure_logging(config: dict[str, Any], verbose: bool = False) -> None:
    """Install the root log handler at the configured level."""
    level_name = "DEBUG" if verbose else str(config.get("logging", {}).get("level", "WARNING"))
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging level: {level_name!r}")
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(level)


def load_effective_config(root: Path, config_path: Path | None = None) -> dict[str, Any]:
    """Merge the YAML config file over built-in defaults."""
    path = config_path or root / "config" / "default.yaml"
    merged = merge_dicts(copy.deepcopy(DEFAULT_CONFIG), load_yaml(path))
    capacity = merged["schedule"].get("capacity")
    if not isinstance(capacity, int) or not 1 <= capacity <= MAX_CAPACITY:
        raise ValueError(
            f"schedule.capacity must be an integer in 1..{MAX_CAPACITY}, got {capacity!r}"
        )
    return merged
