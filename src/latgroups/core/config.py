"""Configuration loading and resolution."""

from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any

import yaml


class ConfigError(ValueError):
    """Raised when configuration is invalid."""


DEFAULT_CONFIG: dict[str, Any] = {
    "data": {
        "columns": {
            "year": "year",
            "lat": "lat",
            "anomaly": "tas",
        },
    },
    "grouping": {
        "initial": "preset",
    },
    "chart": {
        "width": 7.2,
        "height": 4.8,
        "dpi": 140,
        "title": "Zonal mean temperature anomaly by band group",
        "x_label": "Year",
        "y_label": "Temperature Change (°C)",
        "annotations": True,
    },
    "map": {
        "width": 5.6,
        "height": 2.8,
        "dpi": 140,
        "fill_alpha": 0.4,
        "show_labels": True,
    },
}


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries and return a new dictionary."""

    out = deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = deep_merge(out[key], value)
        else:
            out[key] = value
    return out


def load_yaml(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise ConfigError(f"Config file not found: {p}")
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping at root: {p}")
    return data


def resolve_config(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Resolve run configuration from defaults, an optional user file and overrides."""

    resolved = deepcopy(DEFAULT_CONFIG)
    if config_path is not None:
        resolved = deep_merge(resolved, load_yaml(config_path))
    if overrides:
        resolved = deep_merge(resolved, overrides)
    _validate(resolved)
    return resolved


def dump_yaml(data: dict[str, Any], out_path: str | Path) -> None:
    p = Path(out_path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True)


def _validate(cfg: dict[str, Any]) -> None:
    for section in ("grouping", "data", "chart", "map"):
        _section(cfg, section)
    columns = _section(_section(cfg, "data"), "columns", prefix="data.")

    initial = cfg["grouping"].get("initial")
    if initial not in {"preset", "empty"}:
        raise ConfigError(f"Unsupported grouping.initial '{initial}'. Supported: preset|empty")

    for key in ("year", "lat", "anomaly"):
        if not isinstance(columns.get(key), str) or not columns.get(key):
            raise ConfigError(f"data.columns.{key} must be a non-empty column name")

    for section in ("chart", "map"):
        dpi = cfg[section].get("dpi")
        if not isinstance(dpi, int) or isinstance(dpi, bool) or dpi <= 0:
            raise ConfigError(f"{section}.dpi must be a positive integer, got {dpi!r}")

    alpha = cfg["map"].get("fill_alpha")
    if not isinstance(alpha, (int, float)) or isinstance(alpha, bool) or not 0.0 <= float(alpha) <= 1.0:
        raise ConfigError(f"map.fill_alpha must be within [0, 1], got {alpha!r}")


def _section(cfg: dict[str, Any], key: str, prefix: str = "") -> dict[str, Any]:
    value = cfg.get(key)
    if not isinstance(value, dict):
        raise ConfigError(f"{prefix}{key} must be a mapping, got {type(value).__name__}")
    return value
