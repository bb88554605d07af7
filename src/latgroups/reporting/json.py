"""Structured report payload generation."""

from __future__ import annotations

import hashlib
import importlib.metadata
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from latgroups.bands.catalog import band_label
from latgroups.core.session import GroupingSession
from latgroups.data.io import write_json

STACK = ("latgroups", "numpy", "pandas", "pyarrow", "matplotlib", "PyYAML")


def build_report_payload(
    session: GroupingSession,
    data_path: str | Path | None = None,
    artifacts: dict[str, Path] | None = None,
) -> dict[str, Any]:
    store = session.store
    data_file = Path(data_path) if data_path is not None else None
    payload = {
        "bands": [
            {
                "id": band.id,
                "min": band.min,
                "max": band.max,
                "label": band_label(band),
                "group": store.group_of(band.id),
            }
            for band in store.catalog
        ],
        "groups": {str(gid): sorted(members) for gid, members in store.groups().items()},
        "matches_preset": session.annotated,
        "series": [
            {
                "group": s.group_id,
                "name": s.name,
                "points": [{"year": p.year, "mean_anomaly": p.mean_anomaly} for p in s.points],
            }
            for s in session.series
        ],
        "summary": {
            "samples": int(session.samples.shape[0]) if session.samples is not None else 0,
            "series": len(session.series),
        },
        "artifacts": {name: str(path.resolve()) for name, path in (artifacts or {}).items()},
        "reproducibility": {
            "data_path": str(data_file.resolve()) if data_file is not None else None,
            "data_sha256": _data_sha256(data_file),
            "config_sha256": _config_sha256(session.config),
            "versions": _stack_versions(),
            "timestamp_utc": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        },
    }
    return payload


def write_report_json(payload: dict[str, Any], out_path: str | Path) -> None:
    write_json(payload, out_path)


def _data_sha256(data_file: Path | None) -> str | None:
    # None when the table is missing
    if data_file is None or not data_file.is_file():
        return None
    return hashlib.sha256(data_file.read_bytes()).hexdigest()


def _config_sha256(config: dict[str, Any]) -> str:
    text = json.dumps(config, sort_keys=True, ensure_ascii=False)
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def _stack_versions() -> dict[str, str | None]:
    out: dict[str, str | None] = {}
    for name in STACK:
        try:
            out[name] = importlib.metadata.version(name)
        except importlib.metadata.PackageNotFoundError:
            out[name] = None
    return out
