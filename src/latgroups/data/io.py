"""I/O helpers for zonal anomaly tables and derived outputs."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Sequence

import pandas as pd

from latgroups.core.types import GroupSeries
from latgroups.ops.aggregate import SAMPLE_COLUMNS, empty_samples, series_to_frame

logger = logging.getLogger(__name__)

DEFAULT_COLUMNS = {"year": "year", "lat": "lat", "anomaly": "tas"}


class DatasetIOError(FileNotFoundError):
    """Raised when the expected sample table is missing."""


def read_samples(path: str | Path, columns: Mapping[str, str] | None = None) -> pd.DataFrame:
    """Read a csv/parquet table into a numeric ``year, lat, anomaly`` frame.

    Rows whose fields cannot be parsed as numbers are dropped.
    """

    p = Path(path)
    if not p.exists():
        raise DatasetIOError(f"Sample table does not exist: {p}")

    colmap = dict(DEFAULT_COLUMNS)
    if columns:
        colmap.update(columns)

    raw = _load_frame(p)
    missing = [src for src in colmap.values() if src not in raw.columns]
    if missing:
        raise ValueError(f"Missing required columns in {p.name}: {missing}")

    df = raw[[colmap[k] for k in SAMPLE_COLUMNS]].copy()
    df.columns = SAMPLE_COLUMNS
    for col in SAMPLE_COLUMNS:
        df[col] = pd.to_numeric(df[col], errors="coerce")
    n_raw = df.shape[0]
    df = df.dropna(subset=SAMPLE_COLUMNS).reset_index(drop=True)
    if df.shape[0] < n_raw:
        logger.warning("Dropped %d unparseable rows from %s", n_raw - df.shape[0], p)
    df["year"] = df["year"].astype(int)
    logger.debug("Read %d samples from %s", df.shape[0], p)
    return df


def load_samples(path: str | Path, columns: Mapping[str, str] | None = None) -> pd.DataFrame:
    """Like read_samples, but a failure is logged once and an empty frame is returned."""

    try:
        return read_samples(path, columns=columns)
    except (OSError, ValueError) as exc:
        logger.error("Error loading data from %s: %s", path, exc)
        return empty_samples()


def write_series_csv(series: Sequence[GroupSeries], out_path: str | Path) -> Path:
    p = Path(out_path)
    p.parent.mkdir(parents=True, exist_ok=True)
    series_to_frame(series).to_csv(p, index=False)
    return p


def write_json(data: dict[str, Any], path: str | Path) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False) + "\n", encoding="utf-8")


def _load_frame(path: Path) -> pd.DataFrame:
    ext = path.suffix.lower()
    if ext == ".parquet":
        return pd.read_parquet(path)
    if ext in {".csv", ".txt"}:
        return pd.read_csv(path)
    if ext == ".tsv":
        return pd.read_csv(path, sep="\t")
    raise ValueError(f"Unsupported table format: {ext}")
