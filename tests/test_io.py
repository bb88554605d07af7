import json
import logging
from pathlib import Path

import pandas as pd
import pytest

from latgroups.data.io import DatasetIOError, load_samples, read_samples, write_json, write_series_csv
from latgroups.core.types import GroupSeries, SeriesPoint


def _write_csv(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_read_samples_renames_tas_and_coerces(tmp_path: Path):
    p = _write_csv(tmp_path / "zonal.csv", "year,lat,tas\n2000,-80.5,0.25\n2001,10,bad\n2001,12.5,-0.5\n")
    df = read_samples(p)
    assert list(df.columns) == ["year", "lat", "anomaly"]
    assert df.shape[0] == 2
    assert df["year"].tolist() == [2000, 2001]
    assert df["anomaly"].tolist() == [0.25, -0.5]


def test_read_samples_custom_columns_and_parquet(tmp_path: Path):
    p = tmp_path / "zonal.parquet"
    pd.DataFrame({"yr": [1990], "latitude": [45.0], "dT": [0.1]}).to_parquet(p, index=False)
    df = read_samples(p, columns={"year": "yr", "lat": "latitude", "anomaly": "dT"})
    assert df.to_dict("records") == [{"year": 1990, "lat": 45.0, "anomaly": 0.1}]


def test_read_samples_errors(tmp_path: Path):
    with pytest.raises(DatasetIOError):
        read_samples(tmp_path / "missing.csv")
    p = _write_csv(tmp_path / "zonal.csv", "year,lat\n2000,1\n")
    with pytest.raises(ValueError, match="Missing required columns"):
        read_samples(p)
    q = _write_csv(tmp_path / "zonal.json", "{}")
    with pytest.raises(ValueError, match="Unsupported"):
        read_samples(q)


def test_load_samples_logs_once_and_returns_empty(tmp_path: Path, caplog):
    with caplog.at_level(logging.ERROR, logger="latgroups.data.io"):
        df = load_samples(tmp_path / "missing.csv")
    assert df.empty
    assert list(df.columns) == ["year", "lat", "anomaly"]
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert "Error loading data" in errors[0].getMessage()


def test_write_series_csv(tmp_path: Path):
    series = [GroupSeries(group_id=2, points=(SeriesPoint(2000, 0.5), SeriesPoint(2001, 0.75)))]
    out = write_series_csv(series, tmp_path / "out" / "series.csv")
    df = pd.read_csv(out)
    assert df.to_dict("records") == [
        {"group": 2, "year": 2000, "mean_anomaly": 0.5},
        {"group": 2, "year": 2001, "mean_anomaly": 0.75},
    ]


def test_write_json_creates_parents_and_keeps_unicode(tmp_path: Path):
    out = tmp_path / "nested" / "payload.json"
    write_json({"label": "60° to 30°", "groups": {"1": [0, 5]}}, out)
    text = out.read_text(encoding="utf-8")
    assert "60° to 30°" in text
    assert json.loads(text)["groups"] == {"1": [0, 5]}
