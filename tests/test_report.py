import hashlib
import json
from pathlib import Path

import pandas as pd

from latgroups.core.session import GroupingSession
from latgroups.reporting.json import build_report_payload, write_report_json
from latgroups.viz.reports import generate_html_report


def _session():
    samples = pd.DataFrame(
        {"year": [2000, 2000, 2001], "lat": [-80.0, 10.0, 10.0], "anomaly": [1.0, 0.5, 0.7]}
    )
    return GroupingSession(samples=samples)


def test_report_payload_contents(tmp_path: Path):
    data = tmp_path / "zonal.csv"
    data.write_text("year,lat,tas\n2000,-80,1.0\n", encoding="utf-8")
    payload = build_report_payload(_session(), data_path=data)

    assert payload["matches_preset"] is True
    assert payload["groups"] == {"1": [0, 5], "2": [1, 4], "3": [2, 3]}
    assert [b["group"] for b in payload["bands"]] == [1, 2, 3, 3, 2, 1]
    assert payload["bands"][0]["label"] == "-60° to -90°"
    assert payload["summary"] == {"samples": 3, "series": 3}
    assert payload["series"][2]["points"] == [
        {"year": 2000, "mean_anomaly": 0.5},
        {"year": 2001, "mean_anomaly": 0.7},
    ]
    repro = payload["reproducibility"]
    assert repro["data_sha256"] == hashlib.sha256(data.read_bytes()).hexdigest()
    assert len(repro["config_sha256"]) == 64
    assert "pandas" in repro["versions"]

    out = tmp_path / "report.json"
    write_report_json(payload, out)
    assert json.loads(out.read_text(encoding="utf-8"))["groups"]["2"] == [1, 4]


def test_html_report_embeds_figures_and_tables(tmp_path: Path):
    session = _session()
    artifacts = session.render(tmp_path / "figs")
    out_html = tmp_path / "report.html"
    generate_html_report(session, artifacts, out_html)
    text = out_html.read_text(encoding="utf-8")
    assert 'src="figs/map.png"' in text
    assert 'src="figs/chart.png"' in text
    assert "Group 3" in text
    assert "annotations shown" in text


def test_html_report_without_series(tmp_path: Path):
    session = _session()
    session.clear_all()
    artifacts = session.render(tmp_path)
    generate_html_report(session, artifacts, tmp_path / "report.html")
    text = (tmp_path / "report.html").read_text(encoding="utf-8")
    assert "No series" in text
    assert "unassigned" in text


def test_report_payload_for_missing_table(tmp_path: Path):
    payload = build_report_payload(GroupingSession(), data_path=tmp_path / "missing.csv")
    assert payload["reproducibility"]["data_sha256"] is None
    assert payload["summary"] == {"samples": 0, "series": 3}
    assert all(s["points"] == [] for s in payload["series"])
