"""HTML report generation."""

from __future__ import annotations

import html
from pathlib import Path

import pandas as pd

from latgroups.bands.catalog import band_label
from latgroups.core.session import GroupingSession
from latgroups.ops.aggregate import series_to_frame


def generate_html_report(session: GroupingSession, artifacts: dict[str, Path], out_html: Path) -> None:
    store = session.store
    bands_df = pd.DataFrame(
        [
            {
                "band": band.id,
                "range": band_label(band),
                "group": store.group_of(band.id) if store.group_of(band.id) is not None else "unassigned",
            }
            for band in store.catalog
        ]
    )
    bands_html = bands_df.to_html(index=False, classes="table")

    series_df = series_to_frame(session.series)
    if series_df.empty:
        series_html = "<p>No series: no bands assigned or no samples loaded.</p>"
    else:
        wide = series_df.pivot(index="year", columns="group", values="mean_anomaly")
        wide.columns = [f"Group {gid}" for gid in wide.columns]
        series_html = wide.reset_index().to_html(index=False, classes="table", float_format=lambda v: f"{v:.3f}")

    images = "\n  ".join(
        f'<img src="{_relpath(path, out_html.parent)}" alt="{html.escape(name)}" />'
        for name, path in artifacts.items()
    )
    preset_note = (
        "<p>Grouping matches the poles / mid-latitudes / tropics pattern; annotations shown.</p>"
        if session.annotated
        else "<p>Grouping differs from the default pattern; annotations hidden.</p>"
    )

    page = f"""<!doctype html>
<html lang=\"en\">
<head>
  <meta charset=\"utf-8\" />
  <title>Latitude Band Groups</title>
  <style>
    body {{ font-family: 'Segoe UI', Arial, sans-serif; margin: 2rem; color: #1a1a1a; }}
    h1, h2 {{ margin-top: 1.2rem; }}
    img {{ max-width: 780px; border: 1px solid #ddd; margin: 0.75rem 0; }}
    .table {{ border-collapse: collapse; width: 100%; margin: 1rem 0; font-size: 0.9rem; }}
    .table th, .table td {{ border: 1px solid #ddd; padding: 0.4rem 0.5rem; text-align: left; }}
    .table th {{ background: #f5f5f5; }}
  </style>
</head>
<body>
  <h1>Latitude Band Groups</h1>

  <h2>Figures</h2>
  {images}
  {preset_note}

  <h2>Band Assignment</h2>
  {bands_html}

  <h2>Group Series</h2>
  {series_html}
</body>
</html>
"""

    out_html.parent.mkdir(parents=True, exist_ok=True)
    out_html.write_text(page, encoding="utf-8")


def _relpath(path: Path, root: Path) -> str:
    return path.resolve().relative_to(root.resolve()).as_posix()
