"""Latitude band map rendering."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from latgroups.bands.assignment import AssignmentStore
from latgroups.bands.catalog import band_label
from latgroups.viz.palette import band_fill


def plot_band_map(
    assignment: AssignmentStore,
    out_path: str | Path,
    *,
    fill_alpha: float = 0.4,
    show_labels: bool = True,
    width: float = 5.6,
    height: float = 2.8,
    dpi: int = 140,
) -> Path:
    """Draw the six bands over an equirectangular frame, filled by owning group."""

    p = Path(out_path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(width, height))
    ax.set_xlim(-180.0, 180.0)
    ax.set_ylim(-90.0, 90.0)
    ax.set_facecolor("#f4f4f4")

    for band in assignment.catalog:
        gid = assignment.group_of(band.id)
        rect = Rectangle(
            (-180.0, band.min),
            360.0,
            band.max - band.min,
            facecolor=band_fill(gid, fill_alpha),
            edgecolor="black",
            linewidth=0.8,
        )
        ax.add_patch(rect)
        if show_labels:
            ax.text(
                183.0,
                band.center,
                band_label(band),
                ha="left",
                va="center",
                fontsize=7,
                color="#333333",
                clip_on=False,
            )

    ax.set_xticks([])
    ax.set_yticks([-90, -60, -30, 0, 30, 60, 90])
    ax.set_ylabel("Latitude")
    ax.set_title("Band groups")
    fig.tight_layout()
    fig.savefig(p, dpi=dpi)
    plt.close(fig)
    return p
