"""Group series chart rendering."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
from matplotlib.ticker import MaxNLocator

from latgroups.core.types import PRESET_ANNOTATIONS, Annotation, GroupSeries
from latgroups.viz.palette import group_color


def plot_group_series(
    series: Sequence[GroupSeries],
    out_path: str | Path,
    *,
    annotations: Sequence[Annotation] = (),
    title: str = "",
    x_label: str = "Year",
    y_label: str = "Temperature Change (°C)",
    width: float = 7.2,
    height: float = 4.8,
    dpi: int = 140,
) -> Path:
    p = Path(out_path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(width, height))
    drawn = [s for s in series if s.points]
    if drawn:
        for s in drawn:
            ax.plot(s.years, s.values, color=group_color(s.group_id), linewidth=2.0, label=s.name)
        for note in annotations:
            ax.annotate(note.text, xy=note.text_xy, fontsize=8, annotation_clip=False)
            ax.plot(
                [note.line_start[0], note.line_end[0]],
                [note.line_start[1], note.line_end[1]],
                color="black",
                linestyle=(0, (4, 2)),
                linewidth=1.0,
            )
        ax.xaxis.set_major_locator(MaxNLocator(nbins=10, integer=True))
        ax.legend(loc="upper left", bbox_to_anchor=(1.01, 1.0), frameon=False)
        ax.grid(alpha=0.3)
    else:
        ax.text(0.5, 0.5, "No data", ha="center", va="center", transform=ax.transAxes)

    ax.set_xlabel(x_label)
    ax.set_ylabel(y_label)
    if title:
        ax.set_title(title)
    fig.tight_layout()
    fig.savefig(p, dpi=dpi)
    plt.close(fig)
    return p


def chart_annotations(matched: bool) -> tuple[Annotation, ...]:
    """Annotations to overlay for the current grouping."""

    return PRESET_ANNOTATIONS if matched else ()
