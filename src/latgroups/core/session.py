"""Interactive grouping session.

A session owns one assignment store and the loaded samples. Every interaction
mutates the store and then re-derives the series and the annotation flag in
full, so readers always see a state consistent with the current grouping.
"""

from __future__ import annotations

import logging
from copy import deepcopy
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pandas as pd

from latgroups.bands.assignment import AssignmentStore
from latgroups.bands.preset import matches_preset
from latgroups.core.config import DEFAULT_CONFIG
from latgroups.core.types import GroupSeries
from latgroups.ops.aggregate import compute_group_series, samples_to_frame
from latgroups.viz.chart import chart_annotations, plot_group_series
from latgroups.viz.map import plot_band_map

logger = logging.getLogger(__name__)


@dataclass
class GroupingSession:
    samples: pd.DataFrame | None = None
    store: AssignmentStore = field(default_factory=AssignmentStore)
    config: dict[str, Any] = field(default_factory=lambda: deepcopy(DEFAULT_CONFIG))
    series: list[GroupSeries] = field(init=False, default_factory=list)
    annotated: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        self.samples = samples_to_frame(self.samples)
        self.refresh()

    @classmethod
    def from_config(cls, samples: pd.DataFrame | None, config: dict[str, Any]) -> "GroupingSession":
        initial = config.get("grouping", {}).get("initial", "preset")
        return cls(samples=samples, store=AssignmentStore(preset=initial == "preset"), config=config)

    def click(self, band_id: int) -> int | None:
        group = self.store.cycle(band_id)
        logger.debug("Band %d -> %s", band_id, f"group {group}" if group is not None else "unassigned")
        self.refresh()
        return group

    def clear_all(self) -> None:
        self.store.reset()
        logger.debug("Cleared all groups")
        self.refresh()

    def restore_defaults(self) -> None:
        self.store.apply_preset()
        logger.debug("Restored default grouping")
        self.refresh()

    def refresh(self) -> None:
        self.series = compute_group_series(self.samples, self.store, self.store.catalog)
        matched = matches_preset(self.store)
        if matched != self.annotated:
            logger.info("Preset pattern %s", "matched" if matched else "no longer matched")
        self.annotated = matched

    def render(self, out_dir: str | Path) -> dict[str, Path]:
        """Write the band map and the series chart for the current state."""

        out = Path(out_dir)
        map_cfg = self.config.get("map", {})
        chart_cfg = self.config.get("chart", {})

        map_path = plot_band_map(
            self.store,
            out / "map.png",
            fill_alpha=float(map_cfg.get("fill_alpha", 0.4)),
            show_labels=bool(map_cfg.get("show_labels", True)),
            width=float(map_cfg.get("width", 5.6)),
            height=float(map_cfg.get("height", 2.8)),
            dpi=int(map_cfg.get("dpi", 140)),
        )
        notes = chart_annotations(self.annotated) if chart_cfg.get("annotations", True) else ()
        chart_path = plot_group_series(
            self.series,
            out / "chart.png",
            annotations=notes,
            title=str(chart_cfg.get("title", "")),
            x_label=str(chart_cfg.get("x_label", "Year")),
            y_label=str(chart_cfg.get("y_label", "Temperature Change (°C)")),
            width=float(chart_cfg.get("width", 7.2)),
            height=float(chart_cfg.get("height", 4.8)),
            dpi=int(chart_cfg.get("dpi", 140)),
        )
        return {"map": map_path, "chart": chart_path}
