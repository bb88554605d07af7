"""Group color lookup shared by the map and chart."""

from __future__ import annotations

import matplotlib
from matplotlib.colors import to_hex, to_rgba

from latgroups.bands.assignment import GROUP_IDS

TRANSPARENT = (1.0, 1.0, 1.0, 0.0)

# ordinal Set1 scale over the group ids: 1 red, 2 blue, 3 green
GROUP_COLORS: dict[int, str] = {
    gid: to_hex(color) for gid, color in zip(GROUP_IDS, matplotlib.colormaps["Set1"].colors)
}


def group_color(group_id: int | None) -> str | tuple[float, float, float, float]:
    if group_id is None:
        return TRANSPARENT
    return GROUP_COLORS[group_id]


def band_fill(group_id: int | None, alpha: float) -> tuple[float, float, float, float]:
    """Map fill for a band; unassigned bands are fully transparent."""

    if group_id is None:
        return TRANSPARENT
    return to_rgba(GROUP_COLORS[group_id], alpha)
