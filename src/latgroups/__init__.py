"""Latitude band grouping and group-mean temperature anomaly series."""

import importlib.metadata

from latgroups.bands.assignment import CANONICAL_PRESET, GROUP_IDS, AssignmentStore
from latgroups.bands.catalog import LATITUDE_BANDS, Band
from latgroups.bands.preset import matches_preset
from latgroups.ops.aggregate import compute_group_series

try:
    __version__ = importlib.metadata.version("latgroups")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "__version__",
    "AssignmentStore",
    "Band",
    "CANONICAL_PRESET",
    "GROUP_IDS",
    "LATITUDE_BANDS",
    "compute_group_series",
    "matches_preset",
]
