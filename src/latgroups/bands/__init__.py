"""Latitude band catalog, group assignment state and preset matching."""

from latgroups.bands.assignment import CANONICAL_PRESET, GROUP_IDS, AssignmentStore
from latgroups.bands.catalog import LATITUDE_BANDS, Band, UnknownBandError, band_for_lat, band_label, get_band
from latgroups.bands.preset import matches_preset

__all__ = [
    "AssignmentStore",
    "Band",
    "CANONICAL_PRESET",
    "GROUP_IDS",
    "LATITUDE_BANDS",
    "UnknownBandError",
    "band_for_lat",
    "band_label",
    "get_band",
    "matches_preset",
]
