"""Fixed latitude band catalog.

Six bands tile [-90, 90] south to north. Each range is half-open,
``min <= lat < max``, so a latitude on a shared edge belongs to the band that
starts there. ``lat == 90`` belongs to no band.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


class UnknownBandError(KeyError):
    """Raised when a band id is not part of the catalog."""


@dataclass(frozen=True)
class Band:
    id: int
    min: float
    max: float

    def contains(self, lat: float) -> bool:
        return self.min <= lat < self.max

    @property
    def center(self) -> float:
        return 0.5 * (self.min + self.max)


LATITUDE_BANDS: tuple[Band, ...] = (
    Band(id=0, min=-90.0, max=-60.0),
    Band(id=1, min=-60.0, max=-30.0),
    Band(id=2, min=-30.0, max=0.0),
    Band(id=3, min=0.0, max=30.0),
    Band(id=4, min=30.0, max=60.0),
    Band(id=5, min=60.0, max=90.0),
)


def get_band(band_id: int, catalog: Sequence[Band] = LATITUDE_BANDS) -> Band:
    for band in catalog:
        if band.id == band_id:
            return band
    raise UnknownBandError(f"Unknown band id {band_id!r}. Valid ids: {[b.id for b in catalog]}")


def band_for_lat(lat: float, catalog: Sequence[Band] = LATITUDE_BANDS) -> Band | None:
    """Return the band containing ``lat`` or None when it falls outside every range."""

    for band in catalog:
        if band.contains(lat):
            return band
    return None


def band_label(band: Band) -> str:
    return f"{_fmt_deg(band.max)}° to {_fmt_deg(band.min)}°"


def _fmt_deg(value: float) -> str:
    return f"{value:g}"
