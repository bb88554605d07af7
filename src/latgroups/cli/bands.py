"""Implementation of `latgroups bands`."""

from __future__ import annotations

import argparse

from latgroups.bands.assignment import CANONICAL_PRESET
from latgroups.bands.catalog import LATITUDE_BANDS, band_label


def register(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("bands", help="Print the latitude band catalog")
    parser.set_defaults(func=cmd_bands)


def cmd_bands(args: argparse.Namespace) -> int:
    del args
    preset = {band_id: gid for gid, members in CANONICAL_PRESET.items() for band_id in members}
    for band in LATITUDE_BANDS:
        print(
            f"{band.id}  [{band.min:g}, {band.max:g})  {band_label(band):<14}  default group {preset.get(band.id, '-')}"
        )
    return 0
