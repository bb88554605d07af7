"""Group-mean anomaly series from raw latitude samples."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

import numpy as np
import pandas as pd

from latgroups.bands.assignment import GROUP_IDS, GroupsLike, as_groups
from latgroups.bands.catalog import LATITUDE_BANDS, Band
from latgroups.core.types import GroupSeries, Sample, SeriesPoint

logger = logging.getLogger(__name__)

SAMPLE_COLUMNS = ["year", "lat", "anomaly"]


def samples_to_frame(samples: pd.DataFrame | Iterable[Sample] | None) -> pd.DataFrame:
    """Coerce samples to a ``year, lat, anomaly`` frame; missing input becomes an empty frame."""

    if samples is None:
        return empty_samples()
    if isinstance(samples, pd.DataFrame):
        missing = [col for col in SAMPLE_COLUMNS if col not in samples.columns]
        if missing:
            logger.warning("Sample frame is missing columns %s; treating it as empty", missing)
            return empty_samples()
        return samples[SAMPLE_COLUMNS]
    rows = [(s.year, s.lat, s.anomaly) for s in samples]
    if not rows:
        return empty_samples()
    return pd.DataFrame(rows, columns=SAMPLE_COLUMNS)


def compute_group_series(
    samples: pd.DataFrame | Iterable[Sample] | None,
    assignment: GroupsLike,
    catalog: Sequence[Band] = LATITUDE_BANDS,
) -> list[GroupSeries]:
    """Return one series per non-empty group, in ascending group order.

    A sample is selected for a group when its latitude falls in ``[min, max)`` of
    any member band. Each point is the flat mean over all selected samples of that
    year, so bands with more cells weigh more. Years with no selected sample are
    absent.
    """

    frame = samples_to_frame(samples)
    lat = frame["lat"].to_numpy(dtype=float)
    by_id = {band.id: band for band in catalog}
    groups = as_groups(assignment)

    out: list[GroupSeries] = []
    for gid in GROUP_IDS:
        members = groups[gid]
        if not members:
            continue

        mask = np.zeros(lat.shape[0], dtype=bool)
        for band_id in sorted(members):
            band = by_id.get(band_id)
            if band is None:
                continue
            mask |= (lat >= band.min) & (lat < band.max)

        selected = frame.loc[mask]
        points: tuple[SeriesPoint, ...] = ()
        if not selected.empty:
            means = selected.groupby("year", sort=True)["anomaly"].mean()
            points = tuple(
                SeriesPoint(year=int(year), mean_anomaly=float(value)) for year, value in means.items()
            )
        out.append(GroupSeries(group_id=gid, points=points))
    return out


def series_to_frame(series: Sequence[GroupSeries]) -> pd.DataFrame:
    """Flatten series to a long ``group, year, mean_anomaly`` table."""

    rows = [
        {"group": s.group_id, "year": p.year, "mean_anomaly": p.mean_anomaly}
        for s in series
        for p in s.points
    ]
    return pd.DataFrame(rows, columns=["group", "year", "mean_anomaly"])


def empty_samples() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "year": pd.Series(dtype=int),
            "lat": pd.Series(dtype=float),
            "anomaly": pd.Series(dtype=float),
        }
    )
