"""Core package types shared by the aggregation, session and rendering stages."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Sample:
    """One (year, latitude cell) anomaly observation."""

    year: int
    lat: float
    anomaly: float


@dataclass(frozen=True)
class SeriesPoint:
    year: int
    mean_anomaly: float


@dataclass(frozen=True)
class GroupSeries:
    """Mean anomaly per year for one non-empty group."""

    group_id: int
    points: tuple[SeriesPoint, ...] = field(default_factory=tuple)

    @property
    def name(self) -> str:
        return f"Group {self.group_id}"

    @property
    def years(self) -> list[int]:
        return [p.year for p in self.points]

    @property
    def values(self) -> list[float]:
        return [p.mean_anomaly for p in self.points]


@dataclass(frozen=True)
class Annotation:
    """Text label plus a dashed guide line, in data coordinates."""

    text: str
    text_xy: tuple[float, float]
    line_start: tuple[float, float]
    line_end: tuple[float, float]


PRESET_ANNOTATIONS: tuple[Annotation, ...] = (
    Annotation(
        text="Poles have rapidly accelerated warming since 2000 →",
        text_xy=(2005.0, 1.5),
        line_start=(1995.0, 1.4),
        line_end=(2008.0, 1.7),
    ),
    Annotation(
        text="1960–1980 dip caused by aerosol cooling",
        text_xy=(1965.0, -0.3),
        line_start=(1960.0, -0.25),
        line_end=(1980.0, -0.1),
    ),
)
