"""Pixel-space description of the race chart."""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..analysis.scales import LinearScale
from ..config import ChartDimensions
from ..data_processing.transformers import RaceRecord


@dataclass(frozen=True)
class Marker:
    """A circle mark for one record, in plotting-area pixels."""

    record: RaceRecord
    cx: float
    cy: float
    r: float


@dataclass(frozen=True)
class ChartScene:
    line: List[Tuple[float, float]]
    markers: List[Marker]

    @property
    def segment_count(self) -> int:
        return max(0, len(self.line) - 1)


@dataclass(frozen=True)
class MarkerJoin:
    """Result of matching the previous markers to the next ones by index.

    ``update`` pairs each surviving old marker with its replacement,
    ``enter`` holds markers with no predecessor, and ``exit`` holds old
    markers that are no longer backed by data.
    """

    enter: List[Marker]
    update: List[Tuple[Marker, Marker]]
    exit: List[Marker]


def build_scene(
    records: Sequence[RaceRecord],
    x_scale: LinearScale,
    y_scale: LinearScale,
    marker_radius: float = 5,
) -> ChartScene:
    """Place a polyline and one marker per record.

    Args:
        records: Active race group in drawing order (by year)
        x_scale: Year scale
        y_scale: Time scale
        marker_radius: Circle radius in pixels

    Returns:
        ChartScene in plotting-area coordinates
    """
    points = [(x_scale(record.year), y_scale(record.time_seconds)) for record in records]
    markers = [
        Marker(record=record, cx=x, cy=y, r=marker_radius)
        for record, (x, y) in zip(records, points)
    ]
    return ChartScene(line=points, markers=markers)


def join_markers(previous: Sequence[Marker], current: Sequence[Marker]) -> MarkerJoin:
    """Match markers by position in the sequence."""
    shared = min(len(previous), len(current))
    return MarkerJoin(
        enter=list(current[shared:]),
        update=list(zip(previous[:shared], current[:shared])),
        exit=list(previous[shared:]),
    )


def tooltip_anchor(
    record: RaceRecord,
    x_scale: LinearScale,
    y_scale: LinearScale,
    dimensions: ChartDimensions,
) -> Tuple[float, float]:
    """Figure pixel position of a record, for placing the floating tooltip."""
    return (
        x_scale(record.year) + dimensions.margin.left,
        y_scale(record.time_seconds) + dimensions.margin.top,
    )
