"""Nearest data point lookup for pointer tooltips."""

from typing import Optional, Sequence

from loguru import logger

from ..data_processing.transformers import RaceRecord
from .scales import LinearScale


def nearest_record(records: Sequence[RaceRecord], query_year: float) -> RaceRecord:
    """Find the record whose year is closest to ``query_year``.

    Scans every record once; on equal distances the earliest record in
    ``records`` wins. A bisect over a year-sorted sequence would make this
    logarithmic, but a single race group holds only a handful of years.

    Args:
        records: Active race group records
        query_year: Year to match, usually fractional

    Returns:
        The closest RaceRecord

    Raises:
        ValueError: If ``records`` is empty
    """
    best: Optional[RaceRecord] = None
    best_distance = float("inf")
    for record in records:
        distance = abs(record.year - query_year)
        if distance < best_distance:
            best = record
            best_distance = distance

    if best is None:
        raise ValueError("Cannot resolve a nearest point in an empty race group")
    return best


def resolve_pointer(
    pointer_x: float,
    x_scale: LinearScale,
    records: Sequence[RaceRecord],
) -> RaceRecord:
    """Resolve a horizontal pixel position inside the plot to a record.

    Args:
        pointer_x: Pointer x relative to the plotting area's left edge
        x_scale: Year scale used to draw the chart
        records: Active race group records

    Returns:
        The record nearest the year under the pointer
    """
    hovered_year = x_scale.invert(pointer_x)
    record = nearest_record(records, hovered_year)
    logger.debug(f"Pointer at x={pointer_x:.1f} (year {hovered_year:.2f}) -> {record.year}")
    return record
