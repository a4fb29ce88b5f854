"""Data transformation utilities for race timing data."""

from dataclasses import dataclass
from typing import List, Tuple

import pandas as pd
from loguru import logger


@dataclass(frozen=True)
class RaceRecord:
    """One race group's winning time for one year."""

    race_group_id: str
    event_name: str
    race_name: str
    year: int
    time_seconds: float


def to_records(df: pd.DataFrame) -> List[RaceRecord]:
    """Convert dataset rows to RaceRecord objects, preserving row order."""
    return [
        RaceRecord(
            race_group_id=row.race_group_id,
            event_name=row.event_name,
            race_name=row.race_name,
            year=int(row.year),
            time_seconds=float(row.time_seconds),
        )
        for row in df.itertuples(index=False)
    ]


def race_groups(df: pd.DataFrame) -> List[str]:
    """Distinct race group ids in first-occurrence order.

    Args:
        df: Race dataset

    Returns:
        List of race group ids
    """
    # unique() keeps order of appearance
    groups = df["race_group_id"].unique().tolist()
    logger.debug(f"Found {len(groups)} race groups")
    return groups


def race_subset(df: pd.DataFrame, race_group_id: str) -> pd.DataFrame:
    """Rows belonging to one race group, in dataset order.

    Args:
        df: Race dataset
        race_group_id: Group to select

    Returns:
        Filtered copy of the dataset
    """
    return df[df["race_group_id"] == race_group_id].reset_index(drop=True)


def order_by_year(df: pd.DataFrame) -> pd.DataFrame:
    """Sort a subset by year; ties keep their dataset order."""
    return df.sort_values("year", kind="mergesort").reset_index(drop=True)


def extent(df: pd.DataFrame, column: str) -> Tuple[float, float]:
    """Return (min, max) of a numeric column.

    Raises:
        ValueError: If the DataFrame is empty
    """
    if df.empty:
        raise ValueError(f"Cannot compute extent of '{column}' for an empty dataset")
    return float(df[column].min()), float(df[column].max())
