"""Data preprocessing utilities for race timing data."""

import numpy as np
import pandas as pd
from loguru import logger

# Source column -> record field
COLUMN_MAPPING = {
    "event_race": "race_group_id",
    "event": "event_name",
    "race": "race_name",
    "year": "year",
    "time_in_seconds": "time_seconds",
}


class DataValidationError(ValueError):
    """Raised when the race data cannot be turned into a dataset."""


def _coerce_numeric(series: pd.Series, column: str) -> pd.Series:
    numeric = pd.to_numeric(series, errors="coerce")
    # NaN and +/-inf both fail
    bad_rows = ~np.isfinite(numeric.astype(float))
    if bad_rows.any():
        examples = series[bad_rows].head(3).tolist()
        raise DataValidationError(
            f"Column '{column}' has {int(bad_rows.sum())} missing, non-numeric or infinite values (e.g. {examples})"
        )
    return numeric


def coerce_race_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Select the race columns, coerce types and rename to record fields.

    Args:
        df: Raw CSV DataFrame with the source column names

    Returns:
        New DataFrame with race_group_id, event_name, race_name (str),
        year (int) and time_seconds (float)

    Raises:
        DataValidationError: If the table is empty or a numeric column
            has missing, non-numeric or infinite values
    """
    logger.info("Preprocessing race timing data")

    if df.empty:
        raise DataValidationError("Race data has no rows")

    processed_df = df[list(COLUMN_MAPPING)].rename(columns=COLUMN_MAPPING)

    years = _coerce_numeric(processed_df["year"], "year")
    if not (years == years.round()).all():
        raise DataValidationError("Column 'year' must contain whole numbers")

    processed_df["year"] = years.astype(int)
    processed_df["time_seconds"] = _coerce_numeric(processed_df["time_seconds"], "time_in_seconds").astype(float)

    for column in ("race_group_id", "event_name", "race_name"):
        processed_df[column] = processed_df[column].astype(str)

    return processed_df.reset_index(drop=True)
