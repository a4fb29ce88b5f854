"""Data loading utilities for ITRA race timing data."""

from pathlib import Path
from typing import Optional, Union

import pandas as pd
from loguru import logger

from ..config import DEFAULT_DATA_PATH, REQUIRED_COLUMNS
from .preprocessors import DataValidationError, coerce_race_columns


def resolve_data_path(data_path: Optional[Union[str, Path]] = None) -> Path:
    """Find the race data CSV.

    Args:
        data_path: Explicit path; when omitted the default dataset location
            is looked up from the working directory and its parent

    Returns:
        Path to the CSV file (not checked for existence when explicit)
    """
    if data_path is not None:
        return Path(data_path)

    current_dir = Path.cwd()
    if (current_dir / DEFAULT_DATA_PATH).exists():
        return current_dir / DEFAULT_DATA_PATH
    elif (current_dir.parent / DEFAULT_DATA_PATH).exists():
        return current_dir.parent / DEFAULT_DATA_PATH
    # Fallback to relative path
    return DEFAULT_DATA_PATH


def load_race_data(data_path: Optional[Union[str, Path]] = None) -> pd.DataFrame:
    """Load the race timing dataset.

    Args:
        data_path: CSV file with columns event_race, event, race, year,
            time_in_seconds

    Returns:
        DataFrame with columns race_group_id, event_name, race_name, year,
        time_seconds in file order

    Raises:
        FileNotFoundError: If the CSV file does not exist
        DataValidationError: If a required column is missing or non-numeric
    """
    csv_path = resolve_data_path(data_path)
    logger.info(f"Loading race data from {csv_path}")

    if not csv_path.exists():
        logger.error(f"Race data file not found: {csv_path}")
        raise FileNotFoundError(f"Race data file not found: {csv_path}")

    try:
        # Every cell stays text ("050", "NA"); numeric columns are coerced later
        df = pd.read_csv(csv_path, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError:
        logger.error(f"Race data file is empty: {csv_path}")
        raise DataValidationError(f"{csv_path} contains no data")

    # Clean up column names (remove leading/trailing whitespace)
    df.columns = df.columns.str.strip()

    missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
    if missing:
        logger.error(f"Missing columns in {csv_path.name}: {missing}")
        raise DataValidationError(f"{csv_path.name} is missing required columns: {', '.join(missing)}")

    try:
        dataset = coerce_race_columns(df)
    except DataValidationError as e:
        logger.error(f"Invalid race data in {csv_path.name}: {e}")
        raise

    logger.info(
        f"Loaded {len(dataset)} race records "
        f"({dataset['race_group_id'].nunique()} race groups) from {csv_path.name}"
    )
    return dataset
