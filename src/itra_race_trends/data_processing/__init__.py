"""Data processing utilities for ITRA race timing data."""

from .loaders import *
from .preprocessors import *
from .transformers import *

__all__ = [
    "load_race_data",
    "resolve_data_path",
    "coerce_race_columns",
    "DataValidationError",
    "RaceRecord",
    "to_records",
    "race_groups",
    "race_subset",
    "order_by_year",
    "extent",
]
