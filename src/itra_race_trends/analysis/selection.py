"""Race group selection state."""

from typing import List, Optional

import pandas as pd
from loguru import logger

from ..config import ChartDimensions
from ..data_processing.transformers import (
    RaceRecord,
    order_by_year,
    race_groups,
    race_subset,
    to_records,
)
from .scales import LinearScale, build_x_scale, build_y_scale


class RaceSelection:
    """Cursor over the race groups of a dataset.

    The x scale is built once from the whole dataset. The active subset and
    the y scale follow the cursor and are rebuilt whenever it moves.

    Args:
        dataset: Loaded race dataset; never modified
        index: Initial cursor, wrapped into range
        dimensions: Chart size used for the scale ranges
    """

    def __init__(
        self,
        dataset: pd.DataFrame,
        index: int = 0,
        dimensions: Optional[ChartDimensions] = None,
    ):
        if dataset.empty:
            raise ValueError("Cannot select a race from an empty dataset")

        self.dataset = dataset
        self.dimensions = dimensions or ChartDimensions()
        self.groups: List[str] = race_groups(dataset)
        self.x_scale: LinearScale = build_x_scale(dataset, self.dimensions.bounded_width)
        self.index = index % len(self.groups)
        self._refresh()

    def _refresh(self) -> None:
        self.subset = race_subset(self.dataset, self.race_group_id)
        self.y_scale = build_y_scale(self.subset, self.dimensions.bounded_height)

    @property
    def race_group_id(self) -> str:
        return self.groups[self.index]

    @property
    def records(self) -> List[RaceRecord]:
        """Active subset records in dataset order (the tooltip scan order)."""
        return to_records(self.subset)

    @property
    def records_by_year(self) -> List[RaceRecord]:
        """Active subset records in drawing order."""
        return to_records(order_by_year(self.subset))

    @property
    def event_name(self) -> str:
        return self.subset["event_name"].iloc[0]

    @property
    def race_name(self) -> str:
        return self.subset["race_name"].iloc[0]

    def advance(self) -> str:
        """Move to the next race group, wrapping after the last one.

        Returns:
            The newly selected race group id
        """
        self.index = (self.index + 1) % len(self.groups)
        self._refresh()
        logger.info(
            f"Selected race group {self.index + 1}/{len(self.groups)}: "
            f"{self.event_name} - {self.race_name}"
        )
        return self.race_group_id
