"""Static plotting of race time trends."""

from pathlib import Path
from typing import Optional, Union

import matplotlib.pyplot as plt
import seaborn as sns
from loguru import logger

from ..analysis.selection import RaceSelection
from ..config import ChartTheme
from ..data_processing.transformers import order_by_year
from .formatting import format_race_time, format_year

DPI = 100


def plot_race_times(
    selection: RaceSelection,
    theme: Optional[ChartTheme] = None,
    save_path: Optional[Union[str, Path]] = None,
) -> plt.Figure:
    """Plot the selected race group's winning times as a static figure.

    Uses the same scales, ticks and labels as the interactive chart. The
    output format follows the ``save_path`` suffix (``.svg``, ``.png``).

    Args:
        selection: Current race selection
        theme: Colours, mark sizes and tick counts
        save_path: Optional path to save the plot

    Returns:
        Matplotlib figure object
    """
    theme = theme or ChartTheme()
    dimensions = selection.dimensions
    logger.info(f"Plotting race times for {selection.event_name} - {selection.race_name}")

    sns.set_theme(style="ticks")
    fig, ax = plt.subplots(figsize=(dimensions.width / DPI, dimensions.height / DPI), dpi=DPI)
    fig.subplots_adjust(
        left=dimensions.margin.left / dimensions.width,
        right=1 - dimensions.margin.right / dimensions.width,
        top=1 - dimensions.margin.top / dimensions.height,
        bottom=dimensions.margin.bottom / dimensions.height,
    )

    data = order_by_year(selection.subset)
    sns.lineplot(
        data=data, x="year", y="time_seconds", ax=ax,
        color=theme.line_color, linewidth=theme.line_width,
        sort=False, estimator=None,
    )
    # Marker size is an area in points squared; radius is in pixels
    marker_diameter_pt = theme.marker_radius * 2 * 72 / DPI
    sns.scatterplot(
        data=data, x="year", y="time_seconds", ax=ax,
        color=theme.marker_color, s=marker_diameter_pt ** 2, edgecolor="none", zorder=3,
    )

    ax.set_xlim(*selection.x_scale.domain)
    ax.set_ylim(*sorted(selection.y_scale.domain))

    x_ticks = selection.x_scale.ticks(theme.x_ticks)
    y_ticks = selection.y_scale.ticks(theme.y_ticks)
    ax.set_xticks(x_ticks)
    ax.set_xticklabels([format_year(year) for year in x_ticks])
    ax.set_yticks(y_ticks)
    ax.set_yticklabels([format_race_time(t) for t in y_ticks])

    ax.set_xlabel("")
    ax.set_ylabel("")
    ax.text(
        0.99, 0.98, f"{selection.event_name}\n{selection.race_name}",
        transform=ax.transAxes, ha="right", va="top", fontsize=9,
    )
    for side in ("top", "right"):
        ax.spines[side].set_visible(False)
    for side in ("left", "bottom"):
        ax.spines[side].set_position(("outward", dimensions.axis_padding))

    fig.text(
        0.99, 0.99,
        f"Data: {theme.caption_source} | Plot: {theme.caption_author}",
        ha="right", va="top", fontsize=8, color="#555555",
    )

    if save_path:
        fig.savefig(save_path, dpi=DPI)
        logger.info(f"Race time plot saved to {save_path}")

    return fig

