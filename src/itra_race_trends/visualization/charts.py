"""Chart creation utilities for race time visualization."""

from typing import Dict, Optional

import plotly.graph_objects as go
from loguru import logger

from ..analysis.selection import RaceSelection
from ..config import ChartTheme
from .formatting import format_race_time, format_year
from .scene import ChartScene, build_scene

LINE_TRACE = 0
MARKER_TRACE = 1
HIGHLIGHT_TRACE = 2


def race_chart_scene(selection: RaceSelection, theme: Optional[ChartTheme] = None) -> ChartScene:
    """Pixel-space scene for the selected race group."""
    theme = theme or ChartTheme()
    return build_scene(
        selection.records_by_year,
        selection.x_scale,
        selection.y_scale,
        marker_radius=theme.marker_radius,
    )


def race_trace_values(selection: RaceSelection, theme: Optional[ChartTheme] = None) -> Dict:
    """Per-selection values shared by the full figure and partial updates.

    Args:
        selection: Current race selection
        theme: Supplies the y-axis tick count

    Returns:
        Dictionary with trace arrays and y-axis settings
    """
    theme = theme or ChartTheme()
    records = selection.records_by_year
    years = [record.year for record in records]
    times = [record.time_seconds for record in records]
    y_ticks = selection.y_scale.ticks(theme.y_ticks)
    return {
        "x": years,
        "y": times,
        "labels": [format_race_time(t) for t in times],
        "y_range": sorted(selection.y_scale.domain),
        "y_tickvals": y_ticks,
        "y_ticktext": [format_race_time(t) for t in y_ticks],
    }


def create_race_time_chart(
    selection: RaceSelection,
    theme: Optional[ChartTheme] = None,
    hover_labels: bool = True,
) -> go.Figure:
    """Create the winning time by year chart for the selected race group.

    Args:
        selection: Current race selection (supplies data and scales)
        theme: Colours, mark sizes and tick counts
        hover_labels: Show Plotly's own hover label on the markers; turn
            off when the page draws its own tooltip

    Returns:
        Plotly figure with line, marker and (empty) highlight traces
    """
    theme = theme or ChartTheme()
    dimensions = selection.dimensions
    values = race_trace_values(selection, theme)
    logger.info(
        f"Creating race time chart: {selection.event_name} - {selection.race_name} "
        f"({len(values['x'])} points)"
    )

    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=values["x"],
        y=values["y"],
        mode="lines",
        name="Winning time",
        line=dict(color=theme.line_color, width=theme.line_width),
        fill="none",
        hoverinfo="skip",
    ))

    fig.add_trace(go.Scatter(
        x=values["x"],
        y=values["y"],
        mode="markers",
        name="Race",
        marker=dict(color=theme.marker_color, size=theme.marker_radius * 2),
        customdata=values["labels"],
        hovertemplate="<b>%{x}</b><br>%{customdata}<extra></extra>" if hover_labels else None,
        hoverinfo=None if hover_labels else "none",
    ))

    # Ring around the hovered point, filled in by the page on hover
    fig.add_trace(go.Scatter(
        x=[],
        y=[],
        mode="markers",
        name="Highlight",
        marker=dict(
            symbol="circle-open",
            size=theme.highlight_radius * 2,
            color=theme.marker_color,
            line=dict(width=theme.highlight_width),
        ),
        hoverinfo="skip",
    ))

    x_ticks = selection.x_scale.ticks(theme.x_ticks)

    fig.update_layout(
        width=dimensions.width,
        height=dimensions.height,
        margin=dict(
            t=dimensions.margin.top,
            r=dimensions.margin.right,
            b=dimensions.margin.bottom,
            l=dimensions.margin.left,
            pad=dimensions.axis_padding,
        ),
        template="plotly_white",
        showlegend=False,
        hovermode="x",
        transition=dict(duration=theme.transition_ms, easing="cubic-in-out"),
        xaxis=dict(
            range=list(selection.x_scale.domain),
            tickvals=x_ticks,
            ticktext=[format_year(year) for year in x_ticks],
            showgrid=False,
            zeroline=False,
            ticks="outside",
        ),
        yaxis=dict(
            range=values["y_range"],
            tickvals=values["y_tickvals"],
            ticktext=values["y_ticktext"],
            showgrid=False,
            zeroline=False,
            ticks="outside",
        ),
        hoverlabel=dict(
            bgcolor="white",
            font_size=12,
            font_family="monospace",
            align="left"
        )
    )

    return fig
