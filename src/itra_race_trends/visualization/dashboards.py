"""Dashboard creation utilities."""

from typing import Dict, List, Optional, Tuple

import dash
import pandas as pd
from dash import Input, Output, Patch, State, dcc, html
from loguru import logger

from ..analysis.nearest import nearest_record, resolve_pointer
from ..analysis.selection import RaceSelection
from ..config import AppSettings, ChartTheme
from ..data_processing.transformers import RaceRecord
from .charts import (
    HIGHLIGHT_TRACE,
    LINE_TRACE,
    MARKER_TRACE,
    create_race_time_chart,
    race_chart_scene,
    race_trace_values,
)
from .formatting import format_race_time
from .scene import MarkerJoin, join_markers, tooltip_anchor

HIDDEN_TOOLTIP = {
    "position": "absolute",
    "top": 0,
    "left": 0,
    "opacity": 0,
    "pointerEvents": "none",
}


def race_chart_patch(
    selection: RaceSelection,
    theme: Optional[ChartTheme] = None,
    join: Optional[MarkerJoin] = None,
) -> Patch:
    """Partial figure update moving the existing marks to a new race group.

    Only trace arrays and the y axis change; the x axis, styling and
    layout stay as they are so the graph can transition in place.

    Args:
        selection: Selection after the change
        theme: Marker size and y-axis tick count
        join: Previous markers matched to the new ones. Exiting markers
            stay in the marker trace at their old position with size 0
            so they shrink away during the transition.

    Returns:
        Patch for the ``race-chart`` figure
    """
    theme = theme or ChartTheme()
    values = race_trace_values(selection, theme)
    exiting = join.exit if join else []

    patch = Patch()
    patch["data"][LINE_TRACE]["x"] = values["x"]
    patch["data"][LINE_TRACE]["y"] = values["y"]
    patch["data"][MARKER_TRACE]["x"] = values["x"] + [marker.record.year for marker in exiting]
    patch["data"][MARKER_TRACE]["y"] = values["y"] + [marker.record.time_seconds for marker in exiting]
    patch["data"][MARKER_TRACE]["customdata"] = (
        values["labels"] + [format_race_time(marker.record.time_seconds) for marker in exiting]
    )
    patch["data"][MARKER_TRACE]["marker"]["size"] = (
        [theme.marker_radius * 2] * len(values["x"]) + [0] * len(exiting)
    )
    patch["data"][HIGHLIGHT_TRACE]["x"] = []
    patch["data"][HIGHLIGHT_TRACE]["y"] = []
    patch["layout"]["yaxis"]["range"] = values["y_range"]
    patch["layout"]["yaxis"]["tickvals"] = values["y_tickvals"]
    patch["layout"]["yaxis"]["ticktext"] = values["y_ticktext"]
    return patch


def highlight_patch(record: Optional[RaceRecord] = None) -> Patch:
    """Move the highlight ring onto ``record``, or hide it when ``None``."""
    patch = Patch()
    patch["data"][HIGHLIGHT_TRACE]["x"] = [record.year] if record else []
    patch["data"][HIGHLIGHT_TRACE]["y"] = [record.time_seconds] if record else []
    return patch


def change_race(
    n_clicks: Optional[int],
    index: Optional[int],
    dataset: pd.DataFrame,
    settings: AppSettings,
) -> Tuple[Patch, int, str, str]:
    """Advance to the next race group.

    Args:
        n_clicks: Button click count (only used as the trigger)
        index: Current selection cursor from the page store
        dataset: Loaded race dataset
        settings: Chart dimensions and theme

    Returns:
        Figure patch, new cursor, event name and race name
    """
    selection = RaceSelection(dataset, index or 0, settings.dimensions)
    previous_markers = race_chart_scene(selection, settings.theme).markers

    selection.advance()
    join = join_markers(previous_markers, race_chart_scene(selection, settings.theme).markers)
    logger.debug(
        f"Race change: {len(join.update)} markers moved, "
        f"{len(join.enter)} added, {len(join.exit)} removed"
    )

    return (
        race_chart_patch(selection, settings.theme, join),
        selection.index,
        selection.event_name,
        selection.race_name,
    )


def show_tooltip(
    hover_data: Optional[Dict],
    index: Optional[int],
    dataset: pd.DataFrame,
    settings: AppSettings,
) -> Tuple[List, Dict, Patch]:
    """Show the tooltip and highlight ring for the point nearest the pointer.

    Args:
        hover_data: Graph hover payload, ``None`` once the pointer leaves
        index: Current selection cursor from the page store
        dataset: Loaded race dataset
        settings: Chart dimensions and theme

    Returns:
        Tooltip children, tooltip style and highlight ring patch
    """
    if not hover_data or not hover_data.get("points"):
        return [], HIDDEN_TOOLTIP, highlight_patch()

    selection = RaceSelection(dataset, index or 0, settings.dimensions)
    point = hover_data["points"][0]

    bbox = point.get("bbox")
    if bbox:
        # bbox is in graph pixels; the scale works inside the margins.
        # Plotly has already snapped to a marker (hovermode "x"), so this
        # always resolves to the hovered record.
        pointer_x = (bbox["x0"] + bbox["x1"]) / 2 - settings.dimensions.margin.left
        record = resolve_pointer(pointer_x, selection.x_scale, selection.records)
    else:
        record = nearest_record(selection.records, float(point["x"]))

    x, y = tooltip_anchor(record, selection.x_scale, selection.y_scale, settings.dimensions)
    children = [
        html.Div(str(record.year), className="year"),
        html.Div(format_race_time(record.time_seconds), className="time"),
    ]
    style = dict(
        HIDDEN_TOOLTIP,
        opacity=1,
        transform=f"translate(calc(-50% + {x:.1f}px), calc(-100% + {y:.1f}px))",
        background="white",
        border=f"1px solid {settings.theme.marker_color}",
        padding="4px 8px",
        fontFamily="monospace",
    )
    return children, style, highlight_patch(record)


def build_race_dashboard(
    dataset: pd.DataFrame,
    settings: Optional[AppSettings] = None,
    start_index: int = 0,
) -> dash.Dash:
    """Build the race trends page.

    Args:
        dataset: Loaded race dataset
        settings: Dimensions, theme and server settings
        start_index: Race group shown first

    Returns:
        Dash application instance
    """
    settings = settings or AppSettings()
    theme = settings.theme
    selection = RaceSelection(dataset, start_index, settings.dimensions)
    logger.info(f"Building race trends dashboard with {len(selection.groups)} race groups")

    app = dash.Dash(__name__)
    app.title = "ITRA Race Trends"

    app.layout = html.Div([
        html.H1("How have winning times changed?", className="header-title"),
        html.H3([
            html.Span(selection.event_name, id="event"),
            " - ",
            html.Span(selection.race_name, id="race"),
        ], className="subtitle"),

        html.Div([
            dcc.Graph(
                id="race-chart",
                figure=create_race_time_chart(selection, theme, hover_labels=False),
                animate=True,
                clear_on_unhover=True,
                config={"displayModeBar": False},
            ),
            html.Div(id="tooltip", className="tooltip", style=HIDDEN_TOOLTIP),
        ], className="chart-container", style={"position": "relative"}),

        html.P([
            html.Strong("Data:"), f" {theme.caption_source} | ",
            html.Strong("Plot:"), f" {theme.caption_author}",
        ], className="caption"),
        html.Button("Change Race", id="change-race", n_clicks=0),
        dcc.Store(id="race-index", data=selection.index),
    ], id="wrapper")

    @app.callback(
        [Output("race-chart", "figure"),
         Output("race-index", "data"),
         Output("event", "children"),
         Output("race", "children")],
        Input("change-race", "n_clicks"),
        State("race-index", "data"),
        prevent_initial_call=True,
    )
    def on_change_race(n_clicks, index):
        return change_race(n_clicks, index, dataset, settings)

    @app.callback(
        [Output("tooltip", "children"),
         Output("tooltip", "style"),
         Output("race-chart", "figure", allow_duplicate=True)],
        Input("race-chart", "hoverData"),
        State("race-index", "data"),
        prevent_initial_call=True,
    )
    def on_hover(hover_data, index):
        return show_tooltip(hover_data, index, dataset, settings)

    return app
