"""Visualization components for race time charts and dashboards."""

from .charts import *
from .dashboards import *
from .formatting import *
from .plots import *
from .scene import *

__all__ = [
    "create_race_time_chart",
    "race_chart_scene",
    "race_trace_values",
    "race_chart_patch",
    "highlight_patch",
    "build_race_dashboard",
    "change_race",
    "show_tooltip",
    "format_race_time",
    "format_year",
    "plot_race_times",
    "ChartScene",
    "Marker",
    "MarkerJoin",
    "build_scene",
    "join_markers",
    "tooltip_anchor",
]
