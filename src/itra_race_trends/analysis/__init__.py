"""Analysis modules: scales, selection state and pointer lookup."""

from .scales import *
from .nearest import *
from .selection import *

__all__ = [
    "LinearScale",
    "tick_increment",
    "ticks",
    "build_x_scale",
    "build_y_scale",
    "nearest_record",
    "resolve_pointer",
    "RaceSelection",
]
