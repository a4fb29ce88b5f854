"""ITRA Race Trends.

Interactive charts of ultra-trail race winning times by year, one race
at a time, with nearest-point tooltips and a race switcher.
"""

__version__ = "0.1.0"

# Make key modules easily accessible
from . import data_processing
from . import analysis
from . import visualization

__all__ = [
    "data_processing",
    "analysis",
    "visualization",
]
