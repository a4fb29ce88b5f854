"""Axis and tooltip label formatting."""

import math


def format_race_time(seconds: float) -> str:
    """Format a duration as hours and zero-padded minutes, e.g. ``1H 01M``.

    Minutes are rounded half up; a value that rounds to 60 minutes rolls
    over into the next hour.
    """
    hours = math.floor(seconds / 3600)
    minutes = math.floor((seconds - hours * 3600) / 60 + 0.5)
    if minutes == 60:
        hours += 1
        minutes = 0
    return f"{hours}H {minutes:02d}M"


def format_year(year: float) -> str:
    """Plain year label with no thousands separator."""
    if float(year).is_integer():
        return str(int(year))
    return f"{year:g}"
