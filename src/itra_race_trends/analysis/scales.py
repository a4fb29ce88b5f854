"""Linear scales mapping data values to chart pixels."""

import math
from typing import List, Sequence

import pandas as pd
from loguru import logger

from ..data_processing.transformers import extent

# Thresholds for picking a 10, 5, 2 or 1 multiple of a power of ten
_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)


def tick_increment(start: float, stop: float, count: int) -> float:
    """Step between round ticks covering [start, stop] with about ``count`` ticks.

    A positive result is the step itself. A negative result ``-k`` means
    the step is ``1 / k``, which keeps fractional steps exact.
    """
    step = (stop - start) / count if count > 0 else math.inf
    if step <= 0 or not math.isfinite(step):
        return 0.0
    power = math.floor(math.log10(step))
    error = step / 10 ** power
    if error >= _E10:
        factor = 10
    elif error >= _E5:
        factor = 5
    elif error >= _E2:
        factor = 2
    else:
        factor = 1
    if power >= 0:
        return factor * 10 ** power
    return -(10 ** -power) / factor


def ticks(start: float, stop: float, count: int) -> List[float]:
    """Round tick values inside [start, stop].

    Args:
        start: Domain start
        stop: Domain stop
        count: Approximate number of ticks wanted

    Returns:
        Tick values in the direction of the domain
    """
    if start == stop and count > 0:
        return [start]
    reverse = stop < start
    if reverse:
        start, stop = stop, start

    step = tick_increment(start, stop, count)
    if step == 0:
        return []

    if step > 0:
        r0, r1 = round(start / step), round(stop / step)
        if r0 * step < start:
            r0 += 1
        if r1 * step > stop:
            r1 -= 1
        values = [(r0 + i) * step for i in range(r1 - r0 + 1)]
    else:
        step = -step
        r0, r1 = round(start * step), round(stop * step)
        if r0 / step < start:
            r0 += 1
        if r1 / step > stop:
            r1 -= 1
        values = [(r0 + i) / step for i in range(r1 - r0 + 1)]

    if reverse:
        values.reverse()
    return values


class LinearScale:
    """Continuous linear mapping from a data domain to a pixel range.

    Values outside the domain extrapolate; nothing is clamped.
    """

    def __init__(self, domain: Sequence[float], range_: Sequence[float]):
        self.domain = (float(domain[0]), float(domain[1]))
        self.range = (float(range_[0]), float(range_[1]))

    def __repr__(self) -> str:
        return f"LinearScale(domain={self.domain}, range={self.range})"

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            # Degenerate domain: everything sits in the middle of the range
            return r0 + (r1 - r0) * 0.5
        return r0 + (value - d0) / (d1 - d0) * (r1 - r0)

    def invert(self, pixel: float) -> float:
        """Map a pixel position back to a domain value."""
        d0, d1 = self.domain
        r0, r1 = self.range
        if r1 == r0:
            return d0 + (d1 - d0) * 0.5
        return d0 + (pixel - r0) / (r1 - r0) * (d1 - d0)

    def ticks(self, count: int = 10) -> List[float]:
        return ticks(self.domain[0], self.domain[1], count)

    def nice(self, count: int = 10) -> "LinearScale":
        """Extend the domain outward to round tick boundaries, in place.

        Repeats until the tick step stops changing, since widening the
        domain can change the step.
        """
        start, stop = self.domain
        reverse = stop < start
        if reverse:
            start, stop = stop, start

        previous_step = None
        for _ in range(10):
            step = tick_increment(start, stop, count)
            if step == previous_step:
                break
            if step > 0:
                start = math.floor(start / step) * step
                stop = math.ceil(stop / step) * step
            elif step < 0:
                start = math.ceil(start * step) / step
                stop = math.floor(stop * step) / step
            else:
                break
            previous_step = step

        self.domain = (stop, start) if reverse else (start, stop)
        return self


def build_x_scale(dataset: pd.DataFrame, width: float) -> LinearScale:
    """Year scale over the whole dataset, mapped onto [0, width].

    Raises:
        ValueError: If the dataset is empty
    """
    scale = LinearScale(extent(dataset, "year"), (0, width))
    logger.debug(f"Built x scale {scale}")
    return scale


def build_y_scale(subset: pd.DataFrame, height: float, nice_count: int = 10) -> LinearScale:
    """Time scale over one race group, mapped onto [height, 0] and niced.

    Args:
        subset: Active race group records
        height: Bounded chart height in pixels
        nice_count: Tick count used when rounding the domain

    Returns:
        LinearScale with a niced domain containing every time in ``subset``

    Raises:
        ValueError: If the subset is empty
    """
    scale = LinearScale(extent(subset, "time_seconds"), (height, 0)).nice(nice_count)
    logger.debug(f"Built y scale {scale}")
    return scale
