"""
Linear value and time scales mapping data to pixel coordinates.

Tick generation follows the usual "nice number" rule: the tick step is
1, 2 or 5 times a power of ten, picked so that roughly `count` ticks fall
inside the domain.
"""

import datetime as dt
import math
from dataclasses import dataclass
from typing import Callable, List, Tuple

import numpy as np

from ..config.settings import Settings, settings
from ..models.dataset import Dataset
from .formatting import format_number, group_digits

E10 = math.sqrt(50)
E5 = math.sqrt(10)
E2 = math.sqrt(2)


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def _tick_spec(start: float, stop: float, count: int) -> Tuple[int, int, float]:
    step = (stop - start) / max(0, count)
    power = math.floor(math.log10(step))
    error = step / 10 ** power
    factor = 10 if error >= E10 else 5 if error >= E5 else 2 if error >= E2 else 1

    if power < 0:
        # work with the inverse to keep decimal ticks exact
        inc = 10 ** -power / factor
        i1 = _round_half_up(start * inc)
        i2 = _round_half_up(stop * inc)
        if i1 / inc < start:
            i1 += 1
        if i2 / inc > stop:
            i2 -= 1
        return i1, i2, -inc

    inc = 10 ** power * factor
    i1 = _round_half_up(start / inc)
    i2 = _round_half_up(stop / inc)
    if i1 * inc < start:
        i1 += 1
    if i2 * inc > stop:
        i2 -= 1
    return i1, i2, inc


def tick_step(start: float, stop: float, count: int) -> float:
    """Distance between neighbouring nice ticks over [start, stop]."""
    if count <= 0 or start == stop:
        return 0.0
    lo, hi = min(start, stop), max(start, stop)
    _, _, inc = _tick_spec(lo, hi, count)
    return 1 / -inc if inc < 0 else inc


def nice_ticks(start: float, stop: float, count: int) -> List[float]:
    """Evenly spaced, human friendly values covering [start, stop]."""
    if count <= 0:
        return []
    if start == stop:
        return [float(start)]

    reverse = stop < start
    if reverse:
        start, stop = stop, start

    i1, i2, inc = _tick_spec(start, stop, count)
    if i2 < i1:
        return []

    indices = np.arange(i1, i2 + 1, dtype=float)
    values = indices / -inc if inc < 0 else indices * inc
    ticks = values.tolist()
    return ticks[::-1] if reverse else ticks


@dataclass(frozen=True)
class LinearScale:
    """value -> pixel, linear between the two ends of domain and range."""

    domain: Tuple[float, float]
    range: Tuple[float, float]

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            # collapsed domain: pin everything to the range start
            return float(r0)
        t = (value - d0) / (d1 - d0)
        return r0 + t * (r1 - r0)

    def ticks(self, count: int = 10) -> List[float]:
        return nice_ticks(self.domain[0], self.domain[1], count)

    def tick_format(self, count: int = 10) -> Callable[[float], str]:
        step = tick_step(self.domain[0], self.domain[1], count)
        precision = max(0, -math.floor(math.log10(step))) if step > 0 else 0

        def fmt(value: float) -> str:
            if precision == 0:
                return format_number(int(round(value)))
            return group_digits(f"{value:.{precision}f}")

        return fmt


@dataclass(frozen=True)
class TimeScale:
    """date -> pixel, linear over the days elapsed since the domain start."""

    domain: Tuple[dt.date, dt.date]
    range: Tuple[float, float]

    def __call__(self, value: dt.date) -> float:
        d0, d1 = (d.toordinal() for d in self.domain)
        r0, r1 = self.range
        if d1 == d0:
            return float(r0)
        t = (value.toordinal() - d0) / (d1 - d0)
        return r0 + t * (r1 - r0)

    def ticks(self, count: int = 10) -> List[dt.date]:
        """January 1st of every `step`-th year inside the domain."""
        start, stop = sorted(self.domain)
        step = max(1, int(round(tick_step(start.year, stop.year, count))))

        year = start.year if (start.month, start.day) == (1, 1) else start.year + 1
        year = -(-year // step) * step
        return [dt.date(y, 1, 1) for y in range(year, stop.year + 1, step)]

    def tick_format(self, count: int = 10) -> Callable[[dt.date], str]:
        return lambda d: f"{d.year:04d}"


@dataclass(frozen=True)
class ChartScales:
    value: LinearScale
    date: TimeScale
    width: float
    height: float


def build_scales(dataset: Dataset, config: Settings = settings) -> ChartScales:
    """
    Build the value and date scales for a dataset.

    The canvas is exactly wide enough to tile every bar edge to edge, the
    value axis always starts at 0 so bars share a common baseline.
    """
    width = (config.BAR_WIDTH + config.BAR_GAP) * len(dataset)
    height = config.GRAPH_HEIGHT

    value_scale = LinearScale(
        domain=(0.0, dataset.max_value),
        range=(height - config.PADDING_Y, config.PADDING_Y),
    )
    date_scale = TimeScale(
        domain=(dataset.min_date, dataset.max_date),
        range=(config.PADDING_X, width - config.PADDING_X),
    )
    return ChartScales(value=value_scale, date=date_scale, width=width, height=height)
