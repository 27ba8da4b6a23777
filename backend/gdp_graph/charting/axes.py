"""
Axis rulers drawn the way browser charting libraries lay them out: a
`path.domain` spanning the scale range plus one `g.tick` per tick value.
"""

from typing import Union

from .scales import LinearScale, TimeScale
from .surface import Element

Scale = Union[LinearScale, TimeScale]

TICK_SIZE = 6
TICK_PADDING = 3


def _axis_group(parent: Element, anchor: str, **attrs) -> Element:
    group = parent.append("g", **attrs)
    group.set("fill", "none")
    group.set("font-size", 10)
    group.set("font-family", "sans-serif")
    group.set("text-anchor", anchor)
    return group


def axis_bottom(parent: Element, scale: Scale, count: int = 10, **attrs) -> Element:
    """Horizontal axis with ticks hanging below the line."""
    group = _axis_group(parent, "middle", **attrs)
    r0, r1 = scale.range
    group.append(
        "path", class_="domain", stroke="currentColor",
        d=f"M{r0:g},{TICK_SIZE}V0H{r1:g}V{TICK_SIZE}",
    )

    fmt = scale.tick_format(count)
    for value in scale.ticks(count):
        tick = group.append("g", class_="tick", opacity=1, transform=f"translate({scale(value):g},0)")
        tick.append("line", stroke="currentColor", y2=TICK_SIZE)
        tick.append(
            "text", fill="currentColor", y=TICK_SIZE + TICK_PADDING, dy="0.71em"
        ).set_text(fmt(value))
    return group


def axis_left(parent: Element, scale: Scale, count: int = 10, **attrs) -> Element:
    """Vertical axis with ticks pointing left of the line."""
    group = _axis_group(parent, "end", **attrs)
    r0, r1 = scale.range
    group.append(
        "path", class_="domain", stroke="currentColor",
        d=f"M{-TICK_SIZE},{r0:g}H0V{r1:g}H{-TICK_SIZE}",
    )

    fmt = scale.tick_format(count)
    for value in scale.ticks(count):
        tick = group.append("g", class_="tick", opacity=1, transform=f"translate(0,{scale(value):g})")
        tick.append("line", stroke="currentColor", x2=-TICK_SIZE)
        tick.append(
            "text", fill="currentColor", x=-(TICK_SIZE + TICK_PADDING), dy="0.32em"
        ).set_text(fmt(value))
    return group
