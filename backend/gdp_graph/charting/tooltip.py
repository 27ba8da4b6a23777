"""
Tooltip state machine.

The tooltip is either HIDDEN (fading towards opacity 0) or VISIBLE (fading
towards opacity 1). Pointer events produce a new `TooltipState`; the caller
keeps the current one and mirrors it onto the tooltip element with
`apply_tooltip`. A fade that is interrupted restarts from whatever opacity
the previous fade had reached, and the latest event always decides the
displayed text and the target opacity.
"""

import time
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional

from ..config.settings import Settings, settings
from ..models.data_point import DataPoint
from ..utils.logger import log
from .formatting import amount_label, quarter_label
from .surface import Element

logger = log


class TooltipPhase(str, Enum):
    HIDDEN = "hidden"
    VISIBLE = "visible"


def ease_cubic_in_out(t: float) -> float:
    t *= 2
    if t <= 1:
        return t * t * t / 2
    t -= 2
    return (t * t * t + 2) / 2


@dataclass(frozen=True)
class OpacityTransition:
    start_opacity: float
    target_opacity: float
    started_at: float
    duration_ms: float

    def progress(self, now: float) -> float:
        if self.duration_ms <= 0:
            return 1.0
        elapsed_ms = (now - self.started_at) * 1000
        return min(1.0, max(0.0, elapsed_ms / self.duration_ms))

    def opacity_at(self, now: float) -> float:
        eased = ease_cubic_in_out(self.progress(now))
        return self.start_opacity + (self.target_opacity - self.start_opacity) * eased

    def finished(self, now: float) -> bool:
        return self.progress(now) >= 1.0


@dataclass(frozen=True)
class TooltipState:
    point: Optional[DataPoint] = None
    date_text: str = ""
    amount_text: str = ""
    data_date: str = ""
    left: float = 0.0
    top: float = 0.0
    transition: OpacityTransition = OpacityTransition(0.0, 0.0, 0.0, 0.0)

    @property
    def phase(self) -> TooltipPhase:
        if self.transition.target_opacity > 0:
            return TooltipPhase.VISIBLE
        return TooltipPhase.HIDDEN

    def opacity_at(self, now: float) -> float:
        return self.transition.opacity_at(now)


class TooltipController:
    def __init__(self, config: Settings = settings, clock: Callable[[], float] = time.monotonic):
        self.duration_ms = config.TOOLTIP_TRANSITION_MS
        self.offset_x = config.TOOLTIP_OFFSET_X
        self.top = config.GRAPH_HEIGHT - config.TOOLTIP_OFFSET_BOTTOM
        self.clock = clock

    def _fade(self, state: TooltipState, target: float, now: float) -> OpacityTransition:
        return OpacityTransition(
            start_opacity=state.opacity_at(now),
            target_opacity=target,
            started_at=now,
            duration_ms=self.duration_ms,
        )

    def enter(self, state: TooltipState, point: DataPoint, page_x: float,
              now: Optional[float] = None) -> TooltipState:
        """HIDDEN/VISIBLE -> VISIBLE, showing `point` next to the pointer."""
        now = self.clock() if now is None else now
        logger.debug(f"Tooltip enter {point.date_string} at x={page_x}")
        return TooltipState(
            point=point,
            date_text=quarter_label(point.date),
            amount_text=amount_label(point.value),
            data_date=point.date_string,
            left=page_x + self.offset_x,
            top=self.top,
            transition=self._fade(state, 1.0, now),
        )

    def leave(self, state: TooltipState, now: Optional[float] = None) -> TooltipState:
        """VISIBLE -> HIDDEN; the text stays as it was while fading out."""
        now = self.clock() if now is None else now
        logger.debug("Tooltip leave")
        return replace(state, transition=self._fade(state, 0.0, now))


def apply_tooltip(element: Element, state: TooltipState, now: float) -> Element:
    """Mirror `state` onto the `div.tooltip` element as of time `now`."""
    element.css("top", f"{state.top:g}px")
    element.css("left", f"{state.left:g}px")
    element.css("opacity", round(state.opacity_at(now), 4))
    element.set("data-date", state.data_date)

    date_line = element.find("p", "date")
    if date_line is not None:
        date_line.set_text(state.date_text)
    amount_line = element.find("p", "amount")
    if amount_line is not None:
        amount_line.set_text(state.amount_text)
    return element
