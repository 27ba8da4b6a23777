from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

MOUSE_ENTER = "mouseenter"
MOUSE_LEAVE = "mouseleave"


@dataclass(frozen=True)
class PointerEvent:
    type: str
    target: int  # bar index
    page_x: float = 0.0


Handler = Callable[[PointerEvent], None]


class EventDispatcher:
    """
    Routes pointer events to handlers bound per (target, event type).

    Dispatch is synchronous: each event runs all of its handlers before
    `dispatch` returns, so events are handled one at a time in arrival order.
    """

    def __init__(self):
        self._handlers: Dict[Tuple[int, str], List[Handler]] = defaultdict(list)

    def on(self, target: int, event_type: str, handler: Handler):
        self._handlers[(target, event_type)].append(handler)

    def dispatch(self, event: PointerEvent) -> bool:
        """Run the handlers for `event`; False when nothing is bound."""
        handlers = self._handlers.get((event.target, event.type))
        if not handlers:
            return False
        for handler in handlers:
            handler(event)
        return True

    def clear(self):
        self._handlers.clear()
