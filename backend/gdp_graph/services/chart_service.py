import time
from typing import Callable, Optional

from ..charting.events import MOUSE_ENTER, MOUSE_LEAVE, EventDispatcher, PointerEvent
from ..charting.renderer import ChartRenderer, ChartSurface, render_page
from ..charting.scales import ChartScales, build_scales
from ..charting.tooltip import TooltipController, TooltipState, apply_tooltip
from ..config.settings import Settings, settings
from ..models.dataset import Dataset
from ..utils.logger import log
from .fetcher import GDPFetcher

logger = log


class ChartService:
    """
    Holds the single rendered chart and its tooltip.

    The chart is loaded once; pointer events on its bars go through the
    event dispatcher, which updates the bar fill and the tooltip state.
    """

    def __init__(self, fetcher: Optional[GDPFetcher] = None, config: Settings = settings,
                 clock: Callable[[], float] = time.monotonic):
        self.config = config
        self.fetcher = fetcher or GDPFetcher(config.DATA_URL)
        self.clock = clock
        self.renderer = ChartRenderer(config)
        self.controller = TooltipController(config, clock=clock)
        self.dispatcher = EventDispatcher()

        self.dataset: Optional[Dataset] = None
        self.scales: Optional[ChartScales] = None
        self.surface: Optional[ChartSurface] = None
        self.tooltip_state = TooltipState()

    @property
    def ready(self) -> bool:
        return self.surface is not None

    def load(self) -> ChartSurface:
        return self.render(self.fetcher.fetch())

    async def load_async(self) -> ChartSurface:
        # rendering only starts once the whole dataset has arrived
        dataset = await self.fetcher.fetch_async()
        return self.render(dataset)

    def render(self, dataset: Dataset) -> ChartSurface:
        self.dataset = dataset
        self.scales = build_scales(dataset, self.config)
        self.surface = self.renderer.render(dataset, self.scales)
        self.tooltip_state = TooltipState()
        self._bind_events()
        return self.surface

    def _bind_events(self):
        self.dispatcher.clear()
        for index in range(len(self.surface.bars)):
            self.dispatcher.on(index, MOUSE_ENTER, self._on_enter)
            self.dispatcher.on(index, MOUSE_LEAVE, self._on_leave)

    def _on_enter(self, event: PointerEvent):
        self.surface.bars[event.target].css("fill", self.config.BAR_HIGHLIGHT_COLOR)
        point = self.dataset[event.target]
        self.tooltip_state = self.controller.enter(self.tooltip_state, point, event.page_x, self.clock())

    def _on_leave(self, event: PointerEvent):
        self.surface.bars[event.target].css("fill", self.config.BAR_COLOR)
        self.tooltip_state = self.controller.leave(self.tooltip_state, self.clock())

    def _require_surface(self) -> ChartSurface:
        if self.surface is None:
            raise RuntimeError("Chart has not been loaded")
        return self.surface

    def _send(self, event: PointerEvent) -> TooltipState:
        surface = self._require_surface()
        if not 0 <= event.target < len(surface.bars):
            raise IndexError(f"No bar at index {event.target}")
        self.dispatcher.dispatch(event)
        apply_tooltip(surface.tooltip, self.tooltip_state, self.clock())
        return self.tooltip_state

    def pointer_enter(self, index: int, page_x: float) -> TooltipState:
        return self._send(PointerEvent(MOUSE_ENTER, index, page_x))

    def pointer_leave(self, index: int) -> TooltipState:
        return self._send(PointerEvent(MOUSE_LEAVE, index))

    def tooltip_opacity(self) -> float:
        return self.tooltip_state.opacity_at(self.clock())

    def svg_markup(self) -> str:
        return self._require_surface().svg.to_markup()

    def page_html(self, interactive_url: Optional[str] = None) -> str:
        surface = self._require_surface()
        apply_tooltip(surface.tooltip, self.tooltip_state, self.clock())
        return render_page(surface, interactive_url=interactive_url)


# global instance
chart_service = ChartService()
