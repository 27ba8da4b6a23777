import datetime as dt

import pytest

from gdp_graph.charting.events import MOUSE_ENTER, EventDispatcher, PointerEvent
from gdp_graph.charting.tooltip import (
    OpacityTransition,
    TooltipController,
    TooltipPhase,
    TooltipState,
    ease_cubic_in_out,
)
from gdp_graph.config.settings import settings
from gdp_graph.models.data_point import DataPoint
from gdp_graph.services.chart_service import ChartService

POINT = DataPoint(date=dt.date(2015, 4, 1), value=18064.7)
OTHER = DataPoint(date=dt.date(2015, 7, 1), value=18200)


def test_easing_endpoints():
    assert ease_cubic_in_out(0) == 0
    assert ease_cubic_in_out(0.5) == 0.5
    assert ease_cubic_in_out(1) == 1


def test_transition_progress():
    fade = OpacityTransition(start_opacity=0, target_opacity=1, started_at=10, duration_ms=400)
    assert fade.opacity_at(10) == 0
    assert fade.opacity_at(10.2) == pytest.approx(0.5)
    assert fade.opacity_at(10.4) == 1
    assert fade.opacity_at(99) == 1
    assert fade.finished(10.4)
    assert not fade.finished(10.1)


def test_starts_hidden():
    state = TooltipState()
    assert state.phase == TooltipPhase.HIDDEN
    assert state.opacity_at(0) == 0
    assert state.point is None


def test_enter_shows_point_next_to_pointer():
    controller = TooltipController()
    state = controller.enter(TooltipState(), POINT, page_x=100, now=0)
    assert state.phase == TooltipPhase.VISIBLE
    assert state.date_text == "2015 Q2"
    assert state.amount_text == "$18,064.7 Billion"
    assert state.data_date == "2015-04-01"
    assert state.left == 100 + settings.TOOLTIP_OFFSET_X
    assert state.top == settings.GRAPH_HEIGHT - settings.TOOLTIP_OFFSET_BOTTOM
    assert state.opacity_at(0) == 0
    assert state.opacity_at(0.4) == 1


def test_leave_fades_out_and_keeps_text():
    controller = TooltipController()
    shown = controller.enter(TooltipState(), POINT, page_x=100, now=0)
    hidden = controller.leave(shown, now=1)
    assert hidden.phase == TooltipPhase.HIDDEN
    assert hidden.date_text == "2015 Q2"
    assert hidden.opacity_at(1) == 1
    assert hidden.opacity_at(1.4) == pytest.approx(0)


def test_interrupted_fade_starts_from_current_opacity():
    controller = TooltipController()
    shown = controller.enter(TooltipState(), POINT, page_x=100, now=0)
    hidden = controller.leave(shown, now=0.2)
    assert hidden.transition.start_opacity == pytest.approx(0.5)
    assert hidden.opacity_at(0.2) == pytest.approx(0.5)


def test_last_event_wins():
    controller = TooltipController()
    state = controller.enter(TooltipState(), POINT, page_x=100, now=0)
    state = controller.leave(state, now=0.05)
    state = controller.enter(state, OTHER, page_x=102, now=0.06)
    assert state.phase == TooltipPhase.VISIBLE
    assert state.date_text == "2015 Q3"
    assert state.left == 102 + settings.TOOLTIP_OFFSET_X


def test_dispatcher_runs_handlers_in_order():
    seen = []
    dispatcher = EventDispatcher()
    dispatcher.on(0, MOUSE_ENTER, lambda e: seen.append(("a", e.page_x)))
    dispatcher.on(0, MOUSE_ENTER, lambda e: seen.append(("b", e.page_x)))
    assert dispatcher.dispatch(PointerEvent(MOUSE_ENTER, 0, 5))
    assert seen == [("a", 5), ("b", 5)]
    assert not dispatcher.dispatch(PointerEvent(MOUSE_ENTER, 1, 5))


def test_service_hover_cycle(two_quarters, clock):
    service = ChartService(clock=clock)
    surface = service.render(two_quarters)

    service.pointer_enter(1, page_x=200)
    bar = surface.bars[1]
    assert bar.style["fill"] == settings.BAR_HIGHLIGHT_COLOR
    assert surface.tooltip.get("data-date") == "2015-04-01"
    assert surface.tooltip.find("p", "date").text == "2015 Q2"
    assert surface.tooltip.find("p", "amount").text == "$75 Billion"
    assert surface.tooltip.style["left"] == "216px"
    assert surface.tooltip.style["top"] == "300px"

    clock.advance(0.4)
    assert service.tooltip_opacity() == 1

    state = service.pointer_leave(1)
    assert bar.style["fill"] == settings.BAR_COLOR
    assert state.phase == TooltipPhase.HIDDEN
    clock.advance(0.4)
    assert service.tooltip_opacity() == pytest.approx(0)


def test_service_rejects_unknown_bar(two_quarters, clock):
    service = ChartService(clock=clock)
    service.render(two_quarters)
    with pytest.raises(IndexError):
        service.pointer_enter(5, page_x=0)


def test_service_requires_loaded_chart():
    service = ChartService()
    assert not service.ready
    with pytest.raises(RuntimeError):
        service.pointer_enter(0, page_x=0)
    with pytest.raises(RuntimeError):
        service.page_html()
