import strawberry
from typing import List

from ..charting.formatting import amount_label, quarter_label
from ..charting.tooltip import TooltipState
from ..services.chart_service import chart_service


@strawberry.type
class ChartInfo:
    width: float
    height: float
    bar_count: int
    min_date: str
    max_date: str
    min_value: float
    max_value: float


@strawberry.type
class Point:
    date: str
    value: float
    quarter_label: str
    amount_label: str


@strawberry.type
class TooltipView:
    visible: bool
    opacity: float
    data_date: str
    date_text: str
    amount_text: str
    left: float
    top: float


def tooltip_view(state: TooltipState) -> TooltipView:
    return TooltipView(
        visible=state.transition.target_opacity > 0,
        opacity=round(chart_service.tooltip_opacity(), 4),
        data_date=state.data_date,
        date_text=state.date_text,
        amount_text=state.amount_text,
        left=state.left,
        top=state.top,
    )


@strawberry.type
class Query:
    @strawberry.field
    def chart(self) -> ChartInfo:
        if not chart_service.ready:
            raise ValueError("Chart has not been loaded")

        dataset = chart_service.dataset
        return ChartInfo(
            width=chart_service.scales.width,
            height=chart_service.scales.height,
            bar_count=len(dataset),
            min_date=dataset.min_date.isoformat(),
            max_date=dataset.max_date.isoformat(),
            min_value=dataset.min_value,
            max_value=dataset.max_value,
        )

    @strawberry.field
    def points(self) -> List[Point]:
        if not chart_service.ready:
            raise ValueError("Chart has not been loaded")

        return [
            Point(
                date=p.date_string,
                value=p.value,
                quarter_label=quarter_label(p.date),
                amount_label=amount_label(p.value),
            )
            for p in chart_service.dataset.points
        ]

    @strawberry.field
    def tooltip(self) -> TooltipView:
        return tooltip_view(chart_service.tooltip_state)
