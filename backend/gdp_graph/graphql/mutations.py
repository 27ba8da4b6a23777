import strawberry

from ..services.chart_service import chart_service
from .queries import TooltipView, tooltip_view


@strawberry.type
class Mutation:
    @strawberry.mutation
    def pointer_enter(self, index: int, page_x: float) -> TooltipView:
        state = chart_service.pointer_enter(index, page_x)
        return tooltip_view(state)

    @strawberry.mutation
    def pointer_leave(self, index: int) -> TooltipView:
        state = chart_service.pointer_leave(index)
        return tooltip_view(state)
