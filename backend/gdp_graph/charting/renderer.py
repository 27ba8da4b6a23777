"""
SVG rendering of the GDP bar chart.

The page from `render_page` is a static snapshot: it carries no script, so
hovering a bar in a browser does not move the tooltip. Hover is driven
server-side through `ChartService.pointer_enter/pointer_leave` (the GraphQL
mutations); the plotly page is the browser-interactive version and can be
linked from the snapshot.
"""

from dataclasses import dataclass
from html import escape
from typing import List, Optional

from ..config.settings import Settings, settings
from ..models.dataset import Dataset
from ..utils.logger import log
from .axes import axis_bottom, axis_left
from .scales import ChartScales
from .surface import Element

logger = log

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
  body {{ font-family: sans-serif; }}
  #app {{ position: relative; }}
  .tooltip {{
    position: absolute;
    padding: 0.4rem 0.8rem;
    background: rgba(255, 255, 255, 0.9);
    border: 1px solid #999;
    pointer-events: none;
  }}
  .tooltip p {{ margin: 0.2rem 0; }}
</style>
</head>
<body>
{body}
</body>
</html>
"""


@dataclass
class ChartSurface:
    """Everything drawn for one dataset, kept addressable for event handling."""

    container: Element
    svg: Element
    bars: List[Element]
    x_axis: Element
    y_axis: Element
    label: Element
    tooltip: Element
    width: float
    height: float

    def to_markup(self) -> str:
        return self.container.to_markup()


class ChartRenderer:
    def __init__(self, config: Settings = settings):
        self.config = config

    def render(self, dataset: Dataset, scales: ChartScales) -> ChartSurface:
        """
        Draw the bars, then both axes, then the rotated label, so that the
        tick lines stay on top of the first bar.
        """
        cfg = self.config
        container = Element("div", {"id": "app"})
        svg = container.append(
            "svg", class_="gdp-graph", width=scales.width, height=scales.height,
            xmlns="http://www.w3.org/2000/svg",
        )

        tooltip = container.append("div", id="tooltip", class_="tooltip", data_date="")
        tooltip.css("opacity", 0)
        tooltip.append("p", class_="date", data_date="")
        tooltip.append("p", class_="amount")

        bars = []
        for index, point in enumerate(dataset.points):
            y = scales.value(point.value)
            bar = svg.append(
                "rect",
                class_="bar",
                data_date=point.date_string,
                data_gdp=point.value,
                data_index=index,
                fill=cfg.BAR_COLOR,
                x=scales.date(point.date),
                y=y,
                width=cfg.BAR_WIDTH,
                # negative values would sit below the baseline
                height=max(0.0, scales.height - y - cfg.PADDING_Y),
            )
            bars.append(bar)

        x_axis = axis_bottom(
            svg, scales.date, cfg.AXIS_TICK_COUNT,
            id="x-axis", transform=f"translate(0, {scales.value(0):g})",
        )
        y_axis = axis_left(
            svg, scales.value, cfg.AXIS_TICK_COUNT,
            id="y-axis", transform=f"translate({scales.date(dataset.min_date):g}, 0)",
            class_="ticks",
        )

        label = svg.append(
            "text",
            transform=f"translate({cfg.Y_AXIS_LABEL_X:g}, {cfg.Y_AXIS_LABEL_Y:g}) rotate(-90)",
            x="0",
            y="0",
        )
        label.css("font-size", ".8rem").set_text(cfg.Y_AXIS_LABEL)

        logger.info(f"Rendered {len(bars)} bars on a {scales.width:g}x{scales.height:g} canvas")
        return ChartSurface(
            container=container,
            svg=svg,
            bars=bars,
            x_axis=x_axis,
            y_axis=y_axis,
            label=label,
            tooltip=tooltip,
            width=scales.width,
            height=scales.height,
        )


def render_page(surface: ChartSurface, title: str = "GDP Graph",
                interactive_url: Optional[str] = None) -> str:
    """Standalone HTML document embedding the chart and its tooltip."""
    body = surface.to_markup()
    if interactive_url:
        body += f'\n<p class="interactive"><a href="{escape(interactive_url, quote=True)}">Interactive chart</a></p>'
    return PAGE_TEMPLATE.format(title=title, body=body)
