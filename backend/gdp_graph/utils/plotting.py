from typing import Optional

import numpy as np
import plotly.graph_objects as go

from ..charting.formatting import amount_label, quarter_label
from ..config.settings import settings
from ..models.dataset import Dataset


def build_gdp_figure(dataset: Dataset) -> go.Figure:
    """
    Plotly version of the GDP bar chart.

    Hovering a bar shows the same quarter and dollar labels as the SVG
    tooltip.

    Args:
        dataset (Dataset): Points to plot, in feed order
    """
    dates = [p.date for p in dataset.points]
    values = np.array([p.value for p in dataset.points], dtype=float)
    hover = np.array(
        [[quarter_label(p.date), amount_label(p.value)] for p in dataset.points],
        dtype=object,
    )

    fig = go.Figure()

    fig.add_trace(go.Bar(
        x=dates,
        y=values,
        customdata=hover,
        marker=dict(color=settings.BAR_COLOR, line=dict(width=0)),
        hovertemplate="%{customdata[0]}<br>%{customdata[1]}<extra></extra>",
        name="GDP",
    ))

    fig.update_layout(
        title="United States GDP",
        xaxis=dict(title="Year", tickformat="%Y"),
        yaxis=dict(title=settings.Y_AXIS_LABEL, range=[0, dataset.max_value], tickformat=","),
        bargap=0,
        height=settings.GRAPH_HEIGHT,
        template="plotly_white",
    )
    return fig


def plot_gdp(dataset: Dataset, output_path: Optional[str] = None) -> go.Figure:
    """Write the figure to `output_path` as HTML, or open it when no path is given."""
    fig = build_gdp_figure(dataset)
    if output_path:
        fig.write_html(output_path, include_plotlyjs="cdn")
    else:
        fig.show()
    return fig
