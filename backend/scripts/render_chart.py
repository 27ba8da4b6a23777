import asyncio
import os

from gdp_graph.charting.renderer import render_page
from gdp_graph.config.settings import settings
from gdp_graph.services.chart_service import ChartService
from gdp_graph.utils.plotting import plot_gdp


async def main():
    service = ChartService()
    surface = await service.load_async()

    output_path = settings.OUTPUT_PATH
    os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as handle:
        handle.write(render_page(surface))
    print(f"Saved chart ({len(surface.bars)} bars) to {os.path.abspath(output_path)}")

    root, ext = os.path.splitext(output_path)
    plotly_path = f"{root}_plotly{ext or '.html'}"
    plot_gdp(service.dataset, output_path=plotly_path)
    print(f"Saved plotly chart to {os.path.abspath(plotly_path)}")


if __name__ == "__main__":
    asyncio.run(main())
