from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse, Response
from strawberry.fastapi import GraphQLRouter

from .config.settings import settings
from .graphql.schema import schema
from .models.errors import GDPGraphError
from .services.chart_service import chart_service
from .utils.logger import log
from .utils.plotting import build_gdp_figure

app = FastAPI(
    title="GDP Graph",
    description="Quarterly US GDP bar chart with hover tooltips",
    version="1.0.0",
    debug=settings.DEBUG,
)

# -----------------------------
# Startup: fetch once, then render
# -----------------------------
@app.on_event("startup")
async def on_startup():
    try:
        await chart_service.load_async()
    except GDPGraphError as e:
        log.error(f"❌ Could not load GDP data: {e}")
        raise
    log.info("✅ GDP chart rendered")

# -----------------------------
# Mount GraphQL
# -----------------------------
graphql_app = GraphQLRouter(schema)
app.include_router(graphql_app, prefix="/graphql")


def _require_chart():
    if not chart_service.ready:
        raise HTTPException(status_code=503, detail="Chart has not been loaded")


# -----------------------------
# Rendered chart
# -----------------------------
@app.get("/", response_class=HTMLResponse)
async def index():
    _require_chart()
    return HTMLResponse(chart_service.page_html(interactive_url="/plotly"))


@app.get("/chart.svg")
async def chart_svg():
    _require_chart()
    return Response(chart_service.svg_markup(), media_type="image/svg+xml")


@app.get("/plotly", response_class=HTMLResponse)
async def plotly_chart():
    _require_chart()
    fig = build_gdp_figure(chart_service.dataset)
    return HTMLResponse(fig.to_html(full_html=True, include_plotlyjs="cdn"))
