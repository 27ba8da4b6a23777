from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional


class Settings(BaseSettings):
    """
    Global chart settings loaded from environment variables.
    Automatically loads values from a .env file if present.
    Defaults reproduce the fixed layout of the GDP bar chart.
    """

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # allow extra env vars without crashing
    )

    # App
    DEBUG: bool = Field(True, description="Debug mode enabled/disabled")
    LOG_LEVEL: str = Field("INFO", description="Console log level")
    LOG_FILE: Optional[str] = Field(None, description="Rotating debug log file (optional)")

    # Data source
    DATA_URL: str = Field(
        "https://raw.githubusercontent.com/freeCodeCamp/ProjectReferenceData/master/GDP-data.json",
        description="JSON resource holding {'data': [[date, value], ...]}"
    )

    # Canvas (pixels)
    GRAPH_HEIGHT: int = Field(400, description="Canvas height")
    PADDING_X: int = Field(40, description="Left/right padding excluded from bar placement")
    PADDING_Y: int = Field(20, description="Top/bottom padding excluded from bar placement")

    # Bars
    BAR_WIDTH: float = Field(2, description="Fixed width of every bar")
    BAR_GAP: float = Field(0, description="Gap between neighbouring bars")
    BAR_COLOR: str = Field("black", description="Default bar fill")
    BAR_HIGHLIGHT_COLOR: str = Field("#DDDDFF", description="Bar fill while hovered")

    # Axes
    AXIS_TICK_COUNT: int = Field(10, description="Approximate number of ticks per axis")
    Y_AXIS_LABEL: str = Field("Gross Domestic Product", description="Rotated y-axis label")
    Y_AXIS_LABEL_X: float = Field(54, description="Label anchor x before rotation")
    Y_AXIS_LABEL_Y: float = Field(200, description="Label anchor y before rotation")

    # Tooltip
    TOOLTIP_TRANSITION_MS: int = Field(400, description="Fade in/out duration")
    TOOLTIP_OFFSET_X: float = Field(16, description="Horizontal offset from the pointer")
    TOOLTIP_OFFSET_BOTTOM: float = Field(100, description="Distance of the tooltip top from the canvas bottom")

    # Script output
    OUTPUT_PATH: str = Field("output/gdp_graph.html", description="Where render_chart.py writes the page")


# Global instance
settings = Settings()
