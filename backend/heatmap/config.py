"""
Heat map configuration and constants.
"""

import os
from enum import Enum


class AxisOrient(str, Enum):
    BOTTOM = "bottom"
    LEFT = "left"


# Source dataset (monthly variance from a fixed base temperature)
DATASET_URL = os.getenv(
    "HEATMAP_DATASET_URL",
    "https://raw.githubusercontent.com/freeCodeCamp/ProjectReferenceData/master/global-temperature.json",
)
FETCH_TIMEOUT = float(os.getenv("HEATMAP_FETCH_TIMEOUT", "30"))  # seconds

LOG_LEVEL = os.getenv("HEATMAP_LOG_LEVEL", "INFO")

# Local frontend dev servers
CORS_ORIGINS = [
    "http://localhost:5173",  # Vite default
    "http://localhost:8080",  # Vue CLI default
    "http://127.0.0.1:5173",
    "http://127.0.0.1:8080",
]

# Chart surface (logical SVG units)
CHART_WIDTH = 1200
CHART_HEIGHT = 500
CHART_PADDING = 100

MONTHS = list(range(1, 13))

# Only decade years get an x-axis tick
YEAR_TICK_INTERVAL = 10

# Axis tick geometry, same as a d3 axis
AXIS_TICK_SIZE = 6
AXIS_TICK_PADDING = 3

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# Continuous cell color scale anchors
COLD_COLOR = "blue"
HOT_COLOR = "red"

# Cell highlight while hovered
HIGHLIGHT_STROKE = "black"
HIGHLIGHT_STROKE_WIDTH = 2

# Legend
LEGEND_WIDTH = 400
LEGEND_HEIGHT = 30
LEGEND_OFFSET = 40     # below the x-axis baseline
LEGEND_TICK_SIZE = 10
LEGEND_BUCKETS = 8

# ColorBrewer RdYlBu, 9 classes (hot first)
RDYLBU_9 = [
    "#d73027",
    "#f46d43",
    "#fdae61",
    "#fee090",
    "#ffffbf",
    "#e0f3f8",
    "#abd9e9",
    "#74add1",
    "#4575b4",
]

# Legend palette runs cold -> hot
LEGEND_PALETTE = list(reversed(RDYLBU_9))

# Tooltip placement relative to the pointer (page pixels)
TOOLTIP_OFFSET_X = 10
TOOLTIP_OFFSET_Y = -28
TOOLTIP_OPACITY = 0.9

TEMPERATURE_UNIT = "°C"
