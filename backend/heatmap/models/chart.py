"""
Pydantic models for the drawable heat map primitives.

Everything here is plain data: positions are in logical SVG units, colors are
CSS color strings. A front end (or the SVG renderer) binds them directly.
"""

from typing import Optional

from pydantic import BaseModel, Field

from heatmap.config import AxisOrient


class AxisTick(BaseModel):
    """Single axis tick at a position along the axis."""
    value: float
    position: float
    label: str


class Axis(BaseModel):
    id: str
    orient: AxisOrient
    transform: str
    extent: tuple[float, float]  # pixel span of the axis line
    tick_size: int
    ticks: list[AxisTick]


class Cell(BaseModel):
    """One rectangle per dataset record."""
    record_id: str
    year: int
    month: int      # 1-12
    variance: float
    data_month: int = Field(..., description="Zero-based month index (0-11)")
    data_year: int
    data_temp: float = Field(..., description="Absolute temperature, base + variance")
    x: float
    y: float
    width: float
    height: float
    fill: str
    stroke: str = "none"


class LegendSwatch(BaseModel):
    """Color swatch covering one legend bucket [start, end)."""
    start: float
    end: float
    x: float
    width: float
    height: float
    fill: str


class Legend(BaseModel):
    id: str = "legend"
    transform: str
    width: float
    height: float
    thresholds: list[float]
    swatches: list[LegendSwatch]
    axis: Axis


class HeatMapOutput(BaseModel):
    """Full heat map ready for rendering."""
    width: int
    height: int
    padding: int
    base_temperature: float
    variance_min: Optional[float]
    variance_max: Optional[float]
    record_count: int
    x_axis: Axis
    y_axis: Axis
    cells: list[Cell]
    legend: Legend


class TooltipOutput(BaseModel):
    """Tooltip surface state after a hover event."""
    visible: bool
    opacity: float
    left: Optional[float] = None   # page px
    top: Optional[float] = None    # page px
    data_year: Optional[int] = None
    lines: list[str] = []
    text: str = ""
    html: str = ""
