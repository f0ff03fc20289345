"""
API routes for the temperature-variance heat map.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from heatmap.engine.chart_builder import build_heatmap
from heatmap.engine.dataset_loader import (
    DatasetFetchError,
    DatasetFormatError,
    fetch_dataset,
)
from heatmap.engine.interaction import HighlightState
from heatmap.engine.svg_renderer import render_svg
from heatmap.models.chart import HeatMapOutput, TooltipOutput
from heatmap.models.dataset import Dataset

router = APIRouter(prefix="/api/v1", tags=["heatmap"])


async def get_dataset() -> Dataset:
    """Fetch the configured dataset for this request (no caching)."""
    try:
        return await fetch_dataset()
    except DatasetFetchError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except DatasetFormatError as e:
        raise HTTPException(status_code=422, detail=str(e))


def _build(dataset: Dataset) -> HeatMapOutput:
    try:
        return build_heatmap(dataset)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Chart generation error: {str(e)}")


@router.get("/heatmap", response_model=HeatMapOutput)
async def get_heatmap(dataset: Dataset = Depends(get_dataset)) -> HeatMapOutput:
    """
    Build the heat map for the configured dataset.

    Returns axes, one cell per monthly record, and the legend.
    """
    return _build(dataset)


@router.post("/heatmap", response_model=HeatMapOutput)
async def post_heatmap(dataset: Dataset) -> HeatMapOutput:
    """Build the heat map for a dataset supplied in the request body."""
    return _build(dataset)


@router.get("/heatmap.svg")
async def get_heatmap_svg(
    highlight_year: Optional[int] = Query(None),
    highlight_month: Optional[int] = Query(None, ge=1, le=12),
    dataset: Dataset = Depends(get_dataset),
) -> Response:
    """
    Render the heat map as an SVG document.

    When highlight_year and highlight_month are both given, that cell is
    drawn as hovered.
    """
    chart = _build(dataset)
    highlight = HighlightState(chart)
    if highlight_year is not None and highlight_month is not None:
        highlight.pointer_enter(f"{highlight_year}-{highlight_month}", 0, 0)

    try:
        svg = render_svg(chart, highlight)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"SVG rendering error: {str(e)}")
    return Response(content=svg, media_type="image/svg+xml")


@router.get("/heatmap/tooltip", response_model=TooltipOutput)
async def get_tooltip(
    year: int,
    month: int = Query(..., ge=1, le=12),
    page_x: float = 0.0,
    page_y: float = 0.0,
    dataset: Dataset = Depends(get_dataset),
) -> TooltipOutput:
    """Tooltip shown when the pointer enters the cell for (year, month)."""
    chart = _build(dataset)
    highlight = HighlightState(chart)
    record_id = f"{year}-{month}"
    if highlight.cell(record_id) is None:
        raise HTTPException(status_code=404, detail=f"No record for {year}-{month:02d}")
    return highlight.pointer_enter(record_id, page_x, page_y)
