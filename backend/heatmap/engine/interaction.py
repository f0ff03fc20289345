"""
Hover interaction for heat map cells.

At most one cell is highlighted at a time. The highlighted cell is held as a
single optional record id that only pointer_enter / pointer_leave mutate, so
a missed leave event cannot leave two cells outlined.
"""

import html
from typing import Optional

from heatmap.config import (
    HIGHLIGHT_STROKE,
    HIGHLIGHT_STROKE_WIDTH,
    TEMPERATURE_UNIT,
    TOOLTIP_OFFSET_X,
    TOOLTIP_OFFSET_Y,
    TOOLTIP_OPACITY,
)
from heatmap.engine.scales import month_name
from heatmap.models.chart import Cell, HeatMapOutput, TooltipOutput


def tooltip_lines(cell: Cell) -> list[str]:
    """Heading, absolute temperature and variance lines for a cell."""
    return [
        f"{cell.year} - {month_name(cell.month)}",
        f"Temp: {cell.data_temp:.2f}{TEMPERATURE_UNIT}",
        f"Variance: {cell.variance:.2f}{TEMPERATURE_UNIT}",
    ]


def tooltip_html(lines: list[str]) -> str:
    heading, *rest = [html.escape(line) for line in lines]
    return "<br>".join([f"<strong>{heading}</strong>", *rest])


class HighlightState:
    """Tracks the hovered cell and the tooltip it drives."""

    def __init__(self, chart: HeatMapOutput):
        self._cells = {cell.record_id: cell for cell in chart.cells}
        self.current: Optional[str] = None
        self.tooltip = TooltipOutput(visible=False, opacity=0.0)

    def cell(self, record_id: str) -> Optional[Cell]:
        return self._cells.get(record_id)

    def pointer_enter(self, record_id: str, page_x: float, page_y: float) -> TooltipOutput:
        """Highlight the cell under the pointer and show its tooltip."""
        cell = self._cells.get(record_id)
        if cell is None:
            # Stale element, nothing to show
            return self.tooltip

        self.current = record_id
        lines = tooltip_lines(cell)
        self.tooltip = TooltipOutput(
            visible=True,
            opacity=TOOLTIP_OPACITY,
            left=page_x + TOOLTIP_OFFSET_X,
            top=page_y + TOOLTIP_OFFSET_Y,
            data_year=cell.year,
            lines=lines,
            text="\n".join(lines),
            html=tooltip_html(lines),
        )
        return self.tooltip

    def pointer_leave(self, record_id: str) -> TooltipOutput:
        """Clear the highlight and hide (not remove) the tooltip."""
        if record_id != self.current:
            return self.tooltip

        self.current = None
        self.tooltip = self.tooltip.model_copy(update={"visible": False, "opacity": 0.0})
        return self.tooltip

    def cell_stroke(self, record_id: str) -> tuple[str, Optional[int]]:
        """(stroke, stroke-width) for a cell given the current highlight."""
        if record_id == self.current:
            return HIGHLIGHT_STROKE, HIGHLIGHT_STROKE_WIDTH
        return "none", None
