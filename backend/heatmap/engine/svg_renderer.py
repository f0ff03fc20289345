"""
SVG rendition of a built heat map.

Produces a standalone SVG document: the x/y axis groups, one `rect.cell` per
record carrying `data-month` / `data-year` / `data-temp`, and the legend
group with its swatches and bottom axis. Axis markup follows the d3 axis
layout: a `path.domain` plus one `g.tick` per tick.
"""

from html import escape
from typing import Optional

from heatmap.config import AXIS_TICK_PADDING, AxisOrient
from heatmap.engine.interaction import HighlightState
from heatmap.models.chart import Axis, Cell, HeatMapOutput, Legend

SVG_NS = "http://www.w3.org/2000/svg"


def _num(value: float) -> str:
    """Render a number the way a browser serializes it (no trailing .0)."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _attrs(**attrs) -> str:
    parts = []
    for name, value in attrs.items():
        if value is None:
            continue
        if isinstance(value, float):
            value = _num(value)
        parts.append(f'{name.rstrip("_").replace("_", "-")}="{escape(str(value))}"')
    return " ".join(parts)


def render_axis(axis: Axis, group_id: Optional[str] = None) -> str:
    """Render an axis group with its domain path and ticks."""
    r0, r1 = (_num(v) for v in axis.extent)
    size = axis.tick_size
    offset = size + AXIS_TICK_PADDING
    lines = []

    if axis.orient == AxisOrient.BOTTOM:
        lines.append(
            f'<g {_attrs(id=group_id, transform=axis.transform)} fill="none" '
            f'font-size="10" font-family="sans-serif" text-anchor="middle">'
        )
        lines.append(f'<path class="domain" stroke="currentColor" d="M{r0},{size}V0H{r1}V{size}"></path>')
        for tick in axis.ticks:
            lines.append(
                f'<g class="tick" opacity="1" transform="translate({_num(tick.position)},0)">'
                f'<line stroke="currentColor" y2="{size}"></line>'
                f'<text fill="currentColor" y="{offset}" dy="0.71em">{escape(tick.label)}</text></g>'
            )
    else:
        lines.append(
            f'<g {_attrs(id=group_id, transform=axis.transform)} fill="none" '
            f'font-size="10" font-family="sans-serif" text-anchor="end">'
        )
        lines.append(f'<path class="domain" stroke="currentColor" d="M-{size},{r0}H0V{r1}H-{size}"></path>')
        for tick in axis.ticks:
            lines.append(
                f'<g class="tick" opacity="1" transform="translate(0,{_num(tick.position)})">'
                f'<line stroke="currentColor" x2="-{size}"></line>'
                f'<text fill="currentColor" x="-{offset}" dy="0.32em">{escape(tick.label)}</text></g>'
            )

    lines.append("</g>")
    return "\n".join(lines)


def render_cell(cell: Cell, highlight: Optional[HighlightState] = None) -> str:
    stroke, stroke_width = cell.stroke, None
    if highlight is not None:
        stroke, stroke_width = highlight.cell_stroke(cell.record_id)

    return "<rect {} />".format(_attrs(
        class_="cell",
        data_month=cell.data_month,
        data_year=cell.data_year,
        data_temp=cell.data_temp,
        x=cell.x,
        y=cell.y,
        width=cell.width,
        height=cell.height,
        fill=cell.fill,
        stroke=stroke,
        stroke_width=stroke_width,
    ))


def render_legend(legend: Legend) -> str:
    lines = [f'<g {_attrs(id=legend.id, transform=legend.transform)}>']
    for swatch in legend.swatches:
        lines.append("<rect {} />".format(_attrs(
            x=swatch.x,
            y=0,
            width=swatch.width,
            height=swatch.height,
            style=f"fill: {swatch.fill};",
        )))
    lines.append(render_axis(legend.axis))
    lines.append("</g>")
    return "\n".join(lines)


def render_svg(chart: HeatMapOutput, highlight: Optional[HighlightState] = None) -> str:
    """
    Render the chart as an SVG document.

    Args:
        chart: Output of build_heatmap()
        highlight: Optional hover state; its current cell gets the highlight stroke
    """
    width, height = chart.width, chart.height
    parts = [
        f'<svg xmlns="{SVG_NS}" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">',
        render_axis(chart.x_axis, group_id=chart.x_axis.id),
        render_axis(chart.y_axis, group_id=chart.y_axis.id),
    ]
    parts.extend(render_cell(cell, highlight) for cell in chart.cells)
    parts.append(render_legend(chart.legend))
    parts.append("</svg>")
    return "\n".join(parts) + "\n"
