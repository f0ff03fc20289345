"""
Heat map chart builder.

Derives every visual encoding from the loaded dataset and materializes the
drawable primitives:
- x-axis: band scale over the distinct years, ticks on decade years only
- y-axis: band scale over months 1-12, ticks labelled with month names
- cells: one rectangle per record, filled from a blue -> red linear scale
- legend: the variance extent split into 8 equal buckets, colored from the
  reversed RdYlBu palette through a threshold scale

Scales are rebuilt on every call; nothing is cached across datasets.
"""

import logging

import numpy as np

from heatmap.config import (
    AxisOrient,
    AXIS_TICK_SIZE,
    CHART_HEIGHT,
    CHART_PADDING,
    CHART_WIDTH,
    COLD_COLOR,
    HOT_COLOR,
    LEGEND_BUCKETS,
    LEGEND_HEIGHT,
    LEGEND_OFFSET,
    LEGEND_PALETTE,
    LEGEND_TICK_SIZE,
    LEGEND_WIDTH,
    MONTHS,
    YEAR_TICK_INTERVAL,
)
from heatmap.engine.scales import (
    BandScale,
    ColorScale,
    LinearScale,
    ThresholdScale,
    month_name,
)
from heatmap.models.chart import (
    Axis,
    AxisTick,
    Cell,
    HeatMapOutput,
    Legend,
    LegendSwatch,
)
from heatmap.models.dataset import Dataset

logger = logging.getLogger(__name__)


class HeatMapScales:
    """The four scales computed once per render."""

    def __init__(self, dataset: Dataset):
        extent = dataset.variance_extent() or (0.0, 0.0)
        self.variance_min, self.variance_max = extent

        self.x = BandScale(
            dataset.distinct_years(), (CHART_PADDING, CHART_WIDTH - CHART_PADDING)
        )
        self.y = BandScale(MONTHS, (CHART_PADDING, CHART_HEIGHT - CHART_PADDING))
        self.color = ColorScale(extent, (COLD_COLOR, HOT_COLOR))
        self.legend_x = LinearScale(extent, (0, LEGEND_WIDTH))

        self.thresholds = legend_thresholds(self.variance_min, self.variance_max)
        if len(self.thresholds) == LEGEND_BUCKETS:
            self.legend_color = ThresholdScale(self.thresholds, LEGEND_PALETTE)
        else:
            self.legend_color = None

    @property
    def degenerate(self) -> bool:
        return self.legend_color is None


def legend_thresholds(v_min: float, v_max: float) -> list[float]:
    """
    Lower edges of the legend buckets.

    A non-empty extent yields LEGEND_BUCKETS equally spaced edges starting at
    v_min. A zero-width extent yields the single edge [v_min].
    """
    if v_max <= v_min:
        return [float(v_min)]
    step = (v_max - v_min) / LEGEND_BUCKETS
    return [float(t) for t in v_min + step * np.arange(LEGEND_BUCKETS)]


def build_x_axis(scales: HeatMapScales) -> Axis:
    ticks = [
        AxisTick(value=year, position=scales.x.center(year), label=str(year))
        for year in scales.x.domain
        if year % YEAR_TICK_INTERVAL == 0
    ]
    return Axis(
        id="x-axis",
        orient=AxisOrient.BOTTOM,
        transform=f"translate(0, {CHART_HEIGHT - CHART_PADDING})",
        extent=scales.x.range,
        tick_size=AXIS_TICK_SIZE,
        ticks=ticks,
    )


def build_y_axis(scales: HeatMapScales) -> Axis:
    ticks = [
        AxisTick(value=month, position=scales.y.center(month), label=month_name(month))
        for month in scales.y.domain
    ]
    return Axis(
        id="y-axis",
        orient=AxisOrient.LEFT,
        transform=f"translate({CHART_PADDING}, 0)",
        extent=scales.y.range,
        tick_size=AXIS_TICK_SIZE,
        ticks=ticks,
    )


def build_cells(dataset: Dataset, scales: HeatMapScales) -> list[Cell]:
    cells = []
    for record in dataset.monthly_variance:
        cells.append(Cell(
            record_id=record.record_id,
            year=record.year,
            month=record.month,
            variance=record.variance,
            data_month=record.month - 1,
            data_year=record.year,
            data_temp=dataset.absolute_temperature(record),
            x=scales.x(record.year),
            y=scales.y(record.month),
            width=scales.x.bandwidth,
            height=scales.y.bandwidth,
            fill=scales.color(record.variance),
        ))
    return cells


def build_legend(scales: HeatMapScales) -> Legend:
    """
    Build the legend swatches and their bottom axis.

    Each palette color is drawn over the extent the threshold scale inverts it
    to; the last bucket closes at the variance maximum. The first palette color
    only covers values below the minimum, so it gets no swatch.
    """
    v_min, v_max = scales.variance_min, scales.variance_max
    thresholds = scales.thresholds

    if scales.degenerate:
        # Zero-width extent: one bucket drawn across the whole legend
        logger.info("Variance extent is degenerate (%s); using a single legend bucket", v_min)
        swatches = [LegendSwatch(
            start=v_min,
            end=v_max,
            x=0.0,
            width=float(LEGEND_WIDTH),
            height=LEGEND_HEIGHT,
            fill=LEGEND_PALETTE[len(LEGEND_PALETTE) // 2],
        )]
    else:
        swatches = []
        for color in scales.legend_color.colors:
            start, end = scales.legend_color.invert_extent(color)
            if start is None:
                # Open-ended "below min" slot, nothing to draw
                continue
            if end is None:
                end = v_max
            x0 = scales.legend_x(start)
            swatches.append(LegendSwatch(
                start=start,
                end=end,
                x=x0,
                width=scales.legend_x(end) - x0,
                height=LEGEND_HEIGHT,
                fill=color,
            ))

    axis = Axis(
        id="legend-axis",
        orient=AxisOrient.BOTTOM,
        transform=f"translate(0, {LEGEND_HEIGHT})",
        extent=(0, LEGEND_WIDTH),
        tick_size=LEGEND_TICK_SIZE,
        ticks=[
            AxisTick(value=t, position=scales.legend_x(t), label=f"{t:.2f}")
            for t in thresholds
        ],
    )
    return Legend(
        transform=(
            f"translate({(CHART_WIDTH - LEGEND_WIDTH) / 2:g}, "
            f"{CHART_HEIGHT - CHART_PADDING + LEGEND_OFFSET})"
        ),
        width=LEGEND_WIDTH,
        height=LEGEND_HEIGHT,
        thresholds=thresholds,
        swatches=swatches,
        axis=axis,
    )


def build_heatmap(dataset: Dataset) -> HeatMapOutput:
    """
    Build the complete heat map for a dataset.

    Empty and single-valued datasets are valid: they yield no cells (or one),
    no x ticks, and a single legend bucket.
    """
    scales = HeatMapScales(dataset)
    extent = dataset.variance_extent()

    return HeatMapOutput(
        width=CHART_WIDTH,
        height=CHART_HEIGHT,
        padding=CHART_PADDING,
        base_temperature=dataset.base_temperature,
        variance_min=extent[0] if extent else None,
        variance_max=extent[1] if extent else None,
        record_count=len(dataset.monthly_variance),
        x_axis=build_x_axis(scales),
        y_axis=build_y_axis(scales),
        cells=build_cells(dataset, scales),
        legend=build_legend(scales),
    )
