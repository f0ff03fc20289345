"""
Tests for cell hover highlighting and tooltip content.
"""

import pytest

from heatmap.engine.chart_builder import build_heatmap
from heatmap.engine.dataset_loader import parse_dataset
from heatmap.engine.interaction import HighlightState, tooltip_html, tooltip_lines

SAMPLE = {
    "baseTemperature": 8.0,
    "monthlyVariance": [
        {"year": 1900, "month": 1, "variance": -0.5},
        {"year": 1900, "month": 2, "variance": 0.123},
        {"year": 1901, "month": 1, "variance": 1.0},
    ],
}


class TestTooltipContent:
    def setup_method(self):
        self.chart = build_heatmap(parse_dataset(SAMPLE))

    def test_lines_for_reference_record(self):
        lines = tooltip_lines(self.chart.cells[0])
        assert lines == ["1900 - January", "Temp: 7.50°C", "Variance: -0.50°C"]

    def test_rounding_only_for_display(self):
        cell = self.chart.cells[1]
        assert tooltip_lines(cell)[1] == "Temp: 8.12°C"
        assert tooltip_lines(cell)[2] == "Variance: 0.12°C"
        assert cell.data_temp == pytest.approx(8.123)

    def test_html_heading_is_strong(self):
        html = tooltip_html(["1900 - January", "Temp: 7.50°C", "Variance: -0.50°C"])
        assert html == "<strong>1900 - January</strong><br>Temp: 7.50°C<br>Variance: -0.50°C"


class TestHighlightState:
    def setup_method(self):
        self.chart = build_heatmap(parse_dataset(SAMPLE))
        self.state = HighlightState(self.chart)

    def test_initially_hidden(self):
        assert self.state.current is None
        assert self.state.tooltip.opacity == 0.0
        assert not self.state.tooltip.visible

    def test_enter_highlights_and_shows_tooltip(self):
        tooltip = self.state.pointer_enter("1900-1", page_x=250, page_y=300)
        assert self.state.current == "1900-1"
        assert self.state.cell_stroke("1900-1") == ("black", 2)
        assert tooltip.visible
        assert tooltip.opacity == pytest.approx(0.9)
        assert tooltip.left == pytest.approx(260)
        assert tooltip.top == pytest.approx(272)
        assert tooltip.data_year == 1900
        assert tooltip.text == "1900 - January\nTemp: 7.50°C\nVariance: -0.50°C"

    def test_leave_restores_stroke_and_hides_tooltip(self):
        self.state.pointer_enter("1900-1", 0, 0)
        tooltip = self.state.pointer_leave("1900-1")
        assert self.state.current is None
        assert self.state.cell_stroke("1900-1") == ("none", None)
        assert tooltip.opacity == 0.0
        assert not tooltip.visible
        # Hidden, not removed: content is still there
        assert tooltip.lines[0] == "1900 - January"

    def test_only_one_cell_highlighted(self):
        self.state.pointer_enter("1900-1", 0, 0)
        self.state.pointer_enter("1901-1", 10, 10)
        assert self.state.cell_stroke("1900-1") == ("none", None)
        assert self.state.cell_stroke("1901-1") == ("black", 2)
        assert self.state.tooltip.data_year == 1901

    def test_leave_of_other_cell_is_noop(self):
        self.state.pointer_enter("1901-1", 0, 0)
        tooltip = self.state.pointer_leave("1900-1")
        assert self.state.current == "1901-1"
        assert tooltip.visible

    def test_enter_unknown_cell_is_noop(self):
        tooltip = self.state.pointer_enter("1850-7", 0, 0)
        assert self.state.current is None
        assert not tooltip.visible

    def test_cell_lookup(self):
        assert self.state.cell("1900-2").variance == pytest.approx(0.123)
        assert self.state.cell("1999-1") is None
