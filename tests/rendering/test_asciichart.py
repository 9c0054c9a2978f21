"""
Tests for the asciichartpy-backed renderer and RenderOptions.
"""

from densityplot.rendering.asciichart import AsciiChartRenderer
from densityplot.rendering.interfaces import ChartRenderer, RenderOptions


class TestAsciiChartRenderer:
    def test_satisfies_protocol(self):
        assert isinstance(AsciiChartRenderer(), ChartRenderer)

    def test_height_controls_row_count(self):
        chart = AsciiChartRenderer().render([1.0, 2.0, 3.0], {"height": 4, "min": 0, "max": 4})

        assert len(chart.split("\n")) == 5

    def test_returns_text_without_trailing_newline(self):
        chart = AsciiChartRenderer().render([0.1, 0.4, 0.2], {"height": 6, "min": 0, "max": 0.5})

        assert isinstance(chart, str)
        assert not chart.endswith("\n")

    def test_unknown_options_are_not_forwarded(self):
        chart = AsciiChartRenderer().render([1.0, 2.0], {"height": 3, "min": 0, "max": 3, "x_label_offset": 7})

        assert len(chart.split("\n")) == 4

    def test_label_format(self):
        chart = AsciiChartRenderer(label_format="{:6.3f} ").render([0.0, 1.0], {"height": 2, "min": 0, "max": 1})

        assert "1.000" in chart


class TestRenderOptions:
    def test_defaults(self):
        opts = RenderOptions()

        assert opts.height == 15
        assert opts.min == 0.0
        assert opts.max is None
        assert opts.x_label_offset == 0

    def test_chart_options_skip_unset_max(self):
        assert RenderOptions(height=5).chart_options() == {"height": 5, "min": 0.0}

    def test_chart_options_exclude_label_offset(self):
        opts = RenderOptions(max=2.0, x_label_offset=4).chart_options()

        assert "x_label_offset" not in opts
        assert opts["max"] == 2.0

    def test_merged_ignores_none(self):
        opts = RenderOptions(height=8)

        assert opts.merged(max=None) is opts
        assert opts.merged(max=1.5).max == 1.5
        assert opts.merged(max=1.5).height == 8
