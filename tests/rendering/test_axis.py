import pytest
from densityplot.core.errors import InvalidArgumentError
from densityplot.rendering.axis import format_tick, label_axis
from densityplot.rendering.interfaces import measure_width


class TestLabelAxis:
    def test_labels_placed_at_offset_and_right_edge(self):
        line = label_axis(20, 0, 10, 5)

        assert len(line) == 20
        assert line[5:8] == "0.0"
        assert line[16:20] == "10.0"
        assert line == "     0.0        10.0"

    def test_default_offset_is_zero(self):
        line = label_axis(12, -1.25, 3)

        assert line.startswith("-1.2")
        assert line.endswith("3.0")

    @pytest.mark.parametrize("width", [8, 15, 40])
    def test_length_is_always_chart_width(self, width):
        assert len(label_axis(width, 1.5, 5.5, 2)) == width

    @pytest.mark.parametrize("offset", [0, 3, 9])
    def test_right_label_position_ignores_offset(self, offset):
        line = label_axis(30, 1.0, 42.0, offset)

        assert line[-4:] == "42.0"

    def test_right_label_overwrites_left_on_overlap(self):
        # left "1.5" at columns 3..5, right "22.0" at columns 4..7
        assert label_axis(8, 1.5, 22.0, 3) == "   122.0"

    def test_left_label_past_the_edge_is_dropped(self):
        assert label_axis(6, 0, 1, 10) == "   1.0"

    def test_right_label_wider_than_line_keeps_its_tail(self):
        assert label_axis(3, 0, 1000, 0) == "0.0"

    def test_zero_width(self):
        assert label_axis(0, 0, 1) == ""

    def test_precision(self):
        line = label_axis(16, 0.125, 2.5, precision=2)

        assert line.startswith("0.12")
        assert line.endswith("2.50")

    def test_negative_offset_rejected(self):
        with pytest.raises(InvalidArgumentError):
            label_axis(10, 0, 1, -1)

    def test_negative_width_rejected(self):
        with pytest.raises(InvalidArgumentError):
            label_axis(-5, 0, 1)


class TestFormatTick:
    def test_one_decimal_by_default(self):
        assert format_tick(3) == "3.0"

    def test_rounding(self):
        assert format_tick(2.96) == "3.0"


class TestMeasureWidth:
    def test_longest_line_wins(self):
        assert measure_width("ab\nabcdef\nabc") == 6

    def test_single_line(self):
        assert measure_width("hello") == 5

    def test_empty(self):
        assert measure_width("") == 0
