# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Densityplot Contributors
#
# This file is part of Densityplot.
#
# Densityplot is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Densityplot is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

from densityplot.core.errors import InvalidArgumentError


def format_tick(value: float, precision: int = 1) -> str:
    return f"{value:.{precision}f}"


def label_axis(
    chart_width: int,
    x_min: float,
    x_max: float,
    x_label_offset: int = 0,
    *,
    precision: int = 1,
) -> str:
    """
    Build the x-axis label line under a chart.

    The line is exactly `chart_width` characters. The x_min label starts at
    column `x_label_offset`; the x_max label ends on the last column. The
    right label is written second, so it wins where the two overlap.
    Labels that do not fit are clipped at the line edges.
    """
    if chart_width < 0:
        raise InvalidArgumentError(f"Chart width must be non-negative, got {chart_width}.")
    if x_label_offset < 0:
        raise InvalidArgumentError(f"x-label offset must be non-negative, got {x_label_offset}.")

    cells = [" "] * chart_width

    left = format_tick(x_min, precision)
    for i, ch in enumerate(left, start=x_label_offset):
        if i >= chart_width:
            break
        cells[i] = ch

    right = format_tick(x_max, precision)
    start = chart_width - len(right)
    for i, ch in enumerate(right, start=start):
        if i >= 0:
            cells[i] = ch

    return "".join(cells)
