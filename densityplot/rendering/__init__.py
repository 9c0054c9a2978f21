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

from densityplot.rendering.asciichart import AsciiChartRenderer
from densityplot.rendering.axis import format_tick, label_axis
from densityplot.rendering.interfaces import ChartRenderer, RenderOptions, measure_width

__all__ = [
    "AsciiChartRenderer",
    "ChartRenderer",
    "RenderOptions",
    "format_tick",
    "label_axis",
    "measure_width",
]
