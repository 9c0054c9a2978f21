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

from densityplot._version import _detect_version
from densityplot.core.config import PlotConfig, load_config
from densityplot.core.errors import (
    ConfigError,
    DensityPlotError,
    EmptyInputError,
    InvalidArgumentError,
    SampleLoadError,
)
from densityplot.estimation import PDFEstimation, estimate_pdf, resample, smooth, widen_data
from densityplot.rendering import AsciiChartRenderer, ChartRenderer, RenderOptions, label_axis
from densityplot.report import DistributionPlotter, log_distribution_plot, plot_with_x_axis

DENSITYPLOT_VERSION = _detect_version()

__all__ = [
    "DENSITYPLOT_VERSION",
    "AsciiChartRenderer",
    "ChartRenderer",
    "ConfigError",
    "DensityPlotError",
    "DistributionPlotter",
    "EmptyInputError",
    "InvalidArgumentError",
    "PDFEstimation",
    "PlotConfig",
    "RenderOptions",
    "SampleLoadError",
    "estimate_pdf",
    "label_axis",
    "load_config",
    "log_distribution_plot",
    "plot_with_x_axis",
    "resample",
    "smooth",
    "widen_data",
]
