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

import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from densityplot.core.config import PlotConfig
from densityplot.core.errors import EmptyInputError, InvalidArgumentError
from densityplot.estimation.density import HistogramDensityEstimator
from densityplot.estimation.resample import resample, widen_data
from densityplot.rendering.asciichart import AsciiChartRenderer
from densityplot.rendering.axis import label_axis
from densityplot.rendering.interfaces import ChartRenderer, RenderOptions, measure_width

log = logging.getLogger(__name__)


class DistributionPlotter:
    """
    Estimate -> widen -> (resample) -> render -> label, written to `out`.

    X-axis bounds are the first and last *widened bin centers*, not the
    estimation's x_min/x_max, so the labels describe the plotted points.
    """

    def __init__(
        self,
        config: PlotConfig | None = None,
        renderer: ChartRenderer | None = None,
        out: TextIO | None = None,
    ):
        self.config = config or PlotConfig()
        self.renderer = renderer or AsciiChartRenderer()
        self._out = out
        self.estimator = HistogramDensityEstimator(
            default_bins=self.config.default_bins,
            smoothing_window=self.config.smoothing_window,
        )

    @property
    def out(self) -> TextIO:
        # Resolved per call: sys.stdout may be swapped after construction.
        return self._out if self._out is not None else sys.stdout

    def plot_with_x_axis(
        self,
        values: Sequence[float],
        x_min: float,
        x_max: float,
        options: RenderOptions | None = None,
    ) -> None:
        """
        Render `values`, then an axis line labeled x_min .. x_max under it.

        The y-axis floor defaults to 0 and an unset ceiling becomes
        max(values) * y_headroom. If the ceiling ends up below the floor
        (e.g. every value is negative and no `min` is given), this raises
        InvalidArgumentError instead of rendering; pass RenderOptions(min=...)
        to plot such values.
        """
        if not values:
            raise EmptyInputError("Nothing to plot: value sequence is empty.")

        opts = options or RenderOptions(height=self.config.height)
        if opts.max is None:
            opts = opts.merged(max=max(values) * self.config.y_headroom)
        if opts.max < opts.min:
            raise InvalidArgumentError(
                f"Chart max ({opts.max}) is below chart min ({opts.min}).",
                details={"min": opts.min, "max": opts.max},
            )

        chart = self.renderer.render(values, opts.chart_options())
        width = measure_width(chart)
        log.debug("rendered %d points into a %d-column chart", len(values), width)

        print(chart, file=self.out)
        print(
            label_axis(width, x_min, x_max, opts.x_label_offset, precision=self.config.label_precision),
            file=self.out,
        )

    def log_distribution_plot(
        self,
        raw_data: Sequence[float],
        title: str | None = None,
        widen_factor: int | None = None,
        num_bins: int | None = None,
    ) -> None:
        """Write a titled density chart of `raw_data`."""
        cfg = self.config
        heading = cfg.title if title is None else title
        factor = cfg.widen_factor if widen_factor is None else widen_factor

        estimation = self.estimator.estimate(raw_data, num_bins)

        pdf = widen_data(estimation.pdf, factor)
        centers = widen_data(estimation.bin_centers, factor)
        log.debug("widened %d bins to %d points (factor %d)", estimation.num_bins, len(pdf), factor)

        if cfg.width is not None:
            pdf = resample(pdf, cfg.width)
            log.debug("resampled to display width %d", cfg.width)

        print("\n" + heading + "\n", file=self.out)

        self.plot_with_x_axis(
            pdf,
            centers[0],
            centers[-1],
            RenderOptions(height=cfg.height, x_label_offset=cfg.x_label_offset),
        )


def plot_with_x_axis(
    values: Sequence[float],
    x_min: float,
    x_max: float,
    options: RenderOptions | None = None,
    *,
    renderer: ChartRenderer | None = None,
    out: TextIO | None = None,
) -> None:
    """Render `values` with an x-axis label line (chart first, then labels)."""
    DistributionPlotter(renderer=renderer, out=out).plot_with_x_axis(values, x_min, x_max, options)


def log_distribution_plot(
    raw_data: Sequence[float],
    title: str | None = None,
    widen_factor: int | None = None,
    *,
    config: PlotConfig | None = None,
    renderer: ChartRenderer | None = None,
    out: TextIO | None = None,
) -> None:
    """
    Estimate the density of `raw_data` and write a titled chart.

    `title` and `widen_factor` default to the config's values
    ("Estimated PDF from the data" and 4).
    """
    DistributionPlotter(config=config, renderer=renderer, out=out).log_distribution_plot(
        raw_data, title=title, widen_factor=widen_factor
    )
