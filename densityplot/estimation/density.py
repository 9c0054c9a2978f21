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
import math
import numbers
from collections.abc import Iterable, Sequence

from densityplot.core.errors import EmptyInputError, InvalidArgumentError
from densityplot.estimation.smoothing import smooth
from densityplot.estimation.types import PDFEstimation

log = logging.getLogger(__name__)

DEFAULT_BINS = 20
DEFAULT_SMOOTHING_WINDOW = 3
# One bin per integer: caps memory for integer samples spanning a huge range.
MAX_DISCRETE_BINS = 1_000_000


def validate_samples(data: Iterable[float]) -> list[float]:
    """Materialize `data` as floats, rejecting empty, non-numeric and non-finite input."""
    values: list[float] = []
    for i, v in enumerate(data):
        if isinstance(v, bool) or not isinstance(v, numbers.Real):
            raise InvalidArgumentError(
                f"Sample at index {i} is not a number: {v!r}",
                details={"index": i},
            )
        f = float(v)
        if not math.isfinite(f):
            raise InvalidArgumentError(
                f"Sample at index {i} is not finite: {v!r}",
                details={"index": i},
            )
        values.append(f)

    if not values:
        raise EmptyInputError()
    return values


def is_discrete(values: Iterable[float]) -> bool:
    """True when every value has no fractional part."""
    return all(float(v).is_integer() for v in values)


def estimate_pdf(
    data: Iterable[float],
    num_bins: int | None = None,
    *,
    smoothing_window: int = DEFAULT_SMOOTHING_WINDOW,
    default_bins: int = DEFAULT_BINS,
) -> PDFEstimation:
    """
    Estimate a probability density from raw samples using a histogram.

    All-integer data is binned one bin per integer in floor(min)..ceil(max)
    with a bin width of 1, and `num_bins` is ignored. Otherwise the raw
    min..max range is split into `num_bins` (default `default_bins`) equal bins.

    Counts become densities (count / (n * bin_width)) and are then smoothed
    with a moving average of `smoothing_window`.
    """
    values = validate_samples(data)
    discrete = is_discrete(values)

    x_min = min(values)
    x_max = max(values)

    if not math.isfinite(x_max - x_min):
        raise InvalidArgumentError(
            f"Sample range [{x_min!r}, {x_max!r}] is too wide to bin.",
            code="range_overflow",
            details={"x_min": x_min, "x_max": x_max},
        )

    if discrete:
        x_min = float(math.floor(x_min))
        x_max = float(math.ceil(x_max))
        bins = int(x_max - x_min) + 1
        if bins > MAX_DISCRETE_BINS:
            raise InvalidArgumentError(
                f"Integer samples span {bins} values; at most {MAX_DISCRETE_BINS} bins are supported.",
                code="too_many_bins",
                details={"num_bins": bins, "max_bins": MAX_DISCRETE_BINS},
            )
        bin_width = 1.0
    else:
        bins = default_bins if num_bins is None else num_bins
        if isinstance(bins, bool) or not isinstance(bins, int) or bins <= 0:
            raise InvalidArgumentError(
                f"Number of bins must be a positive integer, got {bins!r}.",
                details={"num_bins": bins},
            )
        if x_max == x_min:
            # All samples share one non-integral value: give the range unit width.
            x_min -= 0.5
            x_max += 0.5
        bin_width = (x_max - x_min) / bins
        if bin_width <= 0:
            raise InvalidArgumentError(
                f"Sample range [{x_min!r}, {x_max!r}] is too narrow for {bins} bins.",
                code="range_underflow",
                details={"x_min": x_min, "x_max": x_max, "num_bins": bins},
            )

    log.debug(
        "binning %d samples: mode=%s bins=%d width=%g range=[%g, %g]",
        len(values),
        "discrete" if discrete else "continuous",
        bins,
        bin_width,
        x_min,
        x_max,
    )

    counts = [0] * bins
    for v in values:
        idx = math.floor((v - x_min) / bin_width)
        if idx < 0:
            idx = 0
        elif idx >= bins:
            idx = bins - 1
        counts[idx] += 1

    total = len(values)
    density = [c / (total * bin_width) for c in counts]
    pdf = smooth(density, smoothing_window)

    centers = tuple(x_min + (i + 0.5) * bin_width for i in range(bins))

    return PDFEstimation(
        bin_centers=centers,
        pdf=tuple(pdf),
        x_min=x_min,
        x_max=x_max,
        bin_width=bin_width,
        discrete=discrete,
        sample_count=total,
    )


class HistogramDensityEstimator:
    """
    estimate_pdf with its binning policy bound.

    Lets callers pass estimation policy around (from PlotConfig) instead of
    repeating keyword arguments.
    """

    def __init__(self, default_bins: int = DEFAULT_BINS, smoothing_window: int = DEFAULT_SMOOTHING_WINDOW):
        self.default_bins = default_bins
        self.smoothing_window = smoothing_window

    def estimate(self, data: Sequence[float], num_bins: int | None = None) -> PDFEstimation:
        return estimate_pdf(
            data,
            num_bins,
            smoothing_window=self.smoothing_window,
            default_bins=self.default_bins,
        )
