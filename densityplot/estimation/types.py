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

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class PDFEstimation:
    """
    Histogram-derived, smoothed density estimate.

    `pdf` is smoothed for display and does not integrate exactly to 1;
    do not feed it into further statistical computation.

    `x_min`/`x_max` bound the binned domain, which for discrete data is
    floor(min)..ceil(max) rather than the raw sample extremes.
    """

    bin_centers: tuple[float, ...]
    pdf: tuple[float, ...]
    x_min: float
    x_max: float
    bin_width: float
    discrete: bool
    sample_count: int

    @property
    def num_bins(self) -> int:
        return len(self.bin_centers)

    def to_dict(self) -> dict[str, Any]:
        return {
            "bin_centers": list(self.bin_centers),
            "pdf": list(self.pdf),
            "x_min": self.x_min,
            "x_max": self.x_max,
            "bin_width": self.bin_width,
            "num_bins": self.num_bins,
            "discrete": self.discrete,
            "sample_count": self.sample_count,
        }
