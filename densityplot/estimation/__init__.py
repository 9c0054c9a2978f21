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

from densityplot.estimation.density import HistogramDensityEstimator, estimate_pdf, is_discrete
from densityplot.estimation.resample import resample, widen_data
from densityplot.estimation.smoothing import smooth
from densityplot.estimation.types import PDFEstimation

__all__ = [
    "HistogramDensityEstimator",
    "PDFEstimation",
    "estimate_pdf",
    "is_discrete",
    "resample",
    "smooth",
    "widen_data",
]
