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

from collections.abc import Sequence


def smooth(values: Sequence[float], window: int = 1) -> Sequence[float]:
    """
    Symmetric moving average.

    Position i averages values[i - window // 2 : i + window // 2 + 1],
    truncated at the edges (edge points average over fewer values, no
    zero padding). A window of 1 or less returns `values` itself.
    """
    if window <= 1:
        return values

    half = window // 2
    n = len(values)
    result: list[float] = []
    for i in range(n):
        lo = max(0, i - half)
        hi = min(n, i + half + 1)
        chunk = values[lo:hi]
        result.append(sum(chunk) / len(chunk))
    return result
