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

"""
Two interpolation routines with different contracts.

- widen_data keeps every original point and inserts evenly spaced points
  between them, so original positions stay aligned (bin centers).
- resample hits an exact output length and gives up that alignment
  (fitting a fixed display width).
"""

import math
from collections.abc import Sequence

from densityplot.core.errors import EmptyInputError, InvalidArgumentError


def widen_data(data: Sequence[float], factor: int = 1) -> Sequence[float]:
    """
    Insert factor - 1 linearly interpolated points between each adjacent pair.

    Output length is (len(data) - 1) * factor + 1 and ends on data[-1].
    factor <= 1 returns `data` itself.
    """
    if isinstance(factor, bool) or not isinstance(factor, int):
        raise InvalidArgumentError(f"Widen factor must be an integer, got {factor!r}.")
    if factor <= 1:
        return data
    if not data:
        return []

    widened: list[float] = []
    for start, end in zip(data, data[1:]):
        widened.append(start)
        for j in range(1, factor):
            widened.append(start + (end - start) * j / factor)
    widened.append(data[-1])
    return widened


def resample(data: Sequence[float], target_length: int) -> Sequence[float]:
    """
    Linearly interpolate (or decimate) `data` to exactly `target_length` points.

    The first and last points are preserved. Matching lengths return `data` itself.
    """
    if isinstance(target_length, bool) or not isinstance(target_length, int):
        raise InvalidArgumentError(f"Target length must be an integer, got {target_length!r}.")
    if len(data) == target_length:
        return data
    if not data:
        raise EmptyInputError("Cannot resample an empty sequence.")
    if target_length < 2:
        raise InvalidArgumentError(
            f"Target length must be at least 2, got {target_length}.",
            details={"target_length": target_length, "source_length": len(data)},
        )

    last = len(data) - 1
    result: list[float] = []
    for i in range(target_length):
        pos = i * last / (target_length - 1)
        lo = math.floor(pos)
        hi = math.ceil(pos)
        frac = pos - lo
        result.append(data[lo] + (data[hi] - data[lo]) * frac)
    return result
