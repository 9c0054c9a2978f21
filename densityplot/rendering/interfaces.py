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

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """
    Options for one chart + axis rendering.

    `max=None` means "compute from the data" (max value times the headroom
    factor). `x_label_offset` only affects the axis line; renderers never see it.
    """

    height: int = 15
    min: float = 0.0
    max: float | None = None
    x_label_offset: int = 0

    def merged(self, **overrides: Any) -> "RenderOptions":
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self

    def chart_options(self) -> dict[str, Any]:
        """The subset handed to a ChartRenderer."""
        opts: dict[str, Any] = {"height": self.height, "min": self.min}
        if self.max is not None:
            opts["max"] = self.max
        return opts


@runtime_checkable
class ChartRenderer(Protocol):
    """
    Turns a sequence of y-values into multi-line text art.

    Contract:
    - `options` carries "height", "min" and (optionally) "max".
    - returns the chart as lines joined by "\\n".
    - must not write anywhere; the caller owns output.
    """

    def render(self, values: Sequence[float], options: Mapping[str, Any]) -> str: ...


def measure_width(chart: str) -> int:
    """Width of a rendered chart: its longest line."""
    return max((len(line) for line in chart.split("\n")), default=0)
