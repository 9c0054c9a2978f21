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
from typing import Any

import asciichartpy


class AsciiChartRenderer:
    """
    ChartRenderer backed by asciichartpy.

    Only "height", "min" and "max" are forwarded from the per-call options;
    `label_format` (the y-axis tick format) is fixed per renderer.
    """

    def __init__(self, label_format: str | None = None):
        self.label_format = label_format

    def render(self, values: Sequence[float], options: Mapping[str, Any]) -> str:
        cfg: dict[str, Any] = {k: options[k] for k in ("height", "min", "max") if options.get(k) is not None}
        if self.label_format is not None:
            cfg["format"] = self.label_format
        return asciichartpy.plot(list(values), cfg)
