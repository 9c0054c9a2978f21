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

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from densityplot.core.errors import ConfigError

DEFAULT_TITLE = "Estimated PDF from the data"


@dataclass(frozen=True, slots=True)
class PlotConfig:
    """
    Every tunable of the estimate -> widen -> render -> label pipeline.

    - default_bins: bin count for continuous data when none is requested
    - smoothing_window: moving-average window applied to the density
    - height: chart rows
    - y_headroom: multiplier applied to max(pdf) for the y-axis ceiling
    - widen_factor: horizontal widening applied to pdf and bin centers
    - x_label_offset: columns the left x-label is shifted right
    - width: if set, the widened pdf is resampled to exactly this many points
    - title: heading written above the chart
    - label_precision: decimals of the x-axis labels
    """

    default_bins: int = 20
    smoothing_window: int = 3
    height: int = 15
    y_headroom: float = 1.05
    widen_factor: int = 4
    x_label_offset: int = 10
    width: int | None = None
    title: str = DEFAULT_TITLE
    label_precision: int = 1

    def __post_init__(self) -> None:
        for name in ("default_bins", "height"):
            value = getattr(self, name)
            if not _is_int(value) or value <= 0:
                raise ConfigError(f"'{name}' must be a positive integer, got {value!r}.", code="invalid_config")

        for name in ("smoothing_window", "widen_factor", "x_label_offset", "label_precision"):
            value = getattr(self, name)
            if not _is_int(value) or value < 0:
                raise ConfigError(f"'{name}' must be a non-negative integer, got {value!r}.", code="invalid_config")

        if self.width is not None and (not _is_int(self.width) or self.width < 2):
            raise ConfigError(f"'width' must be an integer >= 2, got {self.width!r}.", code="invalid_config")

        if isinstance(self.y_headroom, bool) or not isinstance(self.y_headroom, (int, float)) or self.y_headroom <= 0:
            raise ConfigError(f"'y_headroom' must be a positive number, got {self.y_headroom!r}.", code="invalid_config")

        if not isinstance(self.title, str):
            raise ConfigError("'title' must be a string.", code="invalid_config")

    def with_overrides(self, **overrides: Any) -> "PlotConfig":
        """Return a copy with the given fields replaced; None values are skipped."""
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}", code="unknown_keys")
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def load_config(path: str | Path) -> PlotConfig:
    """
    Load a PlotConfig from a YAML (.yaml/.yml) or JSON file.

    The file must hold a mapping whose keys are PlotConfig field names.
    An optional top-level "plot" key may wrap that mapping.
    """
    if not isinstance(path, Path):
        path = Path(path)

    if not path.exists():
        raise ConfigError(f"Config file does not exist: {path}", code="config_not_found")

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}", code="config_unreadable") from e

    suffix = path.suffix.lower()
    try:
        if suffix == ".json":
            data = json.loads(raw)
        else:
            data = yaml.safe_load(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(
            f"Cannot parse config file {path}: {e}",
            code="config_parse_error",
            details={"path": str(path)},
        ) from e

    if data is None:
        return PlotConfig()

    if isinstance(data, dict) and isinstance(data.get("plot"), dict):
        data = data["plot"]

    if not isinstance(data, dict):
        raise ConfigError("Config root must be a mapping/object.", code="invalid_config")

    return PlotConfig().with_overrides(**{str(k): v for k, v in data.items()})
