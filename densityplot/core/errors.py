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

from collections.abc import Mapping
from typing import Any


class DensityPlotError(Exception):
    """
    Base class for all densityplot errors.

    These errors describe bad input or configuration and should be surfaced
    to users as such, not as internal crashes.
    """

    code: str
    message: str
    details: Mapping[str, Any] | None = None

    def __init__(
        self,
        message: str,
        code: str = "densityplot_error",
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return self.message


class EmptyInputError(DensityPlotError):
    """Raised when a sample set (or value sequence) is empty."""

    def __init__(
        self,
        message: str = "Sample set is empty.",
        code: str = "empty_input",
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code=code, details=details)


class InvalidArgumentError(DensityPlotError, ValueError):
    """Raised for bin counts, lengths, factors or values outside their domain."""

    def __init__(
        self,
        message: str,
        code: str = "invalid_argument",
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code=code, details=details)


class SampleLoadError(DensityPlotError):
    """Raised when samples cannot be read or parsed from a file or stream."""

    file: str | None = None
    line: int | None = None

    def __init__(
        self,
        message: str,
        code: str = "sample_load_error",
        file: str | None = None,
        line: int | None = None,
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code=code, details=details)
        self.file = file
        self.line = line

    def __str__(self) -> str:
        loc = ""
        if self.file:
            loc = self.file
            if self.line is not None:
                loc += f":{self.line}"
            loc += ": "
        return f"{loc}{self.message}"


class ConfigError(DensityPlotError):
    """Raised when a plot configuration file is missing, unreadable or invalid."""

    def __init__(
        self,
        message: str,
        code: str = "config_error",
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code=code, details=details)
