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

from densityplot.core.errors import DensityPlotError

# Script-friendly semantics
EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_ERROR = 2


def exit_code_for_error(error: BaseException) -> int:
    """
    Policy:
      - densityplot errors (empty input, bad arguments, unreadable files) => EXIT_INPUT_ERROR
      - anything else => EXIT_ERROR
    """
    if isinstance(error, DensityPlotError):
        return EXIT_INPUT_ERROR
    return EXIT_ERROR
