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
import sys

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_HANDLER_NAME = "densityplot-stderr"


def configure_logging(level: str = "WARNING") -> None:
    """
    Attach a single stderr handler to the "densityplot" logger.

    Safe to call more than once: the handler is replaced, not duplicated.
    Chart output goes to stdout, so log records never interleave with it.
    """
    name = level.upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level!r} (expected one of {', '.join(LOG_LEVELS)})")

    logger = logging.getLogger("densityplot")
    for h in list(logger.handlers):
        if h.get_name() == _HANDLER_NAME:
            logger.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, name))
