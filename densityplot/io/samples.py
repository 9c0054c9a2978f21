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
import logging
import re
import sys
from pathlib import Path
from typing import Any, Literal, TextIO

import yaml

from densityplot.core.errors import SampleLoadError

log = logging.getLogger(__name__)

SampleFormat = Literal["text", "json", "yaml"]

_SEPARATORS = re.compile(r"[\s,;]+")

_SUFFIX_FORMATS: dict[str, SampleFormat] = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


def detect_format(path: Path) -> SampleFormat:
    """Pick a parser from the file suffix; anything unknown is plain text/CSV."""
    return _SUFFIX_FORMATS.get(path.suffix.lower(), "text")


def parse_samples(text: str, fmt: SampleFormat = "text", *, source: str | None = None) -> list[float]:
    """
    Parse numeric samples.

    text: numbers separated by whitespace, commas or semicolons; blank lines
          and anything after "#" are ignored.
    json/yaml: a list of numbers, or a mapping with a "samples" list.
    """
    if fmt == "text":
        return _parse_text(text, source=source)

    try:
        data = json.loads(text) if fmt == "json" else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise SampleLoadError(f"Cannot parse {fmt} samples: {e}", code="parse_error", file=source) from e

    return _coerce_document(data, source=source)


def load_samples(path: str | Path, fmt: SampleFormat | None = None, *, stdin: TextIO | None = None) -> list[float]:
    """Read samples from `path`, or from standard input when `path` is "-"."""
    if str(path) == "-":
        stream = stdin if stdin is not None else sys.stdin
        return parse_samples(stream.read(), fmt or "text", source="<stdin>")

    if not isinstance(path, Path):
        path = Path(path)

    if not path.exists():
        raise SampleLoadError(f"Sample file does not exist: {path}", code="file_not_found")

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SampleLoadError(f"Cannot read sample file: {e}", code="file_unreadable", file=str(path)) from e

    samples = parse_samples(raw, fmt or detect_format(path), source=str(path))
    log.info("loaded %d samples from %s", len(samples), path)
    return samples


def _parse_text(text: str, *, source: str | None) -> list[float]:
    values: list[float] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        content = line.split("#", 1)[0].strip()
        if not content:
            continue
        for token in _SEPARATORS.split(content):
            if not token:
                continue
            try:
                values.append(float(token))
            except ValueError:
                raise SampleLoadError(
                    f"Not a number: {token!r}",
                    code="invalid_sample",
                    file=source,
                    line=lineno,
                ) from None
    return values


def _coerce_document(data: Any, *, source: str | None) -> list[float]:
    if isinstance(data, dict):
        if "samples" not in data:
            raise SampleLoadError("Mapping input must contain a 'samples' list.", code="invalid_document", file=source)
        data = data["samples"]

    if not isinstance(data, list):
        raise SampleLoadError("Samples must be a list of numbers.", code="invalid_document", file=source)

    values: list[float] = []
    for i, item in enumerate(data):
        if isinstance(item, bool) or not isinstance(item, (int, float)):
            raise SampleLoadError(
                f"Sample at index {i} is not a number: {item!r}",
                code="invalid_sample",
                file=source,
                details={"index": i},
            )
        values.append(item)
    return values
