"""Build a :class:`SummaryReport` from a per-file coverage JSON document.

The document maps each source path to its coverage facts::

    {
      "src/util.js": {
        "path": "/abs/src/util.js",
        "code": ["function add(a, b) {", "  return a + b;", "}"],
        "lines": {"1": 1, "2": 3},
        "functions": {"add:1": 3},
        "branches": {"2": [3, 0]}
      }
    }

Function keys are ``<name>:<line>``; names may contain colons themselves, so
the key is split on the last one.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, cast

from jsonschema import ValidationError, validate

from lcovreport import logger
from lcovreport.core.config import get_schema
from lcovreport.core.model.report import (
    BranchCoverage,
    FileReport,
    FunctionCoverage,
    LineCoverage,
    SummaryReport,
)
from lcovreport.errors import CoverageInputNotFoundError, InvalidCoverageInputError


def _parse_function_key(key: str) -> tuple[str, int]:
    name, _, line = key.rpartition(":")
    return name, int(line)


def _file_report(path: str, entry: dict[str, Any]) -> FileReport:
    lines = {int(k): hits for k, hits in entry["lines"].items()}

    functions: list[FunctionCoverage] = []
    for key, hits in entry.get("functions", {}).items():
        fn_name, line = _parse_function_key(key)
        functions.append(FunctionCoverage(name=fn_name, line=line, hits=hits))

    branches: list[BranchCoverage] = []
    for key, counts in entry.get("branches", {}).items():
        line = int(key)
        executed = bool(lines.get(line))
        branches.extend(
            BranchCoverage(line=line, block=0, branch=i, taken=taken if executed else None)
            for i, taken in enumerate(counts)
        )

    code = entry.get("code")
    return FileReport(
        path=path,
        lines=tuple(LineCoverage(line=ln, hits=hits) for ln, hits in lines.items()),
        functions=tuple(functions),
        branches=tuple(branches),
        source=tuple(code) if code is not None else None,
    )


def parse_coverage_data(data: object, *, name: str = "") -> SummaryReport:
    """Validate *data* and convert it into a :class:`SummaryReport`.

    Files are ordered by path so repeated runs emit artifacts in the same order.
    """
    try:
        validate(data, get_schema())
    except ValidationError as e:
        location = "/".join(str(p) for p in e.absolute_path) or "<root>"
        msg = f"invalid coverage data at {location}: {e.message}"
        raise InvalidCoverageInputError(msg) from e

    entries = cast("dict[str, dict[str, Any]]", data)
    try:
        files = tuple(_file_report(path, entries[path]) for path in sorted(entries))
    except ValueError as e:
        msg = f"invalid coverage data: {e}"
        raise InvalidCoverageInputError(msg) from e

    logger.debug("parsed coverage for %d file(s)", len(files))
    return SummaryReport(files=files, name=name)


def load_coverage_file(path: Path | str, *, name: str = "") -> SummaryReport:
    """Read the coverage JSON document at *path*."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        msg = f"coverage file not found: {path}"
        raise CoverageInputNotFoundError(msg) from e
    except UnicodeDecodeError as e:
        msg = f"{path} is not UTF-8 text: {e}"
        raise InvalidCoverageInputError(msg) from e
    except OSError as e:
        msg = f"cannot read coverage file {path}: {e.strerror or e}"
        raise CoverageInputNotFoundError(msg) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        msg = f"{path} is not valid JSON: {e}"
        raise InvalidCoverageInputError(msg) from e

    logger.info("Loaded coverage data from %s", path)
    return parse_coverage_data(data, name=name)
