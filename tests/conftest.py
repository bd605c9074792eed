from __future__ import annotations

import datetime
import json
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from lcovreport.core.model.report import (
    BranchCoverage,
    FileReport,
    FunctionCoverage,
    LineCoverage,
    SummaryReport,
)

GENERATED = datetime.datetime(2024, 5, 17, 12, 30, tzinfo=datetime.UTC)

UTIL_SOURCE = (
    "function add(a, b) {",
    "  return a + b;",
    "}",
    "function sub(a, b) {",
    "  if (a < b) {",
    "    return 0;",
    "  }",
    "  return a - b;",
    "}",
    "module.exports = { add: add, sub: sub };",
)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Click CLI runner for invoking the command-line interface."""
    return CliRunner()


@pytest.fixture
def generated() -> datetime.datetime:
    return GENERATED


@pytest.fixture
def util_report() -> FileReport:
    """``src/util.js``: 10 instrumented lines, 8 of them executed."""
    hits = {1: 1, 2: 4, 3: 1, 4: 1, 5: 2, 6: 0, 7: 1, 8: 2, 9: 0, 10: 1}
    return FileReport(
        path="src/util.js",
        lines=tuple(LineCoverage(line=ln, hits=n) for ln, n in hits.items()),
        functions=(
            FunctionCoverage(name="add", line=1, hits=4),
            FunctionCoverage(name="sub", line=4, hits=2),
            FunctionCoverage(name="(anonymous 1)", line=10, hits=0),
        ),
        branches=(
            BranchCoverage(line=5, block=0, branch=0, taken=0),
            BranchCoverage(line=5, block=0, branch=1, taken=2),
        ),
        source=UTIL_SOURCE,
    )


@pytest.fixture
def make_file_report() -> Callable[..., FileReport]:
    def build(path: str, lines: Mapping[int, int] | None = None, **kwargs: Any) -> FileReport:
        items = (lines or {1: 1}).items()
        return FileReport(path=path, lines=tuple(LineCoverage(line=ln, hits=n) for ln, n in items), **kwargs)

    return build


@pytest.fixture
def summary_report(util_report: FileReport, make_file_report: Callable[..., FileReport]) -> SummaryReport:
    return SummaryReport(
        files=(
            util_report,
            make_file_report("src/lib/a/b/deep.js", {1: 0, 2: 3}),
            make_file_report("main.js", {1: 1}),
        )
    )


@pytest.fixture
def coverage_json_file(tmp_path: Path) -> Callable[..., Path]:
    def write(data: object, *, filename: str = "coverage.json") -> Path:
        path = tmp_path / filename
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return write
