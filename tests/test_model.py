from __future__ import annotations

from pathlib import PurePosixPath

import pytest

from lcovreport.core.model.report import (
    BranchCoverage,
    CoverageCounts,
    FileReport,
    FunctionCoverage,
    LineCoverage,
    SummaryReport,
)


def test_file_report_decomposes_path(util_report: FileReport) -> None:
    assert util_report.parent == PurePosixPath("src")
    assert util_report.name == "util.js"


def test_top_level_file_has_dot_parent() -> None:
    report = FileReport(path="main.js")
    assert report.parent == PurePosixPath(".")
    assert report.name == "main.js"


def test_backslashes_are_normalised() -> None:
    report = FileReport(path="src\\lib\\x.js")
    assert report.path == "src/lib/x.js"
    assert report.parent == PurePosixPath("src/lib")


@pytest.mark.parametrize("path", ["", "src/"])
def test_file_report_requires_a_file_name(path: str) -> None:
    with pytest.raises(ValueError, match="must name a file"):
        FileReport(path=path)


def test_items_are_sorted_by_line() -> None:
    report = FileReport(
        path="x.js",
        lines=(LineCoverage(3, 0), LineCoverage(1, 2)),
        functions=(FunctionCoverage("b", 9, 0), FunctionCoverage("a", 2, 1)),
    )
    assert [ln.line for ln in report.lines] == [1, 3]
    assert [fn.name for fn in report.functions] == ["a", "b"]


def test_counts(util_report: FileReport) -> None:
    assert util_report.line_counts == CoverageCounts(total=10, hit=8)
    assert util_report.function_counts == CoverageCounts(total=3, hit=2)
    assert util_report.branch_counts == CoverageCounts(total=2, hit=1)
    assert util_report.line_counts.percent == pytest.approx(80.0)
    assert util_report.line_counts.missed == 2


def test_empty_counts_have_no_percent() -> None:
    assert CoverageCounts(0, 0).percent is None


def test_summary_totals(summary_report: SummaryReport) -> None:
    assert summary_report.line_counts == CoverageCounts(total=13, hit=10)
    assert summary_report.function_counts == CoverageCounts(total=3, hit=2)


def test_source_line_bounds(util_report: FileReport) -> None:
    assert util_report.source_line(1) == "function add(a, b) {"
    assert util_report.source_line(0) is None
    assert util_report.source_line(11) is None
    assert FileReport(path="x.js").source_line(1) is None


@pytest.mark.parametrize(
    "factory",
    [
        lambda: LineCoverage(0, 1),
        lambda: LineCoverage(1, -1),
        lambda: FunctionCoverage("", 1, 0),
        lambda: FunctionCoverage("f", 0, 0),
        lambda: BranchCoverage(1, -1, 0, 0),
        lambda: BranchCoverage(1, 0, 0, -2),
        lambda: CoverageCounts(1, 2),
    ],
)
def test_invalid_values_rejected(factory) -> None:
    with pytest.raises(ValueError):  # noqa: PT011
        factory()


def test_models_are_immutable(util_report: FileReport) -> None:
    with pytest.raises(AttributeError):
        util_report.path = "other.js"  # type: ignore[misc]


@pytest.mark.parametrize("name", ["a,b", "line\nbreak", "cr\r"])
def test_function_names_must_fit_on_one_lcov_field(name: str) -> None:
    with pytest.raises(ValueError, match="commas or line breaks"):
        FunctionCoverage(name, 1, 0)
