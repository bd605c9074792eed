from lcovreport.core.model.report import (
    BranchCoverage,
    CoverageCounts,
    FileReport,
    FunctionCoverage,
    LineCoverage,
    SummaryReport,
)

__all__ = [
    "BranchCoverage",
    "CoverageCounts",
    "FileReport",
    "FunctionCoverage",
    "LineCoverage",
    "SummaryReport",
]
