"""Shared type aliases and enumerations used across lcovreport."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import TypeAlias

# ---------------------------------------------------------------------------
# Common type aliases
# ---------------------------------------------------------------------------

FilePath: TypeAlias = Path
"""Canonical file path object used throughout the code base."""

CoveragePercent: TypeAlias = float
"""Percentage value in the inclusive range ``0`` to ``100``."""


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class ReportKind(StrEnum):
    """Report artifacts a writer can be selected for."""

    SUMMARY = "lcov-summary"
    FILE_PAGE = "lcov-file-page"
    FUNCTION_PAGE = "lcov-function-page"


__all__ = [
    "CoveragePercent",
    "FilePath",
    "ReportKind",
]
