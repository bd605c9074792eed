"""Centralised exception hierarchy for lcovreport."""

from __future__ import annotations

from pathlib import Path


class LcovReportError(Exception):
    """Base class for all custom lcovreport exceptions."""


class WriterNotFoundError(LcovReportError, LookupError):
    """No writer is registered for the requested report kind."""

    def __init__(self, kind: object, hint: str = "") -> None:
        self.kind = kind
        super().__init__(f"No writer registered for report kind {kind!r}{hint}")


class ReportWriteError(LcovReportError, OSError):
    """A report directory or file could not be created or written."""

    def __init__(self, path: Path, reason: str, errno: int | None = None) -> None:
        super().__init__(errno, reason, str(path))
        self.path = Path(path)
        self.reason = reason

    def __str__(self) -> str:
        return f"Cannot write {self.path}: {self.reason}"


class CoverageInputError(LcovReportError):
    """Base class for errors related to the coverage input document."""


class CoverageInputNotFoundError(CoverageInputError):
    """Coverage input file could not be located on disk."""


class InvalidCoverageInputError(CoverageInputError):
    """Coverage input file was found but does not contain valid coverage data."""


__all__ = [
    "CoverageInputError",
    "CoverageInputNotFoundError",
    "InvalidCoverageInputError",
    "LcovReportError",
    "ReportWriteError",
    "WriterNotFoundError",
]
