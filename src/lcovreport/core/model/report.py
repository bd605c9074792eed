from __future__ import annotations

from dataclasses import dataclass, field
from operator import attrgetter
from pathlib import PurePosixPath

# -----------------------------------------------------------------------------
# Per-item coverage facts
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class LineCoverage:
    """Execution count of a single instrumented line (1-indexed)."""

    line: int
    hits: int

    def __post_init__(self) -> None:
        """Validate line number and hit count."""
        if self.line < 1:
            msg = "LineCoverage.line must be >= 1"
            raise ValueError(msg)
        if self.hits < 0:
            msg = "LineCoverage.hits must be >= 0"
            raise ValueError(msg)

    @property
    def covered(self) -> bool:
        return self.hits > 0


@dataclass(frozen=True, slots=True)
class FunctionCoverage:
    """Call count of a function declared at ``line``."""

    name: str
    line: int
    hits: int

    def __post_init__(self) -> None:
        """Validate the function name, declaration line and call count."""
        if not self.name:
            msg = "FunctionCoverage.name must not be empty"
            raise ValueError(msg)
        if any(c in self.name for c in ",\r\n"):
            msg = f"FunctionCoverage.name must not contain commas or line breaks: {self.name!r}"
            raise ValueError(msg)
        if self.line < 1:
            msg = "FunctionCoverage.line must be >= 1"
            raise ValueError(msg)
        if self.hits < 0:
            msg = "FunctionCoverage.hits must be >= 0"
            raise ValueError(msg)

    @property
    def covered(self) -> bool:
        return self.hits > 0


@dataclass(frozen=True, slots=True)
class BranchCoverage:
    """One outcome of a branch point.

    ``taken`` is ``None`` when the line holding the branch never executed,
    which LCOV distinguishes from a reached-but-not-taken branch (``0``).
    """

    line: int
    block: int
    branch: int
    taken: int | None

    def __post_init__(self) -> None:
        """Validate that the branch coordinates and count are sane."""
        if self.line < 1:
            msg = "BranchCoverage.line must be >= 1"
            raise ValueError(msg)
        if self.block < 0 or self.branch < 0:
            msg = "BranchCoverage.block/branch must be >= 0"
            raise ValueError(msg)
        if self.taken is not None and self.taken < 0:
            msg = "BranchCoverage.taken must be >= 0 or None"
            raise ValueError(msg)

    @property
    def covered(self) -> bool:
        return bool(self.taken)


@dataclass(frozen=True, slots=True)
class CoverageCounts:
    total: int
    hit: int

    def __post_init__(self) -> None:
        """Validate that counts are non-negative and consistent."""
        if self.total < 0 or self.hit < 0:
            msg = "CoverageCounts fields must be >= 0"
            raise ValueError(msg)
        if self.hit > self.total:
            msg = "CoverageCounts requires hit <= total"
            raise ValueError(msg)

    @property
    def missed(self) -> int:
        return self.total - self.hit

    @property
    def percent(self) -> float | None:
        """Percentage of hit items, ``None`` when nothing was instrumented."""
        if not self.total:
            return None
        return 100.0 * self.hit / self.total

    def __add__(self, other: CoverageCounts) -> CoverageCounts:
        return CoverageCounts(total=self.total + other.total, hit=self.hit + other.hit)


def _count(items: tuple[LineCoverage | FunctionCoverage | BranchCoverage, ...]) -> CoverageCounts:
    return CoverageCounts(total=len(items), hit=sum(1 for item in items if item.covered))


# -----------------------------------------------------------------------------
# File and summary reports
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class FileReport:
    """Coverage facts for one instrumented source file.

    Notes
    -----
    - ``path`` is the source-relative path as reported by the coverage run
      (``src/util.js``); it is stored with forward slashes.
    - ``lines``, ``functions`` and ``branches`` are kept sorted by line so
      every writer sees the same order.
    - ``source`` holds the file's text, one entry per line, when available.
    """

    path: str
    lines: tuple[LineCoverage, ...] = ()
    functions: tuple[FunctionCoverage, ...] = ()
    branches: tuple[BranchCoverage, ...] = ()
    source: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        """Normalise the path and order the coverage items."""
        path = self.path.replace("\\", "/")
        if not path or path.endswith("/"):
            msg = f"FileReport.path must name a file: {self.path!r}"
            raise ValueError(msg)
        object.__setattr__(self, "path", path)
        object.__setattr__(self, "lines", tuple(sorted(self.lines, key=attrgetter("line"))))
        object.__setattr__(
            self, "functions", tuple(sorted(self.functions, key=attrgetter("line", "name")))
        )
        object.__setattr__(
            self, "branches", tuple(sorted(self.branches, key=attrgetter("line", "block", "branch")))
        )
        if self.source is not None:
            object.__setattr__(self, "source", tuple(self.source))

    @property
    def parent(self) -> PurePosixPath:
        """Directory part of :attr:`path` (``.`` for top-level files)."""
        return PurePosixPath(self.path).parent

    @property
    def name(self) -> str:
        """Base name of the file including its extension."""
        return PurePosixPath(self.path).name

    @property
    def line_counts(self) -> CoverageCounts:
        return _count(self.lines)

    @property
    def function_counts(self) -> CoverageCounts:
        return _count(self.functions)

    @property
    def branch_counts(self) -> CoverageCounts:
        return _count(self.branches)

    def source_line(self, number: int) -> str | None:
        """Return the text of 1-indexed line *number* if the source is known."""
        if self.source is None or not 1 <= number <= len(self.source):
            return None
        return self.source[number - 1]


@dataclass(frozen=True, slots=True)
class SummaryReport:
    """Whole-project coverage result, one :class:`FileReport` per source file."""

    files: tuple[FileReport, ...] = field(default_factory=tuple)
    name: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "files", tuple(self.files))

    @property
    def line_counts(self) -> CoverageCounts:
        return sum((f.line_counts for f in self.files), CoverageCounts(0, 0))

    @property
    def function_counts(self) -> CoverageCounts:
        return sum((f.function_counts for f in self.files), CoverageCounts(0, 0))

    @property
    def branch_counts(self) -> CoverageCounts:
        return sum((f.branch_counts for f in self.files), CoverageCounts(0, 0))


__all__ = [
    "BranchCoverage",
    "CoverageCounts",
    "FileReport",
    "FunctionCoverage",
    "LineCoverage",
    "SummaryReport",
]
