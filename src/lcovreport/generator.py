"""Write an LCOV tracefile and per-file HTML pages for a coverage result.

Layout under the configured output directory::

    lcov.info
    lcov-report/<source parent dirs>/<name>.gcov.html
    lcov-report/<source parent dirs>/<name>.func.html

Generation is not transactional: when a write fails the run stops and every
artifact written so far stays on disk.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

from lcovreport import logger
from lcovreport.core.config import FILE_PAGE_SUFFIX, FUNCTION_PAGE_SUFFIX
from lcovreport.core.types import ReportKind
from lcovreport.errors import ReportWriteError
from lcovreport.output.registry import get_writer

if TYPE_CHECKING:
    from lcovreport.core.config import GeneratorConfig
    from lcovreport.core.model.report import FileReport, SummaryReport


@dataclass(slots=True)
class GenerationResult:
    """Paths written by one :meth:`LcovReportGenerator.generate` call, in order."""

    summary: Path
    pages: list[Path] = field(default_factory=list)

    @property
    def paths(self) -> list[Path]:
        return [self.summary, *self.pages]


def mirror_dir(report_dir: Path, parent: PurePosixPath) -> Path:
    """Return the directory under *report_dir* that mirrors *parent*.

    The anchor of an absolute *parent* is dropped. The remaining components
    are kept verbatim, ``..`` included, so a parent that climbs out of the
    source tree also climbs out of *report_dir*.
    """
    parts = [p for p in parent.parts if p not in {parent.anchor, "."}]
    return report_dir.joinpath(*parts)


class LcovReportGenerator:
    """Render a :class:`SummaryReport` into the configured output directory."""

    def __init__(self, config: GeneratorConfig) -> None:
        self.config = config
        self._ensure_dir(config.output_dir)

    # ------------------------------------------------------------------ #
    # public API                                                         #
    # ------------------------------------------------------------------ #
    def generate(
        self,
        report: SummaryReport,
        *,
        generated: datetime.datetime | None = None,
    ) -> GenerationResult:
        """Write the tracefile and both HTML pages for every file in *report*.

        Raises
        ------
        ReportWriteError
            A directory or artifact could not be created or written. Nothing
            after the failing path is attempted.
        """
        now = generated or datetime.datetime.now(datetime.UTC)

        # lcov.info exists even when a later page fails.
        self._ensure_dir(self.config.output_dir)
        summary = self._write(ReportKind.SUMMARY, report, now, self.config.summary_path)
        result = GenerationResult(summary=summary)

        if not self.config.report_dir.exists():
            self._trace("Creating %s", self.config.report_dir)
        self._ensure_dir(self.config.report_dir)

        for file_report in report.files:
            result.pages.extend(self._generate_file_pages(file_report, now))

        logger.debug("wrote %d artifact(s) for %d file(s)", len(result.paths), len(report.files))
        return result

    # ------------------------------------------------------------------ #
    # helpers                                                            #
    # ------------------------------------------------------------------ #
    def page_dir(self, file_report: FileReport) -> Path:
        return mirror_dir(self.config.report_dir, file_report.parent)

    def _generate_file_pages(self, file_report: FileReport, now: datetime.datetime) -> list[Path]:
        parent = self.page_dir(file_report)
        self._ensure_dir(parent)
        name = file_report.name
        return [
            self._write(ReportKind.FILE_PAGE, file_report, now, parent / f"{name}{FILE_PAGE_SUFFIX}"),
            self._write(ReportKind.FUNCTION_PAGE, file_report, now, parent / f"{name}{FUNCTION_PAGE_SUFFIX}"),
        ]

    def _write(self, kind: ReportKind, model: object, now: datetime.datetime, path: Path) -> Path:
        self._trace("Outputting %s", path)
        try:
            with path.open("w", encoding="utf-8") as sink:
                get_writer(kind, sink).write(model, now)
        except OSError as e:
            raise ReportWriteError(path, e.strerror or str(e), e.errno) from e
        return path

    @staticmethod
    def _ensure_dir(path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ReportWriteError(path, e.strerror or str(e), e.errno) from e

    def _trace(self, msg: str, *args: object) -> None:
        if self.config.verbose:
            logger.info(msg, *args)
        else:
            logger.debug(msg, *args)
