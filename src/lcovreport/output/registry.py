"""Writer registry for lcovreport report kinds."""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING, Any

from lcovreport import logger
from lcovreport.core.types import ReportKind
from lcovreport.errors import WriterNotFoundError
from lcovreport.output.base import SinkWriter
from lcovreport.output.html import format_file_page, format_function_page
from lcovreport.output.lcov import format_lcov_summary

if TYPE_CHECKING:
    from typing import TextIO

    from lcovreport.output.base import Formatter, ReportWriter

WRITERS: dict[ReportKind, Formatter[Any]] = {
    ReportKind.SUMMARY: format_lcov_summary,
    ReportKind.FILE_PAGE: format_file_page,
    ReportKind.FUNCTION_PAGE: format_function_page,
}


def resolve_kind(value: ReportKind | str) -> ReportKind:
    """Resolve *value* to a registered :class:`ReportKind`."""
    try:
        kind = ReportKind(value)
    except ValueError as err:
        choices = [k.value for k in ReportKind]
        suggestion = difflib.get_close_matches(str(value), choices, n=1)
        hint = f". Did you mean {suggestion[0]!r}?" if suggestion else ""
        raise WriterNotFoundError(value, hint) from err

    if kind not in WRITERS:
        raise WriterNotFoundError(kind)
    return kind


def get_writer(kind: ReportKind | str, sink: TextIO) -> ReportWriter[Any]:
    """Return a new writer for *kind* bound to *sink*."""
    resolved = resolve_kind(kind)
    logger.debug("selected writer %s", resolved.value)
    return SinkWriter(WRITERS[resolved], sink)
