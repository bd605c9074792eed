"""Report writers for lcovreport."""

from __future__ import annotations

from lcovreport.output.html import format_file_page, format_function_page
from lcovreport.output.lcov import format_lcov_summary
from lcovreport.output.registry import WRITERS, get_writer, resolve_kind
from lcovreport.output.tty import render_coverage_table

__all__ = [
    "WRITERS",
    "format_file_page",
    "format_function_page",
    "format_lcov_summary",
    "get_writer",
    "render_coverage_table",
    "resolve_kind",
]
