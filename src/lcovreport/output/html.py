from __future__ import annotations

from html import escape
from typing import TYPE_CHECKING
from urllib.parse import quote

from lcovreport.core.config import FILE_PAGE_SUFFIX, FUNCTION_PAGE_SUFFIX

if TYPE_CHECKING:  # pragma: no cover
    import datetime

    from lcovreport.core.model.report import CoverageCounts, FileReport

_STYLE = """
body { font-family: sans-serif; }
table.coverage { border-collapse: collapse; font-family: monospace; }
table.coverage td { padding: 0 0.5em; white-space: pre; }
td.lineNum { text-align: right; color: #666; }
td.lineCount { text-align: right; }
tr.lineCov { background: #cad7fe; }
tr.lineNoCov { background: #ff6230; }
tr.funcCov td.count { background: #cad7fe; }
tr.funcNoCov td.count { background: #ff6230; }
"""


def _percent(counts: CoverageCounts) -> str:
    pct = counts.percent
    return "-" if pct is None else f"{pct:.1f} %"


def _page(title: str, body: list[str]) -> str:
    parts = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        '<meta charset="utf-8"/>',
        f"<title>{escape(title)}</title>",
        f"<style>{_STYLE}</style>",
        "</head>",
        "<body>",
        *body,
        "</body>",
        "</html>",
    ]
    return "\n".join(parts) + "\n"


def _href(name: str, suffix: str) -> str:
    return escape(quote(name + suffix), quote=True)


def _header(report: FileReport, generated: datetime.datetime, *, view: str) -> list[str]:
    lines = report.line_counts
    functions = report.function_counts
    file_link = _href(report.name, FILE_PAGE_SUFFIX)
    func_link = _href(report.name, FUNCTION_PAGE_SUFFIX)
    return [
        f"<h1>LCOV - {escape(view)}</h1>",
        '<table class="header">',
        f"<tr><th>File</th><td>{escape(report.path)}</td></tr>",
        f"<tr><th>Generated</th><td>{escape(generated.isoformat(timespec='seconds'))}</td></tr>",
        f"<tr><th>Lines</th><td>{lines.hit} / {lines.total}</td><td>{_percent(lines)}</td></tr>",
        f"<tr><th>Functions</th><td>{functions.hit} / {functions.total}</td>"
        f"<td>{_percent(functions)}</td></tr>",
        "</table>",
        f'<p><a href="{file_link}">Source view</a> | <a href="{func_link}">Function view</a></p>',
    ]


def format_file_page(report: FileReport, generated: datetime.datetime) -> str:
    """Return the line coverage page for *report*.

    Every source line is listed when the source text is known, plus any
    instrumented line past its end; otherwise only the instrumented lines are.
    """
    hits = {ln.line: ln.hits for ln in report.lines}
    if report.source is not None:
        numbers = range(1, max(len(report.source), max(hits, default=0)) + 1)
    else:
        numbers = sorted(hits)

    rows: list[str] = []
    for number in numbers:
        code = escape(report.source_line(number) or "")
        count = hits.get(number)
        if count is None:
            rows.append(
                f'<tr><td class="lineNum" id="L{number}">{number}</td>'
                f'<td class="lineCount"></td><td>{code}</td></tr>'
            )
            continue
        css = "lineCov" if count else "lineNoCov"
        rows.append(
            f'<tr class="{css}"><td class="lineNum" id="L{number}">{number}</td>'
            f'<td class="lineCount">{count}</td><td>{code}</td></tr>'
        )

    body = [
        *_header(report, generated, view=report.path),
        '<table class="coverage">',
        "<tr><th>Line</th><th>Hits</th><th>Source</th></tr>",
        *rows,
        "</table>",
    ]
    return _page(f"LCOV - {report.path}", body)


def format_function_page(report: FileReport, generated: datetime.datetime) -> str:
    """Return the function coverage page for *report*, functions sorted by name."""
    file_link = _href(report.name, FILE_PAGE_SUFFIX)
    rows: list[str] = []
    for fn in sorted(report.functions, key=lambda f: (f.name, f.line)):
        css = "funcCov" if fn.hits else "funcNoCov"
        rows.append(
            f'<tr class="{css}"><td><a href="{file_link}#L{fn.line}">{escape(fn.name)}</a></td>'
            f'<td class="count">{fn.hits}</td></tr>'
        )
    if not rows:
        rows.append('<tr><td colspan="2">No functions instrumented</td></tr>')

    body = [
        *_header(report, generated, view=f"{report.path} - functions"),
        '<table class="coverage">',
        "<tr><th>Function Name</th><th>Hit count</th></tr>",
        *rows,
        "</table>",
    ]
    return _page(f"LCOV - {report.path} - functions", body)
