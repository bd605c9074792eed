from __future__ import annotations

from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from lcovreport.core.model.report import CoverageCounts, SummaryReport


# --------------------------- Formatting --------------------------------------
def _style_percent(pct: float | None, green: float, yellow: float) -> str:
    if pct is None:
        return "n/a"
    v = round(pct)
    if v >= green:
        return f"[green]{v}%[/green]"
    if v >= yellow:
        return f"[yellow]{v}%[/yellow]"
    return f"[red]{v}%[/red]"


def _cells(counts: CoverageCounts, green: float, yellow: float) -> list[str]:
    return [str(counts.total), str(counts.hit), _style_percent(counts.percent, green, yellow)]


# --------------------------- Table -------------------------------------------
def render_coverage_table(
    report: SummaryReport,
    *,
    green: float = 90.0,
    yellow: float = 75.0,
    width: int | None = None,
) -> str:
    """Return a Rich-rendered table of line and function coverage per file."""
    table = Table(title="Coverage Report", box=box.SIMPLE_HEAVY, header_style="bold", expand=True)

    table.add_column("File", style="cyan", overflow="fold")
    table.add_column("Line\nTot.", justify="right")
    table.add_column("Line\nHit", justify="right")
    table.add_column("Line\nCov.", justify="right")
    table.add_column("Func\nTot.", justify="right")
    table.add_column("Func\nHit", justify="right")
    table.add_column("Func\nCov.", justify="right")

    for file in report.files:
        table.add_row(
            escape(file.path),
            *_cells(file.line_counts, green, yellow),
            *_cells(file.function_counts, green, yellow),
        )

    table.add_section()
    table.add_row(
        "[bold]Overall[/bold]",
        *(f"[bold]{c}[/bold]" for c in _cells(report.line_counts, green, yellow)),
        *(f"[bold]{c}[/bold]" for c in _cells(report.function_counts, green, yellow)),
    )

    console = Console(width=width)
    with console.capture() as cap:
        console.print()
        console.print(table)
        console.print()
    return cap.get()
