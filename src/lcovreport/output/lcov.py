"""LCOV tracefile rendering.

One record block per file::

    TN:<test name>
    SF:<source file>
    FN:<line>,<function>        FNDA:<calls>,<function>     FNF/FNH
    BRDA:<line>,<block>,<branch>,<taken|->                  BRF/BRH
    DA:<line>,<hits>                                        LF/LH
    end_of_record
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import datetime

    from lcovreport.core.model.report import FileReport, SummaryReport


def _record(file: FileReport, test_name: str) -> list[str]:
    out = [f"TN:{test_name}", f"SF:{file.path}"]

    out.extend(f"FN:{fn.line},{fn.name}" for fn in file.functions)
    out.extend(f"FNDA:{fn.hits},{fn.name}" for fn in file.functions)
    functions = file.function_counts
    out.extend((f"FNF:{functions.total}", f"FNH:{functions.hit}"))

    if file.branches:
        for br in file.branches:
            taken = "-" if br.taken is None else str(br.taken)
            out.append(f"BRDA:{br.line},{br.block},{br.branch},{taken}")
        branches = file.branch_counts
        out.extend((f"BRF:{branches.total}", f"BRH:{branches.hit}"))

    out.extend(f"DA:{ln.line},{ln.hits}" for ln in file.lines)
    lines = file.line_counts
    out.extend((f"LF:{lines.total}", f"LH:{lines.hit}", "end_of_record"))
    return out


def format_lcov_summary(report: SummaryReport, generated: datetime.datetime) -> str:  # noqa: ARG001
    """Return the LCOV tracefile text for *report*.

    The tracefile format has no timestamp field, so *generated* is accepted
    only to share the writer signature.
    """
    lines: list[str] = []
    for file in report.files:
        lines.extend(_record(file, report.name))
    return "".join(f"{line}\n" for line in lines)
