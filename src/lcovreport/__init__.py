import logging
from importlib.metadata import version

__version__ = version("lcovreport")

logger = logging.getLogger(__name__)

from lcovreport.core.config import GeneratorConfig  # noqa: E402
from lcovreport.core.model.report import (  # noqa: E402
    BranchCoverage,
    FileReport,
    FunctionCoverage,
    LineCoverage,
    SummaryReport,
)
from lcovreport.core.types import ReportKind  # noqa: E402
from lcovreport.errors import (  # noqa: E402
    LcovReportError,
    ReportWriteError,
    WriterNotFoundError,
)
from lcovreport.generator import GenerationResult, LcovReportGenerator  # noqa: E402
from lcovreport.inputs.coverage_json import load_coverage_file, parse_coverage_data  # noqa: E402
from lcovreport.output.registry import get_writer  # noqa: E402

__all__ = [
    "BranchCoverage",
    "FileReport",
    "FunctionCoverage",
    "GenerationResult",
    "GeneratorConfig",
    "LcovReportError",
    "LcovReportGenerator",
    "LineCoverage",
    "ReportKind",
    "ReportWriteError",
    "SummaryReport",
    "WriterNotFoundError",
    "__version__",
    "get_writer",
    "load_coverage_file",
    "logger",
    "parse_coverage_data",
]
