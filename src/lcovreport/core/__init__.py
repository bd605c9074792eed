from lcovreport.core.config import (
    DEFAULT_OUTPUT_DIR,
    FILE_PAGE_SUFFIX,
    FUNCTION_PAGE_SUFFIX,
    LOG_FORMAT,
    REPORT_DIRNAME,
    SUMMARY_FILENAME,
    GeneratorConfig,
    get_config_output_dir,
    get_schema,
)
from lcovreport.core.types import FilePath, ReportKind

__all__ = [
    "DEFAULT_OUTPUT_DIR",
    "FILE_PAGE_SUFFIX",
    "FUNCTION_PAGE_SUFFIX",
    "LOG_FORMAT",
    "REPORT_DIRNAME",
    "SUMMARY_FILENAME",
    "FilePath",
    "GeneratorConfig",
    "ReportKind",
    "get_config_output_dir",
    "get_schema",
]
