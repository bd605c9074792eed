"""Central configuration and constants for ``lcovreport``."""

from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass
from functools import cache
from importlib import resources
from pathlib import Path

from lcovreport import logger

# Fixed artifact names under the output root.
SUMMARY_FILENAME = "lcov.info"
REPORT_DIRNAME = "lcov-report"
FILE_PAGE_SUFFIX = ".gcov.html"
FUNCTION_PAGE_SUFFIX = ".func.html"

# Used by the CLI when neither ``--output-dir`` nor pyproject.toml names one.
DEFAULT_OUTPUT_DIR = "coverage"

# Default logging format used by the CLI entry point.
LOG_FORMAT = "%(levelname)s: %(message)s"


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Where a report is written and how chatty generation is.

    ``verbose`` only changes the level of the trace messages; the artifacts
    are identical either way.
    """

    output_dir: Path
    verbose: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "output_dir", Path(self.output_dir))

    @property
    def report_dir(self) -> Path:
        return self.output_dir / REPORT_DIRNAME

    @property
    def summary_path(self) -> Path:
        return self.output_dir / SUMMARY_FILENAME


def _get_output_dir_from_pyproject(pyproject: Path) -> str | None:
    """Extract ``[tool.lcovreport] output_dir`` from pyproject.toml."""
    try:
        with pyproject.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to parse %s: %s", pyproject, e)
        return None

    section = data.get("tool", {}).get("lcovreport", {})
    output_dir = section.get("output_dir") if isinstance(section, dict) else None
    return output_dir if isinstance(output_dir, str) and output_dir.strip() else None


def get_config_output_dir(pyproject: Path | None = None) -> str | None:
    """Look for a configured output directory, or ``None`` when unset."""
    path = (pyproject or Path("./pyproject.toml")).resolve()
    if not path.exists():
        return None
    output_dir = _get_output_dir_from_pyproject(path)
    if output_dir:
        logger.info("Using output directory from config: %s", output_dir)
    return output_dir


@cache
def get_schema() -> dict[str, object]:
    """Load and cache the JSON schema for coverage input documents."""
    text = resources.files("lcovreport.data").joinpath("coverage.schema.json").read_text(encoding="utf-8")
    return json.loads(text)


__all__ = [
    "DEFAULT_OUTPUT_DIR",
    "FILE_PAGE_SUFFIX",
    "FUNCTION_PAGE_SUFFIX",
    "LOG_FORMAT",
    "REPORT_DIRNAME",
    "SUMMARY_FILENAME",
    "GeneratorConfig",
    "get_config_output_dir",
    "get_schema",
]
