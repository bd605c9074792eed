"""Utilities and helper functions for implementing CLI-specific functionality."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path

from lcovreport import logger
from lcovreport.core.config import DEFAULT_OUTPUT_DIR, LOG_FORMAT, get_config_output_dir


@dataclasses.dataclass(slots=True)
class LcovReportOptions:
    """Collected CLI options after parsing."""

    # --- global flags --------------------------------------------------- #
    debug: bool = False
    quiet: bool = False
    verbose: bool = False


def _configure_runtime(*, quiet: bool, verbose: bool, debug: bool) -> None:
    """Configure logging based on *quiet*/*verbose*."""
    level = logging.ERROR if quiet else (logging.DEBUG if verbose else logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)

    if debug:
        logger.debug("debug mode active")


def resolve_output_dir(output_dir: Path | None) -> Path:
    """Pick the output directory: option, then pyproject.toml, then the default."""
    if output_dir is not None:
        return output_dir
    configured = get_config_output_dir()
    return Path(configured or DEFAULT_OUTPUT_DIR)

