"""Definition of the command line interface."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from lcovreport import __version__, logger
from lcovreport.cli.errors import (
    EXIT_CANTCREAT,
    EXIT_CONFIG,
    EXIT_DATAERR,
    EXIT_NOINPUT,
    EXIT_OK,
)
from lcovreport.cli.util import LcovReportOptions, _configure_runtime, resolve_output_dir
from lcovreport.core.config import GeneratorConfig
from lcovreport.errors import (
    CoverageInputNotFoundError,
    InvalidCoverageInputError,
    ReportWriteError,
    WriterNotFoundError,
)
from lcovreport.generator import LcovReportGenerator
from lcovreport.inputs.coverage_json import load_coverage_file
from lcovreport.output.tty import render_coverage_table


# --------------------------------------------------------------------------- #
# CLI - root command group                                                    #
# --------------------------------------------------------------------------- #
@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
)
@click.version_option(__version__, "--version", message="%(version)s", help="Show the version and exit")
@click.option("--debug", is_flag=True, help="Show full tracebacks for errors")
@click.option("-q", "--quiet", is_flag=True, help="Suppress INFO logs, emit only errors")
@click.option("-v", "--verbose", is_flag=True, help="Trace every directory and file written")
@click.pass_context
def cli(ctx: click.Context, *, debug: bool, quiet: bool, verbose: bool) -> None:
    """lcovreport - write an LCOV tracefile and HTML pages from coverage JSON."""
    ctx.obj = LcovReportOptions(debug=debug, quiet=quiet, verbose=verbose)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(EXIT_OK)


# --------------------------------------------------------------------------- #
# Sub-command: version                                                        #
# --------------------------------------------------------------------------- #
@cli.command()
def version() -> None:
    """Print the version and exit."""
    click.echo(__version__)


# --------------------------------------------------------------------------- #
# Sub-command: generate                                                       #
# --------------------------------------------------------------------------- #
@cli.command()
@click.argument("coverage_file", type=click.Path(path_type=Path))
@click.option(
    "-o",
    "--output-dir",
    type=click.Path(path_type=Path, file_okay=False),
    help="Directory receiving lcov.info and lcov-report/ [default: from pyproject.toml, else coverage]",
)
@click.option("--name", "test_name", default="", help="Test name recorded on TN: lines")
@click.option("--table/--no-table", default=False, help="Print a coverage table after generating")
@click.pass_obj
def generate(
    opts: LcovReportOptions,
    *,
    coverage_file: Path,
    output_dir: Path | None,
    test_name: str,
    table: bool,
) -> None:
    """Generate the LCOV report for COVERAGE_FILE."""
    _configure_runtime(quiet=opts.quiet, verbose=opts.verbose, debug=opts.debug)

    try:
        report = load_coverage_file(coverage_file, name=test_name)
    except CoverageInputNotFoundError as e:
        click.echo(f"ERROR: {e}", err=True)
        if opts.debug:
            raise
        sys.exit(EXIT_NOINPUT)
    except InvalidCoverageInputError as e:
        click.echo(f"ERROR: {e}", err=True)
        if opts.debug:
            raise
        sys.exit(EXIT_DATAERR)

    config = GeneratorConfig(resolve_output_dir(output_dir), verbose=opts.verbose)
    try:
        result = LcovReportGenerator(config).generate(report)
    except ReportWriteError as e:
        click.echo(f"ERROR: {e}", err=True)
        if opts.debug:
            raise
        sys.exit(EXIT_CANTCREAT)
    except WriterNotFoundError as e:
        click.echo(f"ERROR: {e}", err=True)
        if opts.debug:
            raise
        sys.exit(EXIT_CONFIG)

    logger.info("Wrote %d file(s) to %s", len(result.paths), config.output_dir)
    if table and not opts.quiet:
        click.echo(render_coverage_table(report), nl=False)
