from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from lcovreport import __version__
from lcovreport.cli import (
    EXIT_CANTCREAT,
    EXIT_DATAERR,
    EXIT_NOINPUT,
    EXIT_OK,
    cli,
    resolve_output_dir,
)

# --------------------------------------------------------------------------- #
# helpers                                                                     #
# --------------------------------------------------------------------------- #

COVERAGE = {
    "src/util.js": {
        "code": ["function add(a, b) {", "  return a + b;", "}"],
        "lines": {"1": 1, "2": 1, "3": 0},
        "functions": {"add:1": 1},
    },
    "main.js": {"lines": {"1": 1}},
}


def _run(runner: CliRunner, args: list[str]) -> tuple[int, str]:
    """Invoke the CLI and return *(exit_code, output)* for convenience."""
    result = runner.invoke(cli, args)
    return result.exit_code, result.output


# --------------------------------------------------------------------------- #
# tests                                                                       #
# --------------------------------------------------------------------------- #


def test_cli_version(cli_runner: CliRunner) -> None:
    code, out = _run(cli_runner, ["--version"])
    assert code == EXIT_OK
    assert out.strip() == __version__

    code, out = _run(cli_runner, ["version"])
    assert code == EXIT_OK
    assert out.strip() == __version__


def test_cli_without_command_prints_help(cli_runner: CliRunner) -> None:
    code, out = _run(cli_runner, [])
    assert code == EXIT_OK
    assert "generate" in out


def test_generate_writes_report(
    tmp_path: Path,
    cli_runner: CliRunner,
    coverage_json_file: Callable[..., Path],
) -> None:
    cov = coverage_json_file(COVERAGE)
    out_dir = tmp_path / "report"

    code, _out = _run(cli_runner, ["generate", str(cov), "-o", str(out_dir), "--name", "unit"])

    assert code == EXIT_OK
    info = (out_dir / "lcov.info").read_text(encoding="utf-8")
    assert info.startswith("TN:unit\nSF:main.js\n")
    assert "SF:src/util.js\n" in info
    assert (out_dir / "lcov-report" / "src" / "util.js.gcov.html").is_file()
    assert (out_dir / "lcov-report" / "main.js.func.html").is_file()


def test_generate_with_table(
    tmp_path: Path,
    cli_runner: CliRunner,
    coverage_json_file: Callable[..., Path],
) -> None:
    cov = coverage_json_file(COVERAGE)
    code, out = _run(cli_runner, ["generate", str(cov), "-o", str(tmp_path / "r"), "--table"])
    assert code == EXIT_OK
    assert "Coverage Report" in out
    assert "src/util.js" in out


def test_generate_missing_input(tmp_path: Path, cli_runner: CliRunner) -> None:
    code, out = _run(cli_runner, ["generate", str(tmp_path / "missing.json"), "-o", str(tmp_path)])
    assert code == EXIT_NOINPUT
    assert "ERROR:" in out


def test_generate_invalid_input(
    tmp_path: Path,
    cli_runner: CliRunner,
    coverage_json_file: Callable[..., Path],
) -> None:
    cov = coverage_json_file({"a.js": {"functions": {}}})
    code, out = _run(cli_runner, ["generate", str(cov), "-o", str(tmp_path / "r")])
    assert code == EXIT_DATAERR
    assert "'lines' is a required property" in out


def test_generate_unwritable_output(
    tmp_path: Path,
    cli_runner: CliRunner,
    coverage_json_file: Callable[..., Path],
) -> None:
    cov = coverage_json_file(COVERAGE)
    out_dir = tmp_path / "r"
    out_dir.mkdir()
    (out_dir / "lcov-report").write_text("", encoding="utf-8")

    code, out = _run(cli_runner, ["generate", str(cov), "-o", str(out_dir)])
    assert code == EXIT_CANTCREAT
    assert str(out_dir / "lcov-report") in out


def test_debug_reraises(tmp_path: Path, cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--debug", "generate", str(tmp_path / "missing.json")])
    assert result.exit_code != EXIT_OK
    assert result.exception is not None
    assert not isinstance(result.exception, SystemExit)


def test_resolve_output_dir_precedence(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert resolve_output_dir(None) == Path("coverage")

    (tmp_path / "pyproject.toml").write_text('[tool.lcovreport]\noutput_dir = "build/cov"\n', encoding="utf-8")
    assert resolve_output_dir(None) == Path("build/cov")
    assert resolve_output_dir(Path("explicit")) == Path("explicit")


def test_generate_uses_configured_output_dir(
    tmp_path: Path,
    cli_runner: CliRunner,
    coverage_json_file: Callable[..., Path],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    cov = coverage_json_file(COVERAGE)
    monkeypatch.chdir(tmp_path)
    (tmp_path / "pyproject.toml").write_text('[tool.lcovreport]\noutput_dir = "build/cov"\n', encoding="utf-8")

    code, _out = _run(cli_runner, ["generate", str(cov)])

    assert code == EXIT_OK
    assert (tmp_path / "build" / "cov" / "lcov.info").is_file()


def test_version_wins_over_subcommand(
    tmp_path: Path,
    cli_runner: CliRunner,
    coverage_json_file: Callable[..., Path],
) -> None:
    cov = coverage_json_file(COVERAGE)
    code, out = _run(cli_runner, ["--version", "generate", str(cov), "-o", str(tmp_path / "r")])
    assert code == EXIT_OK
    assert out.strip() == __version__
    assert not (tmp_path / "r").exists()


def test_generate_non_utf8_input(tmp_path: Path, cli_runner: CliRunner) -> None:
    cov = tmp_path / "coverage.json"
    cov.write_bytes(b'{"\xff": 1}')
    code, out = _run(cli_runner, ["generate", str(cov), "-o", str(tmp_path / "r")])
    assert code == EXIT_DATAERR
    assert "not UTF-8" in out


def test_generate_directory_as_input(tmp_path: Path, cli_runner: CliRunner) -> None:
    code, out = _run(cli_runner, ["generate", str(tmp_path), "-o", str(tmp_path / "r")])
    assert code == EXIT_NOINPUT
    assert "cannot read coverage file" in out
