"""Tests for the typer CLI."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from ruby_clean import __version__
from ruby_clean.cli import app
from tests.helpers_sources import write_source

runner = CliRunner()


def test_help_works() -> None:
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "Check Ruby" in result.stdout
    assert "--list-rules" in result.stdout
    assert "--extension" in result.stdout


def test_version_flag() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.stdout.strip() == __version__


def test_reports_one_line_per_problem(tmp_path: Path) -> None:
    path = write_source(tmp_path, "sample.rb", ["def foo()", "x ||= false"])

    result = runner.invoke(app, [str(path)])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        f"{path}:1 [METHOD DEF W/ EMPTY PARENS] - def foo()",
        f"{path}:2 [||= INITIALIZING BOOLEAN] - x ||= false",
    ]


def test_clean_file_exits_zero_without_output(tmp_path: Path) -> None:
    path = write_source(tmp_path, "clean.rb", ["x = 1", "# fine"])

    result = runner.invoke(app, [str(path)])

    assert result.exit_code == 0
    assert result.stdout == ""


def test_directory_and_file_arguments(tmp_path: Path) -> None:
    write_source(tmp_path, "src/lib/a.rb", ["  for x in y"])
    write_source(tmp_path, "src/lib/a.erb", ["  for x in y"])
    script = write_source(tmp_path, "bin/tool", ["x=1"])

    result = runner.invoke(app, [str(tmp_path / "src"), str(script)])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        f"{tmp_path / 'src' / 'lib' / 'a.rb'}:1 [FOR USED] -   for x in y",
        f"{script}:1 [CRAMPED OPERATOR] - x=1",
    ]


def test_extension_option(tmp_path: Path) -> None:
    write_source(tmp_path, "Rakefile.rake", ["x=1"])
    write_source(tmp_path, "lib.rb", ["x=1"])

    result = runner.invoke(app, ["--extension", "rake", str(tmp_path)])

    assert result.exit_code == 0
    assert "Rakefile.rake:1 [CRAMPED OPERATOR]" in result.stdout
    assert "lib.rb" not in result.stdout


def test_missing_path_exits_one_after_other_paths(tmp_path: Path) -> None:
    good = write_source(tmp_path, "good.rb", ["x=1"])

    result = runner.invoke(app, [str(tmp_path / "nope"), str(good)])

    assert result.exit_code == 1
    assert f"{good}:1 [CRAMPED OPERATOR] - x=1" in result.output
    assert "Path does not exist" in result.output


def test_decode_error_goes_to_stderr_and_scan_continues(tmp_path: Path) -> None:
    path = write_source(tmp_path, "bad.rb", b"\xff\nx=1\n")

    result = runner.invoke(app, [str(path)])

    assert result.exit_code == 0
    assert f"{path}:1 [DECODE ERROR]" in result.output
    assert f"{path}:2 [CRAMPED OPERATOR] - x=1" in result.output


def test_list_rules() -> None:
    result = runner.invoke(app, ["--list-rules"])
    assert result.exit_code == 0
    entries = [line for line in result.stdout.splitlines() if line.startswith("- ")]
    assert len(entries) == 14
    assert entries[0].startswith("- trailing_whitespace [TRAILING WHITESPACE]")


def test_no_paths_is_usage_error() -> None:
    result = runner.invoke(app, ["--no-color"])
    assert result.exit_code == 2


def test_invalid_options_are_usage_errors(tmp_path: Path) -> None:
    path = write_source(tmp_path, "a.rb", ["x = 1"])
    assert runner.invoke(app, ["--extension", "", str(path)]).exit_code == 2
    assert runner.invoke(app, ["--encoding", "no-such-codec", str(path)]).exit_code == 2


def test_multibyte_encoding_is_usage_error(tmp_path: Path) -> None:
    path = tmp_path / "wide.rb"
    path.write_bytes("x = 1\ny=2\n".encode("utf-16"))

    result = runner.invoke(app, ["--encoding", "utf-16", str(path)])

    assert result.exit_code == 2
    assert "[CRAMPED OPERATOR]" not in result.output
