"""CLI entrypoint for ruby-clean."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ruby_clean import __version__
from ruby_clean.checker import PathFailure, check_paths
from ruby_clean.config import (
    DEFAULT_ENCODING,
    DEFAULT_EXTENSION,
    CheckerConfig,
    build_checker_config,
)
from ruby_clean.output import render_diagnostic, render_problem, render_rule_list
from ruby_clean.rules import list_rule_info
from ruby_clean.rules.base import Diagnostic

app = typer.Typer(
    name="ruby-clean",
    add_completion=False,
    help="Check Ruby sources for common style problems.",
)


def version_callback(value: bool) -> None:
    """Print version and exit when --version is provided."""
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.command(no_args_is_help=True)
def check_command(
    paths: Annotated[
        list[Path] | None,
        typer.Argument(help="Files or directories to check.", show_default=False),
    ] = None,
    extension: Annotated[
        str, typer.Option(help="File extension matched when walking directories.")
    ] = DEFAULT_EXTENSION,
    encoding: Annotated[str, typer.Option(help="Encoding used to decode lines.")] = DEFAULT_ENCODING,
    color: Annotated[
        bool | None,
        typer.Option("--color/--no-color", help="Force or disable colored rule labels."),
    ] = None,
    list_rules: Annotated[
        bool, typer.Option("--list-rules", help="List available rules and exit.")
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version", help="Show version and exit.", callback=version_callback, is_eager=True
        ),
    ] = False,
) -> None:
    """Check Ruby files and directories, printing one line per style problem."""
    _ = version
    config = _build_config_or_raise(extension=extension, encoding=encoding, color=color)

    if list_rules:
        typer.echo(render_rule_list(list_rule_info()), color=config.color)
        return

    if not paths:
        raise typer.BadParameter("Provide at least one file or directory.", param_hint="PATHS")

    failed = False
    for event in check_paths(paths, config=config):
        if isinstance(event, Diagnostic):
            typer.echo(render_diagnostic(event), color=config.color)
        elif isinstance(event, PathFailure):
            failed = True
            typer.echo(event.format(), err=True)
        else:
            typer.echo(render_problem(event), err=True, color=config.color)

    if failed:
        raise typer.Exit(code=1)


def main() -> None:
    """Console script entrypoint."""
    app()


def _build_config_or_raise(
    *, extension: str, encoding: str, color: bool | None
) -> CheckerConfig:
    try:
        return build_checker_config(extension=extension, encoding=encoding, color=color)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
