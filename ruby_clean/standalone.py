"""Dependency-light CLI for running without typer installed."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from ruby_clean import __version__
from ruby_clean.checker import PathFailure, check_paths
from ruby_clean.config import (
    DEFAULT_ENCODING,
    DEFAULT_EXTENSION,
    CheckerConfig,
    build_checker_config,
)
from ruby_clean.rules import list_rule_info
from ruby_clean.rules.base import Diagnostic


class CliUsageError(Exception):
    """Invalid CLI usage."""


def main(argv: list[str] | None = None) -> int:
    """Program entrypoint."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return 0

    try:
        return _run(args)
    except CliUsageError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


def _run(args: argparse.Namespace) -> int:
    config = _build_config_or_raise(args)

    if args.list_rules:
        print("Available rules:")
        for item in list_rule_info():
            print(f"- {item.rule_id} [{item.name}] ({item.applies_to}) - {item.description}")
        return 0

    if not args.paths:
        raise CliUsageError("provide at least one file or directory")

    exit_code = 0
    for event in check_paths(args.paths, config=config):
        if isinstance(event, Diagnostic):
            print(event.format())
            continue
        if isinstance(event, PathFailure):
            exit_code = 1
        print(event.format(), file=sys.stderr)
    return exit_code


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ruby-clean",
        description="Check Ruby sources for common style problems.",
    )
    parser.add_argument("paths", nargs="*", type=Path, help="Files or directories to check.")
    parser.add_argument("--version", action="store_true", help="Show version and exit.")
    parser.add_argument("--list-rules", action="store_true", help="List available rules.")
    parser.add_argument(
        "--extension",
        default=DEFAULT_EXTENSION,
        help="File extension matched when walking directories.",
    )
    parser.add_argument("--encoding", default=DEFAULT_ENCODING, help="Encoding used to decode lines.")
    return parser


def _build_config_or_raise(args: argparse.Namespace) -> CheckerConfig:
    try:
        return build_checker_config(extension=args.extension, encoding=args.encoding)
    except ValueError as exc:
        raise CliUsageError(str(exc)) from exc
