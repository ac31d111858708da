"""Line classification and per-file checking."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from ruby_clean.config import CheckerConfig
from ruby_clean.rules import default_rules
from ruby_clean.rules.base import Diagnostic, LineProblem, Rule, SourceLine
from ruby_clean.walker import (
    SourceReadError,
    WalkError,
    iter_source_files,
    read_source_lines,
    split_physical_lines,
)


@dataclass(frozen=True, slots=True)
class PathFailure:
    """A command-line path that could not be walked or read."""

    path: str
    message: str

    def format(self) -> str:
        return f"error: {self.message}"


CheckEvent = Diagnostic | LineProblem | PathFailure


def check_line(line: SourceLine, rules: list[Rule] | None = None) -> list[Diagnostic]:
    """Return every rule violation on a single line, in rule order."""
    active_rules = rules if rules is not None else default_rules()
    kind = "comment" if line.is_comment else "code"
    diagnostics: list[Diagnostic] = []
    for rule in active_rules:
        if rule.applies_to not in ("any", kind):
            continue
        if rule.matches(line):
            diagnostics.append(
                Diagnostic(
                    path=line.path,
                    line_number=line.number,
                    content=line.content,
                    rule_id=rule.rule_id,
                    rule_name=rule.name,
                )
            )
    return diagnostics


def check_text(
    text: str, path: str = "<string>", rules: list[Rule] | None = None
) -> list[Diagnostic]:
    """Check an in-memory source string."""
    active_rules = rules if rules is not None else default_rules()
    diagnostics: list[Diagnostic] = []
    for number, raw in enumerate(split_physical_lines(text), start=1):
        diagnostics.extend(check_line(SourceLine(path, number, raw), active_rules))
    return diagnostics


def check_file(
    path: Path, *, encoding: str = "utf-8", rules: list[Rule] | None = None
) -> Iterator[Diagnostic | LineProblem]:
    """Check a file line by line; undecodable lines are reported and skipped."""
    active_rules = rules if rules is not None else default_rules()
    for item in read_source_lines(path, encoding=encoding):
        if isinstance(item, LineProblem):
            yield item
            continue
        yield from check_line(item, active_rules)


def check_paths(paths: Iterable[Path], *, config: CheckerConfig) -> Iterator[CheckEvent]:
    """Check every file reachable from the given paths.

    A failing path is reported as a PathFailure and the remaining paths are
    still processed.
    """
    rules = default_rules()
    for root in paths:
        try:
            files = list(iter_source_files(root, extension=config.extension))
        except WalkError as exc:
            yield PathFailure(path=str(root), message=str(exc))
            continue

        for file_path in files:
            try:
                yield from check_file(file_path, encoding=config.encoding, rules=rules)
            except SourceReadError as exc:
                yield PathFailure(path=str(file_path), message=str(exc))
