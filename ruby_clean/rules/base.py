"""Base rule protocol and line/diagnostic models."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Literal, Protocol

LineKind = Literal["any", "code", "comment"]

_COMMENT_LINE_RE = re.compile(r"^\s*#")
_LITERAL_PATTERNS = (
    (re.compile(r"'.*?'"), "'...'"),
    (re.compile(r'".*?"'), '"..."'),
    (re.compile(r"/.*?/"), "/.../"),
)


def strip_literals(text: str) -> str:
    """Mask the contents of quoted strings and slash-delimited regexes.

    Each delimiter kind is replaced shortest-match first, in order: single
    quotes, double quotes, slashes. Later passes see the output of earlier
    ones.
    """
    for pattern, placeholder in _LITERAL_PATTERNS:
        text = pattern.sub(placeholder, text)
    return text


def is_comment_line(text: str) -> bool:
    """Return whether the first non-whitespace character is ``#``."""
    return _COMMENT_LINE_RE.match(text) is not None


def chomp(text: str) -> str:
    """Drop a single trailing line terminator (``\\r\\n``, ``\\n`` or ``\\r``)."""
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith(("\n", "\r")):
        return text[:-1]
    return text


@dataclass(frozen=True, slots=True)
class SourceLine:
    """One physical line of a source file."""

    path: str
    number: int
    text: str
    content: str = field(init=False)
    stripped: str = field(init=False)
    is_comment: bool = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "content", chomp(self.text))
        object.__setattr__(self, "stripped", strip_literals(self.text))
        object.__setattr__(self, "is_comment", is_comment_line(self.text))


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single style violation reported by a rule."""

    path: str
    line_number: int
    content: str
    rule_id: str
    rule_name: str

    def format(self) -> str:
        return f"{self.path}:{self.line_number} [{self.rule_name}] - {self.content}"


@dataclass(frozen=True, slots=True)
class LineProblem:
    """A line that could not be checked."""

    path: str
    line_number: int
    message: str

    def format(self) -> str:
        return f"{self.path}:{self.line_number} [DECODE ERROR] - {self.message}"


class Rule(Protocol):
    """Protocol for single-line style rules."""

    rule_id: str
    name: str
    applies_to: LineKind

    def matches(self, line: SourceLine) -> bool:
        """Return whether the rule fires on the given line."""
