"""Whitespace rules shared by code and comment lines."""

from __future__ import annotations

import re

from ruby_clean.rules.base import SourceLine

_TRAILING_WHITESPACE_RE = re.compile(r"\s+\Z")


class TrailingWhitespaceRule:
    """Whitespace left at the end of a line."""

    rule_id = "trailing_whitespace"
    name = "TRAILING WHITESPACE"
    applies_to = "any"

    def matches(self, line: SourceLine) -> bool:
        return _TRAILING_WHITESPACE_RE.search(line.content) is not None


class HardTabsRule:
    """Tab characters anywhere in the line."""

    rule_id = "hard_tabs"
    name = "HARD TABS"
    applies_to = "any"

    def matches(self, line: SourceLine) -> bool:
        return "\t" in line.text
