"""Block-layout rules.

Both rules look at one line only. A brace opened on one line and closed on
another is reported on each of those lines; balance is never tracked across
lines.
"""

from __future__ import annotations

import re

from ruby_clean.rules.base import SourceLine

_DO_END_RE = re.compile(r"(?<=\s)do(?!\S).*(?<=\s)end(?!\S)")


class SameLineDoEndRule:
    """`do ... end` block written on a single line."""

    rule_id = "same_line_do_end"
    name = "SAME-LINE DO...END"
    applies_to = "code"

    def matches(self, line: SourceLine) -> bool:
        return _DO_END_RE.search(line.stripped) is not None


class MultiLineBracesRule:
    """A lone `{` or `}`, i.e. a brace block spanning lines."""

    rule_id = "multi_line_braces"
    name = "MULTI-LINE {..}"
    applies_to = "code"

    def matches(self, line: SourceLine) -> bool:
        return ("{" in line.stripped) != ("}" in line.stripped)
