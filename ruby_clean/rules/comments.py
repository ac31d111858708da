"""Comment-line rule."""

from __future__ import annotations

import re

from ruby_clean.rules.base import SourceLine

# `puts`/`pp` as words, or any of = { } +
_CODE_HINT_RE = re.compile(r"(?<=\s)(?:puts|pp)(?!\S)|[={}+]")


class CommentedCodeRule:
    """Comment lines that look like disabled code."""

    rule_id = "commented_code"
    name = "POSSIBLE COMMENTED CODE"
    applies_to = "comment"

    def matches(self, line: SourceLine) -> bool:
        return _CODE_HINT_RE.search(line.text) is not None
