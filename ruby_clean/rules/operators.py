"""Operator spacing rules."""

from __future__ import annotations

import re

from ruby_clean.rules.base import SourceLine

_CRAMPED_OPERATOR_RE = re.compile(r"\S[=+\-*%]\S")
_CRAMPED_COMPARATOR_RE = re.compile(r"\S(?:<=>|===|==|!=|<=|>=|<|>)\S")


def has_cramped_comparator(text: str) -> bool:
    """Return whether a comparator such as `a<=b` has no surrounding spaces."""
    return _CRAMPED_COMPARATOR_RE.search(text) is not None


def has_cramped_operator(text: str) -> bool:
    """Return whether an `= + - * %` operator is cramped and no comparator is."""
    # `a<=b` and `a!=b` contain a cramped `=`; the comparator rule owns them.
    if has_cramped_comparator(text):
        return False
    return _CRAMPED_OPERATOR_RE.search(text) is not None


class CrampedOperatorRule:
    """Arithmetic or assignment operator without surrounding spaces.

    Division is not checked, slashes are indistinguishable from regex
    delimiters on a single line.
    """

    rule_id = "cramped_operator"
    name = "CRAMPED OPERATOR"
    applies_to = "code"

    def matches(self, line: SourceLine) -> bool:
        return has_cramped_operator(line.stripped)


class CrampedComparatorRule:
    """Comparator without surrounding spaces, e.g. `a<=b`."""

    rule_id = "cramped_comparator"
    name = "CRAMPED COMPARATOR"
    applies_to = "code"

    def matches(self, line: SourceLine) -> bool:
        return has_cramped_comparator(line.stripped)
