"""Keyword-level rules evaluated on literal-stripped code lines."""

from __future__ import annotations

import re

from ruby_clean.rules.base import SourceLine


def _word(token: str) -> str:
    return rf"(?<=\s){token}(?!\S)"


_VERBAL_OPERATOR_RE = re.compile(_word("(?:and|or)"))
_FOR_RE = re.compile(_word("for"))
_IF_RE = re.compile(_word("if"))
_THEN_RE = re.compile(_word("then"))
_BOOLEAN_OR_ASSIGN_RE = re.compile(r"\|\|=\s*(?:true|false)")
_EMPTY_PARENS_DEF_RE = re.compile(r"\bdef\s.*\(\s*\)")
_CLASS_VARIABLE_RE = re.compile(r"(?<=\s)@@")
_BARE_EXCEPTION_RE = re.compile(r"\brescue\s+Exception(?!\S)")


class VerbalOperatorsRule:
    """`and` / `or` used instead of `&&` / `||`."""

    rule_id = "verbal_operators"
    name = "VERBAL OPERATORS"
    applies_to = "code"

    def matches(self, line: SourceLine) -> bool:
        return _VERBAL_OPERATOR_RE.search(line.stripped) is not None


class BooleanOrAssignRule:
    """`||=` used to initialize a boolean, which breaks for a stored `false`."""

    rule_id = "boolean_or_assign"
    name = "||= INITIALIZING BOOLEAN"
    applies_to = "code"

    def matches(self, line: SourceLine) -> bool:
        return _BOOLEAN_OR_ASSIGN_RE.search(line.stripped) is not None


class ForUsedRule:
    """`for` loop instead of an iterator."""

    rule_id = "for_used"
    name = "FOR USED"
    applies_to = "code"

    def matches(self, line: SourceLine) -> bool:
        return _FOR_RE.search(line.stripped) is not None


class MethodDefEmptyParensRule:
    """Method defined without arguments but with `()`."""

    rule_id = "method_def_empty_parens"
    name = "METHOD DEF W/ EMPTY PARENS"
    applies_to = "code"

    def matches(self, line: SourceLine) -> bool:
        return _EMPTY_PARENS_DEF_RE.search(line.stripped) is not None


class SuperfluousThenRule:
    """`then` on a line that already has an `if`."""

    rule_id = "superfluous_then"
    name = "SUPERFLUOUS THEN"
    applies_to = "code"

    def matches(self, line: SourceLine) -> bool:
        return (
            _IF_RE.search(line.stripped) is not None
            and _THEN_RE.search(line.stripped) is not None
        )


class ClassVariableRule:
    """`@@` class variable access."""

    rule_id = "class_variable"
    name = "CLASS VARIABLE USED"
    applies_to = "code"

    def matches(self, line: SourceLine) -> bool:
        return _CLASS_VARIABLE_RE.search(line.stripped) is not None


class BareExceptionRescuedRule:
    """`rescue Exception` instead of a specific error class."""

    rule_id = "bare_exception_rescued"
    name = "BARE EXCEPTION RESCUED"
    applies_to = "code"

    def matches(self, line: SourceLine) -> bool:
        return _BARE_EXCEPTION_RE.search(line.stripped) is not None
