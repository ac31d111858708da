"""Rules package."""

from dataclasses import dataclass

from ruby_clean.rules.base import Rule
from ruby_clean.rules.blocks import MultiLineBracesRule, SameLineDoEndRule
from ruby_clean.rules.comments import CommentedCodeRule
from ruby_clean.rules.keywords import (
    BareExceptionRescuedRule,
    BooleanOrAssignRule,
    ClassVariableRule,
    ForUsedRule,
    MethodDefEmptyParensRule,
    SuperfluousThenRule,
    VerbalOperatorsRule,
)
from ruby_clean.rules.operators import CrampedComparatorRule, CrampedOperatorRule
from ruby_clean.rules.whitespace import HardTabsRule, TrailingWhitespaceRule

# Evaluation order is output order for diagnostics on the same line.
RULE_CLASSES: tuple[type[Rule], ...] = (
    TrailingWhitespaceRule,
    HardTabsRule,
    VerbalOperatorsRule,
    SameLineDoEndRule,
    MultiLineBracesRule,
    BooleanOrAssignRule,
    ForUsedRule,
    MethodDefEmptyParensRule,
    SuperfluousThenRule,
    ClassVariableRule,
    BareExceptionRescuedRule,
    CrampedOperatorRule,
    CrampedComparatorRule,
    CommentedCodeRule,
)


@dataclass(frozen=True, slots=True)
class RuleInfo:
    """Rule metadata for listing."""

    rule_id: str
    name: str
    description: str
    applies_to: str


def default_rules() -> list[Rule]:
    """Return the fixed rule set in evaluation order."""
    return [rule_cls() for rule_cls in RULE_CLASSES]


def list_rule_info() -> list[RuleInfo]:
    """Return metadata for all rules in evaluation order."""
    info: list[RuleInfo] = []
    for rule_cls in RULE_CLASSES:
        info.append(
            RuleInfo(
                rule_id=rule_cls.rule_id,
                name=rule_cls.name,
                description=_first_line(rule_cls.__doc__ or ""),
                applies_to=rule_cls.applies_to,
            )
        )
    return info


def _first_line(doc: str) -> str:
    stripped = doc.strip()
    return stripped.splitlines()[0] if stripped else ""
