"""Output rendering."""

from __future__ import annotations

import click

from ruby_clean.rules import RuleInfo
from ruby_clean.rules.base import Diagnostic, LineProblem


def render_diagnostic(diagnostic: Diagnostic) -> str:
    """Render `<path>:<line> [<RULE>] - <content>` with a highlighted rule label."""
    label = click.style(f"[{diagnostic.rule_name}]", fg="yellow", bold=True)
    return f"{diagnostic.path}:{diagnostic.line_number} {label} - {diagnostic.content}"


def render_problem(problem: LineProblem) -> str:
    label = click.style("[DECODE ERROR]", fg="red", bold=True)
    return f"{problem.path}:{problem.line_number} {label} - {problem.message}"


def render_rule_list(rules: list[RuleInfo]) -> str:
    """Render the rule registry, one rule per line."""
    lines = ["Available rules:"]
    for item in rules:
        name = click.style(f"[{item.name}]", bold=True)
        lines.append(f"- {item.rule_id} {name} ({item.applies_to}) - {item.description}")
    return "\n".join(lines)
