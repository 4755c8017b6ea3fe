"""Fixer table: the ordered catalogue of repair rules.

The table is immutable once built. Order is priority: for every issue the
first rule whose predicate accepts it is the one that runs.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from parsefix.fixers.base import BaseRule, RepairContext, RuleMatch
from parsefix.fixers.rules import (
    BlankCaptureRule,
    FuncOpenBraceRule,
    MissingByteRule,
    ReplaceRule,
)


class FixerTable:
    """Immutable, ordered collection of rules.

    Example:
        >>> table = FixerTable([FuncOpenBraceRule(), MissingByteRule(
        ...     "missing-colon", "expected ':', found newline", b":")])
        >>> table.rule_ids()
        ['func-open-brace', 'missing-colon']
    """

    def __init__(self, rules: Iterable[BaseRule]) -> None:
        """Build a table from rules in priority order.

        Args:
            rules: Rules, highest priority first.

        Raises:
            ValueError: If a rule has no rule_id or two rules share one.
        """
        ordered = tuple(rules)
        seen: set[str] = set()
        for rule in ordered:
            if not rule.rule_id:
                raise ValueError(f"Rule {type(rule).__name__} has no rule_id defined")
            if rule.rule_id in seen:
                raise ValueError(f"Rule with rule_id '{rule.rule_id}' already registered")
            seen.add(rule.rule_id)
        self._rules: tuple[BaseRule, ...] = ordered

    def __iter__(self) -> Iterator[BaseRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def rule_ids(self) -> list[str]:
        """List rule ids in priority order."""
        return [rule.rule_id for rule in self._rules]

    def get(self, rule_id: str) -> BaseRule | None:
        """Look up a rule by id."""
        for rule in self._rules:
            if rule.rule_id == rule_id:
                return rule
        return None

    def find(self, ctx: RepairContext) -> tuple[BaseRule, RuleMatch] | None:
        """Find the first rule that accepts the issue.

        Args:
            ctx: Context of the issue.

        Returns:
            The winning rule and its match, or None if no rule applies.
        """
        for rule in self._rules:
            match = rule.match(ctx)
            if match is not None:
                return rule, match
        return None


# Global table instance - built lazily on first use
_default_table: FixerTable | None = None


def get_default_table() -> FixerTable:
    """Get the built-in fixer table.

    Returns:
        The shared default FixerTable instance.
    """
    global _default_table
    if _default_table is None:
        _default_table = create_default_table()
    return _default_table


def create_default_table() -> FixerTable:
    """Create a fresh table holding the built-in rules.

    Returns:
        A FixerTable with every known diagnostic template, in priority order.
    """
    return FixerTable(
        [
            FuncOpenBraceRule(),
            MissingByteRule(
                "missing-comma-before-newline",
                "missing ',' before newline in composite literal",
                b",",
            ),
            MissingByteRule(
                "missing-comma-composite-literal",
                "missing ',' in composite literal",
                b",",
            ),
            MissingByteRule(
                "missing-comma-argument-list",
                "missing ',' in argument list",
                b",",
            ),
            MissingByteRule(
                "missing-comma-parameter-list",
                "missing ',' in parameter list",
                b",",
            ),
            MissingByteRule("missing-colon", "expected ':', found newline", b":"),
            MissingByteRule("missing-semicolon", "expected ';', found ", b";"),
            BlankCaptureRule("illegal-character", r"illegal character U\+[0-9A-F]+ '(.)'"),
            BlankCaptureRule("unexpected-statement", r"expected statement, found '(.*)'"),
            ReplaceRule(
                "range-assignment",
                "expected boolean or range expression, found assignment",
                b":= ",
                b":= range ",
            ),
        ]
    )
