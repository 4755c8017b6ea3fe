"""Fixer framework for repairing Go parse errors.

Provides the rule interface, the built-in rules and the ordered table the
repair engine scans for every diagnostic.
"""

from __future__ import annotations

from parsefix.fixers.base import BaseRule, RepairContext, RuleMatch
from parsefix.fixers.registry import (
    FixerTable,
    create_default_table,
    get_default_table,
)
from parsefix.fixers.rules import (
    BlankCaptureRule,
    FuncOpenBraceRule,
    MissingByteRule,
    ReplaceRule,
)

__all__ = [
    # Base types
    "BaseRule",
    "RepairContext",
    "RuleMatch",
    # Table
    "FixerTable",
    "create_default_table",
    "get_default_table",
    # Rules
    "BlankCaptureRule",
    "FuncOpenBraceRule",
    "MissingByteRule",
    "ReplaceRule",
]
