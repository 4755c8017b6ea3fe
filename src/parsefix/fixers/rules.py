"""Concrete repair rules.

Each class covers a family of diagnostics; the default table instantiates
them once per message template.
"""

from __future__ import annotations

import re

from parsefix.errors import RuleActionError
from parsefix.fixers.base import BaseRule, RepairContext, RuleMatch


class MissingByteRule(BaseRule):
    """Insert a separator or terminator byte at the reported column.

    Handles diagnostics such as ``missing ',' in argument list`` or
    ``expected ';', found 'x'``. The rule declines when the byte is already
    in place, so a second pass over the same diagnostics is a no-op.
    """

    def __init__(self, rule_id: str, pattern: str, byte: bytes) -> None:
        self.rule_id = rule_id
        self.pattern = pattern
        self.byte = byte

    def match(self, ctx: RepairContext) -> RuleMatch | None:
        if self.pattern not in ctx.issue:
            return None
        if ctx.byte_at_column() == self.byte:
            return None
        return RuleMatch(ctx.location)

    def apply(self, ctx: RepairContext, match: RuleMatch) -> None:
        ctx.insert_byte(self.byte)


class BlankCaptureRule(BaseRule):
    """Overwrite the offending text quoted in the message with spaces.

    One space is written per byte, so columns of later diagnostics on the
    same line stay valid. Only text starting at the diagnostic column is
    touched.
    """

    def __init__(self, rule_id: str, pattern: str) -> None:
        self.rule_id = rule_id
        self.regex = re.compile(pattern)

    def _encode(self, text: str) -> bytes:
        # Undecodable argv bytes reach us as lone surrogates.
        try:
            return text.encode("utf-8", errors="surrogateescape")
        except UnicodeEncodeError as e:
            raise RuleActionError(self.rule_id, f"cannot encode {text!r}") from e

    def match(self, ctx: RepairContext) -> RuleMatch | None:
        m = self.regex.search(ctx.issue)
        if m is None:
            return None
        match = RuleMatch(ctx.location, m.groups())
        try:
            captured = self._encode(m.group(1))
        except RuleActionError:
            # Reported as a failure by apply().
            return match
        if ctx.text_at_column(len(captured)) != captured:
            return None
        return match

    def apply(self, ctx: RepairContext, match: RuleMatch) -> None:
        captured = self._encode(match.groups[0])
        if not captured:
            raise RuleActionError(self.rule_id, "diagnostic captured no text")
        if ctx.text_at_column(len(captured)) != captured:
            raise RuleActionError(
                self.rule_id,
                f"{captured!r} not found at column {match.location.column + 1}"
                f" on line {match.location.line}",
            )
        ctx.replace_at_column(captured, b" " * len(captured))


class ReplaceRule(BaseRule):
    """Rewrite a fixed piece of text on the reported line."""

    def __init__(self, rule_id: str, pattern: str, old: bytes, new: bytes) -> None:
        self.rule_id = rule_id
        self.pattern = pattern
        self.old = old
        self.new = new

    def match(self, ctx: RepairContext) -> RuleMatch | None:
        if self.pattern not in ctx.issue:
            return None
        # Already rewritten lines would otherwise grow on every pass.
        if not ctx.contains(self.old) or ctx.contains(self.new):
            return None
        return RuleMatch(ctx.location)

    def apply(self, ctx: RepairContext, match: RuleMatch) -> None:
        if not ctx.replace(self.old, self.new):
            raise RuleActionError(
                self.rule_id, f"{self.old!r} not found on line {match.location.line}"
            )


class FuncOpenBraceRule(BaseRule):
    """Move a function body's opening brace up to the signature line.

    Go inserts a semicolon after ``func foo()`` when the brace sits on the
    next line, and the parser then reports the lone brace as an unexpected
    declaration.
    """

    pattern = "expected declaration, found '{'"

    def __init__(self, rule_id: str = "func-open-brace", keyword: bytes = b"func ") -> None:
        self.rule_id = rule_id
        self.keyword = keyword

    def match(self, ctx: RepairContext) -> RuleMatch | None:
        if self.pattern not in ctx.issue:
            return None
        if ctx.byte_at_column() != b"{":
            return None
        if not ctx.prev_line_contains(self.keyword):
            return None
        return RuleMatch(ctx.location)

    def apply(self, ctx: RepairContext, match: RuleMatch) -> None:
        if ctx.byte_at_column() != b"{":
            raise RuleActionError(
                self.rule_id,
                f"no opening brace at column {match.location.column + 1}"
                f" on line {match.location.line}",
            )
        ctx.append_to_prev_line(b"{")
        ctx.replace_at_column(b"{", b"")
