"""Base classes for parse error fixers.

Provides the per-issue repair context and the abstract rule interface that
every catalogue entry implements.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from parsefix.issues import Location
from parsefix.source import LineBuffer


@dataclass(frozen=True)
class RuleMatch:
    """Result of a successful rule predicate.

    Attributes:
        location: Where the diagnostic points.
        groups: Text captured from the diagnostic message, if any.
    """

    location: Location
    groups: tuple[str, ...] = field(default_factory=tuple)


@dataclass
class RepairContext:
    """Everything a rule may look at or touch while handling one issue.

    Only line-scoped operations are exposed: "this line" is the line the
    diagnostic reports and "the previous line" is the one right above it.

    Attributes:
        issue: Raw diagnostic text.
        location: Decoded location of the diagnostic.
        buffer: The file being repaired, shared across issues.
    """

    issue: str
    location: Location
    buffer: LineBuffer

    @property
    def line(self) -> int:
        """1-based number of the reported line."""
        return self.location.line

    @property
    def column(self) -> int:
        """0-based byte offset the diagnostic points at."""
        return self.location.column

    @property
    def has_prev_line(self) -> bool:
        """Whether a line exists above the reported one."""
        return self.location.line > 1

    def contains(self, sub: bytes) -> bool:
        """Check whether this line contains sub.

        Returns False when the reported line does not exist.
        """
        if self.location.line > len(self.buffer):
            return False
        return self.buffer.contains(self.location.line, sub)

    def prev_line_contains(self, sub: bytes) -> bool:
        """Check whether the previous line contains sub."""
        if not self.has_prev_line or self.location.line - 1 > len(self.buffer):
            return False
        return self.buffer.contains(self.location.line - 1, sub)

    def byte_at_column(self) -> bytes | None:
        """Return the byte the diagnostic column points at, if any."""
        if self.location.line > len(self.buffer):
            return None
        return self.buffer.byte_at(self.location.line, self.location.column)

    def text_at_column(self, length: int) -> bytes:
        """Return up to length bytes starting at the diagnostic column."""
        if self.location.line > len(self.buffer):
            return b""
        return self.buffer.text_at(self.location.line, self.location.column, length)

    def insert_byte(self, byte: bytes) -> None:
        self.buffer.insert_byte(self.location.line, self.location.column, byte)

    def replace(self, old: bytes, new: bytes) -> bool:
        return self.buffer.replace_first(self.location.line, old, new)

    def replace_at_column(self, old: bytes, new: bytes) -> None:
        """Replace old, which must start at the diagnostic column, with new."""
        self.buffer.replace_at(self.location.line, self.location.column, old, new)

    def append_to_prev_line(self, byte: bytes) -> None:
        """Append a byte to the end of the previous line's content."""
        prev = self.location.line - 1
        self.buffer.insert_byte(prev, self.buffer.content_length(prev), byte)


class BaseRule(ABC):
    """Abstract base class for catalogue rules.

    A rule recognizes one diagnostic message template and performs exactly
    one edit. Rules hold no per-issue state: whatever the predicate learns
    is handed to the action through the returned RuleMatch.

    Attributes:
        rule_id: Unique identifier of the rule within a table.
    """

    rule_id: str = ""

    @abstractmethod
    def match(self, ctx: RepairContext) -> RuleMatch | None:
        """Decide whether this rule handles the issue.

        Predicates must not modify the buffer.

        Args:
            ctx: Context of the issue being considered.

        Returns:
            A RuleMatch if the rule applies, None otherwise.
        """

    @abstractmethod
    def apply(self, ctx: RepairContext, match: RuleMatch) -> None:
        """Edit the buffer to repair the issue.

        Implementations check their assumptions before mutating, so a
        failed action leaves the buffer untouched.

        Args:
            ctx: Context of the issue being repaired.
            match: The value returned by match().

        Raises:
            RuleActionError: If the edit cannot be applied.
            LineBufferError: If the location is outside the buffer.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rule_id!r})"
