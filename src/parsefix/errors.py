"""Exception hierarchy for parsefix."""

from __future__ import annotations


class ParsefixError(Exception):
    """Base class for all parsefix errors."""


class UndecodableIssueError(ParsefixError):
    """Raised when a diagnostic does not start with a location prefix."""

    def __init__(self, issue: str, reason: str = "no location prefix") -> None:
        self.issue = issue
        self.reason = reason
        super().__init__(f"Cannot decode issue ({reason}): {issue!r}")


class LineBufferError(ParsefixError):
    """Raised when an edit would break the line buffer invariants."""


class LineOutOfRangeError(LineBufferError, IndexError):
    """Raised when a line number does not address an existing line."""

    def __init__(self, line: int, line_count: int) -> None:
        self.line = line
        self.line_count = line_count
        super().__init__(f"Line {line} is out of range (file has {line_count} lines)")


class ColumnOutOfRangeError(LineBufferError, IndexError):
    """Raised when a column offset falls outside a line's content."""

    def __init__(self, line: int, column: int, length: int) -> None:
        self.line = line
        self.column = column
        self.length = length
        super().__init__(
            f"Column offset {column} is out of range on line {line} "
            f"(content length {length})"
        )


class RuleActionError(ParsefixError):
    """Raised when a matched rule cannot apply its edit to the buffer."""

    def __init__(self, rule_id: str, message: str) -> None:
        self.rule_id = rule_id
        super().__init__(f"{rule_id}: {message}")


class ParserUnavailableError(ParsefixError):
    """Raised when the external Go parser cannot be run."""
