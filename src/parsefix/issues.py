"""Decoding of parser diagnostics into source locations.

Diagnostics follow the Go toolchain format::

    path/file.go:12:5: expected ';', found 'x'
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from parsefix.errors import UndecodableIssueError

# Anchored at the start of every diagnostic; captures file, line and column.
ISSUE_PREFIX_RE = re.compile(r"(.*):([0-9]+):([0-9]+): ")


@dataclass(frozen=True)
class Location:
    """Decoded diagnostic position.

    Attributes:
        file: File name exactly as the diagnostic spells it.
        line: 1-based line number.
        column: 0-based byte offset into the line content.
    """

    file: str
    line: int
    column: int


def decode_issue(issue: str) -> Location:
    """Decode the location prefix of a diagnostic.

    The column is shifted down by one so it can index into line content;
    the line number stays 1-based.

    Args:
        issue: Raw diagnostic text.

    Returns:
        The decoded Location.

    Raises:
        UndecodableIssueError: If the prefix is missing or names line or
            column zero.
    """
    m = ISSUE_PREFIX_RE.match(issue)
    if m is None:
        raise UndecodableIssueError(issue)

    line = int(m.group(2))
    column = int(m.group(3))
    if line < 1:
        raise UndecodableIssueError(issue, "line number must be positive")
    if column < 1:
        raise UndecodableIssueError(issue, "column number must be positive")

    return Location(file=m.group(1), line=line, column=column - 1)


def try_decode_issue(issue: str) -> Location | None:
    """Like decode_issue, but returns None for undecodable diagnostics."""
    try:
        return decode_issue(issue)
    except UndecodableIssueError:
        return None


def message_of(issue: str) -> str:
    """Return the diagnostic text that follows the location prefix."""
    m = ISSUE_PREFIX_RE.match(issue)
    if m is None:
        return issue
    return issue[m.end() :]
