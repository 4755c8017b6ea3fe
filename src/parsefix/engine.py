"""Repair engine: applies fixer rules to every reported diagnostic.

Usage:
    from parsefix.engine import repair

    fixed = repair(code, "main.go", issues)
    if fixed is not None:
        Path("main.go").write_bytes(fixed)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal

from parsefix.errors import LineBufferError, RuleActionError, UndecodableIssueError
from parsefix.fixers.base import RepairContext
from parsefix.fixers.registry import FixerTable, get_default_table
from parsefix.issues import decode_issue
from parsefix.source import LineBuffer

logger = logging.getLogger(__name__)

IssueStatus = Literal["fixed", "failed", "unmatched", "undecodable", "foreign"]


@dataclass
class IssueOutcome:
    """What happened to a single diagnostic.

    Attributes:
        issue: The raw diagnostic text.
        status: One of "fixed", "failed", "unmatched", "undecodable", "foreign".
        rule_id: Id of the rule that matched, if any.
        message: Human-readable detail, e.g. why an action failed.
    """

    issue: str
    status: IssueStatus
    rule_id: str | None = None
    message: str = ""


@dataclass
class RepairReport:
    """Result of one repair pass over a file.

    Attributes:
        filename: File the diagnostics were filtered against.
        outcomes: One entry per input diagnostic, in input order.
        output: Repaired file contents, or None if nothing was fixed.
    """

    filename: str
    outcomes: list[IssueOutcome] = field(default_factory=list)
    output: bytes | None = None

    @property
    def fixed_anything(self) -> bool:
        return self.output is not None

    @property
    def fixed(self) -> list[IssueOutcome]:
        return [o for o in self.outcomes if o.status == "fixed"]

    @property
    def failures(self) -> list[IssueOutcome]:
        return [o for o in self.outcomes if o.status == "failed"]


class RepairEngine:
    """Drives the per-diagnostic repair loop.

    Every diagnostic is considered independently: a skipped, unmatched or
    failed one never stops the rest of the pass. Locations are decoded from
    the diagnostic text rather than from the buffer, and edits never move
    text across lines, so fixes on different lines do not disturb each other.
    Two column-shifting fixes on the same line may.

    Attributes:
        table: Rules to try, in priority order.
    """

    def __init__(self, table: FixerTable | None = None) -> None:
        self.table = table if table is not None else get_default_table()

    def repair(self, code: bytes, filename: str, issues: list[str]) -> bytes | None:
        """Repair code and return the new contents, or None if nothing was fixed."""
        return self.run(code, filename, issues).output

    def run(self, code: bytes, filename: str, issues: list[str]) -> RepairReport:
        """Repair code, reporting the outcome of every diagnostic.

        Args:
            code: Contents of the file being repaired.
            filename: Name diagnostics must carry to be considered.
            issues: Diagnostics in "file:line:col: message" form.

        Returns:
            RepairReport with per-issue outcomes and the repaired bytes.
        """
        buffer = LineBuffer(code)
        report = RepairReport(filename=filename)

        # Some parse errors produce several diagnostics that a single edit
        # resolves, so fixing fewer issues than reported is still a success.
        for issue in issues:
            outcome = self._repair_issue(buffer, filename, issue)
            report.outcomes.append(outcome)

        if report.fixed:
            report.output = buffer.to_bytes()
        logger.debug(
            "Repair pass over %s: %d of %d issues fixed",
            filename,
            len(report.fixed),
            len(issues),
        )
        return report

    def _repair_issue(self, buffer: LineBuffer, filename: str, issue: str) -> IssueOutcome:
        try:
            location = decode_issue(issue)
        except UndecodableIssueError as e:
            logger.debug("Skipping issue: %s", e)
            return IssueOutcome(issue, "undecodable", message=e.reason)

        if location.file != filename:
            logger.debug("Skipping issue for %s: %s", location.file, issue)
            return IssueOutcome(issue, "foreign", message=f"reported for {location.file}")

        ctx = RepairContext(issue=issue, location=location, buffer=buffer)
        found = self.table.find(ctx)
        if found is None:
            logger.debug("No rule matches: %s", issue)
            return IssueOutcome(issue, "unmatched")

        rule, match = found
        try:
            rule.apply(ctx, match)
        except (RuleActionError, LineBufferError) as e:
            logger.warning("Rule %s failed on %s: %s", rule.rule_id, issue, e)
            return IssueOutcome(issue, "failed", rule_id=rule.rule_id, message=str(e))

        logger.info("Applied %s at %s:%d", rule.rule_id, location.file, location.line)
        return IssueOutcome(issue, "fixed", rule_id=rule.rule_id)


def repair(
    code: bytes,
    filename: str,
    issues: list[str],
    table: FixerTable | None = None,
) -> bytes | None:
    """Repair code using the given (or default) fixer table.

    Args:
        code: Contents of the file being repaired.
        filename: Name diagnostics must carry to be considered.
        issues: Diagnostics in "file:line:col: message" form.
        table: Rules to use. Defaults to the built-in table.

    Returns:
        The repaired contents, or None if no issue was fixed.
    """
    return RepairEngine(table).repair(code, filename, issues)
