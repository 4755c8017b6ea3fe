"""parsefix - best-effort repair of Go source files that fail to parse."""

from __future__ import annotations

from parsefix.engine import IssueOutcome, RepairEngine, RepairReport, repair
from parsefix.fixers import FixerTable, get_default_table
from parsefix.issues import Location, decode_issue
from parsefix.source import LineBuffer

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "FixerTable",
    "IssueOutcome",
    "LineBuffer",
    "Location",
    "RepairEngine",
    "RepairReport",
    "decode_issue",
    "get_default_table",
    "repair",
]
