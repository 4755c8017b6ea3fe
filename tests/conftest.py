"""Pytest configuration and fixtures for parsefix tests."""

from __future__ import annotations

import os

import pytest

# Set a fixed terminal width to prevent line wrapping issues in CI
# This must be set before any Rich imports
os.environ.setdefault("COLUMNS", "200")
os.environ.setdefault("LINES", "50")
# Disable Rich's terminal detection to ensure consistent output
os.environ.setdefault("TERM", "dumb")

BROKEN_MAIN = (
    b"package main\n"
    b"\n"
    b"func main() \n"
    b"{\n"
    b'\tfmt.Println("a" "b")\n'
    b"}\n"
)


@pytest.fixture
def broken_main() -> bytes:
    """Source with a misplaced brace (line 4) and a missing comma (line 5)."""
    return BROKEN_MAIN
