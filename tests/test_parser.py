"""Tests for parsefix.parser module."""

from __future__ import annotations

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from parsefix.config import ParsefixConfig
from parsefix.errors import ParserUnavailableError
from parsefix.parser import collect_parse_errors


class TestCollectParseErrors:
    """Tests for collect_parse_errors function."""

    @patch("parsefix.parser.subprocess.run")
    def test_clean_source(self, mock_run: MagicMock) -> None:
        """Test that a zero exit status means no issues."""
        mock_run.return_value = MagicMock(returncode=0, stdout=b"package p\n", stderr=b"")

        assert collect_parse_errors("main.go", b"package p\n") == []

    @patch("parsefix.parser.subprocess.run")
    def test_diagnostics_renamed(self, mock_run: MagicMock) -> None:
        """Test that stdin diagnostics are reported under the real name."""
        mock_run.return_value = MagicMock(
            returncode=2,
            stdout=b"",
            stderr=(
                b"<standard input>:4:1: expected declaration, found '{'\n"
                b"<standard input>:5:18: missing ',' in argument list\n"
            ),
        )

        issues = collect_parse_errors("cmd/main.go", b"...")

        assert issues == [
            "cmd/main.go:4:1: expected declaration, found '{'",
            "cmd/main.go:5:18: missing ',' in argument list",
        ]

    @patch("parsefix.parser.subprocess.run")
    def test_other_lines_kept(self, mock_run: MagicMock) -> None:
        """Test that non-diagnostic output passes through unchanged."""
        mock_run.return_value = MagicMock(
            returncode=2,
            stdout=b"",
            stderr=b"\n  \nsomething odd happened\n",
        )

        assert collect_parse_errors("main.go", b"") == ["something odd happened"]

    @patch("parsefix.parser.subprocess.run")
    def test_runs_configured_command(self, mock_run: MagicMock) -> None:
        """Test that source goes to the configured parser on stdin."""
        mock_run.return_value = MagicMock(returncode=0, stdout=b"", stderr=b"")
        config = ParsefixConfig(parser_cmd="/opt/go/bin/gofmt", parser_timeout=5)

        collect_parse_errors("main.go", b"package p\n", config)

        args, kwargs = mock_run.call_args
        assert args[0] == ["/opt/go/bin/gofmt", "-e"]
        assert kwargs["input"] == b"package p\n"
        assert kwargs["timeout"] == 5.0

    @patch("parsefix.parser.subprocess.run")
    def test_missing_parser(self, mock_run: MagicMock) -> None:
        """Test that a missing executable raises ParserUnavailableError."""
        mock_run.side_effect = FileNotFoundError("gofmt")

        with pytest.raises(ParserUnavailableError, match="Cannot run gofmt"):
            collect_parse_errors("main.go", b"")

    @patch("parsefix.parser.subprocess.run")
    def test_timeout(self, mock_run: MagicMock) -> None:
        """Test that a hung parser raises ParserUnavailableError."""
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="gofmt", timeout=30.0)

        with pytest.raises(ParserUnavailableError, match="timed out"):
            collect_parse_errors("main.go", b"")
