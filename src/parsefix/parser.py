"""Collect parse errors from the Go toolchain.

Runs ``gofmt -e`` on the source and returns its diagnostics in the
"file:line:col: message" form the repair engine consumes.
"""

from __future__ import annotations

import subprocess

from parsefix.config import ParsefixConfig
from parsefix.errors import ParserUnavailableError

# gofmt reports source read from stdin under this name.
STDIN_NAME = "<standard input>"


def collect_parse_errors(
    filename: str,
    code: bytes,
    config: ParsefixConfig | None = None,
) -> list[str]:
    """Parse code and return one diagnostic per parse error.

    Args:
        filename: Name to report the diagnostics under.
        code: Source to parse.
        config: Parser settings. Defaults to ParsefixConfig().

    Returns:
        Diagnostics in input order, or an empty list if the code parses.

    Raises:
        ParserUnavailableError: If the parser cannot be run or times out.
    """
    config = config or ParsefixConfig()
    try:
        result = subprocess.run(
            [config.parser_cmd, "-e"],
            input=code,
            capture_output=True,
            timeout=config.parser_timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        raise ParserUnavailableError(
            f"{config.parser_cmd} timed out after {config.parser_timeout}s"
        ) from e
    except OSError as e:
        raise ParserUnavailableError(f"Cannot run {config.parser_cmd}: {e}") from e

    if result.returncode == 0:
        return []

    stderr = result.stderr.decode("utf-8", errors="replace")
    return [_rename(line, filename) for line in stderr.splitlines() if line.strip()]


def _rename(line: str, filename: str) -> str:
    """Replace the stdin placeholder with the real file name."""
    if line.startswith(STDIN_NAME + ":"):
        return filename + line[len(STDIN_NAME) :]
    return line
