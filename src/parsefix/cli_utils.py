"""CLI utility functions for parsefix.

Provides helper functions for:
- Exit codes: the public outcome contract of the command
- Error formatting: Consistent user-friendly messages on stderr
- Config wiring: Passing Typer CLI options to load_config
- Logging setup: Routing library logs through rich
"""

from __future__ import annotations

import logging
from typing import Any, NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler

from parsefix.config import ParsefixConfig, load_config

# Exit codes are part of the public interface
EXIT_FIXED_SOME = 0  # At least one issue fixed; output written
EXIT_FIXED_NONE = 1  # Issues present, none fixed; file untouched
EXIT_NOTHING_TO_FIX = 2  # No issues at all; file untouched
EXIT_ERROR = 3  # parsefix failed to run (I/O, config, parser)

err_console = Console(stderr=True)


# -----------------------------------------------------------------------------
# Error Formatting Helpers
# -----------------------------------------------------------------------------


def error(msg: str, *, exit_code: int = EXIT_ERROR) -> NoReturn:
    """Print an error message and exit with the given exit code.

    Args:
        msg: The error message to display.
        exit_code: Exit code to use (default: EXIT_ERROR=3).

    Raises:
        typer.Exit: Always raises to exit the program.
    """
    styled_prefix = typer.style("Error:", fg=typer.colors.RED, bold=True)
    typer.echo(f"{styled_prefix} {msg}", err=True)
    raise typer.Exit(code=exit_code)


def warning(msg: str) -> None:
    """Print a warning message to stderr."""
    styled_prefix = typer.style("Warning:", fg=typer.colors.YELLOW, bold=True)
    typer.echo(f"{styled_prefix} {msg}", err=True)


def success(msg: str) -> None:
    """Print a success message to stderr.

    Stdout is reserved for repaired source.
    """
    styled_prefix = typer.style("Success:", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"{styled_prefix} {msg}", err=True)


# -----------------------------------------------------------------------------
# Config Wiring Helper
# -----------------------------------------------------------------------------


def wire_config(
    parser_cmd: str | None = None,
    parser_timeout: float | None = None,
) -> ParsefixConfig:
    """Wire CLI options to load_config with appropriate overrides.

    Args:
        parser_cmd: Override for the parser command.
        parser_timeout: Override for the parser timeout.

    Returns:
        Fully resolved ParsefixConfig instance.

    Raises:
        typer.Exit: If configuration is invalid.
    """
    cli_overrides: dict[str, Any] = {}

    if parser_cmd is not None:
        cli_overrides["parser_cmd"] = parser_cmd
    if parser_timeout is not None:
        cli_overrides["parser_timeout"] = parser_timeout

    try:
        return load_config(cli_overrides=cli_overrides)
    except ValueError as e:
        error(f"Invalid configuration: {e}")


# -----------------------------------------------------------------------------
# Logging Setup
# -----------------------------------------------------------------------------


def setup_logging(verbose: bool = False) -> None:
    """Send parsefix logs to stderr through rich.

    Args:
        verbose: Log at DEBUG level instead of WARNING.
    """
    logger = logging.getLogger("parsefix")
    logger.handlers.clear()
    logger.addHandler(RichHandler(console=err_console, show_path=False))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
