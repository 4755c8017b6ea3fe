"""parsefix CLI tool - Main entry point."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from parsefix import __version__
from parsefix.cli_utils import (
    EXIT_FIXED_NONE,
    EXIT_FIXED_SOME,
    EXIT_NOTHING_TO_FIX,
    err_console,
    error,
    setup_logging,
    success,
    warning,
    wire_config,
)
from parsefix.engine import RepairEngine, RepairReport
from parsefix.errors import ParserUnavailableError
from parsefix.parser import collect_parse_errors

app = typer.Typer(
    name="parsefix",
    help="Fix Go source files that fail to parse, using the parser's own diagnostics.",
    add_completion=False,
)

STATUS_STYLES = {
    "fixed": "green",
    "failed": "red",
    "unmatched": "yellow",
    "undecodable": "dim",
    "foreign": "dim",
}


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"parsefix version {__version__}")
        raise typer.Exit()


def _print_report(report: RepairReport) -> None:
    """Print per-issue outcomes as a table on stderr."""
    table = Table(title=f"Repair report: {report.filename}")
    table.add_column("Status", no_wrap=True)
    table.add_column("Rule", no_wrap=True)
    table.add_column("Issue")
    table.add_column("Detail")
    for outcome in report.outcomes:
        style = STATUS_STYLES.get(outcome.status, "")
        table.add_row(
            f"[{style}]{outcome.status}[/{style}]",
            outcome.rule_id or "-",
            escape(outcome.issue),
            escape(outcome.message),
        )
    err_console.print(table)


@app.command()
def main(
    issues: list[str] | None = typer.Argument(
        None,
        help='Parse errors to fix, e.g. "main.go:3:10: missing \',\' in argument list". '
        "Collected with the Go parser when omitted.",
    ),
    filename: str = typer.Option(
        ...,
        "--file",
        "-f",
        help="Full file name of the file being fixed.",
    ),
    inplace: bool = typer.Option(
        False,
        "--inplace",
        "-i",
        help="Write updated contents to --file instead of stdout.",
    ),
    parser_cmd: str | None = typer.Option(
        None,
        "--parser",
        help="Go formatter used to collect parse errors (default: gofmt).",
        envvar="PARSEFIX_PARSER_CMD",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Log every decision and print a per-issue report to stderr.",
    ),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Repair parse errors in a Go source file.

    Exit codes: 0 some issues fixed, 1 issues present but none fixed,
    2 nothing to fix, 3 error. The file is only overwritten with --inplace
    and only when something was fixed.
    """
    setup_logging(verbose)
    config = wire_config(parser_cmd=parser_cmd)
    path = Path(filename)

    try:
        code = path.read_bytes()
    except OSError as e:
        error(f"read file: {e}")

    if not issues:
        try:
            issues = collect_parse_errors(filename, code, config)
        except ParserUnavailableError as e:
            error(str(e))
        if not issues:
            if verbose:
                success(f"{filename} parses, nothing to fix")
            raise typer.Exit(code=EXIT_NOTHING_TO_FIX)

    report = RepairEngine().run(code, filename, issues)
    if verbose:
        _print_report(report)

    if report.output is None:
        warning(f"none of {len(issues)} issues in {filename} could be fixed")
        raise typer.Exit(code=EXIT_FIXED_NONE)

    if inplace:
        try:
            path.write_bytes(report.output)
        except OSError as e:
            error(f"write inplace: {e}")
        if verbose:
            success(f"fixed {len(report.fixed)} of {len(issues)} issues in {filename}")
    else:
        typer.echo(report.output, nl=False)

    raise typer.Exit(code=EXIT_FIXED_SOME)


if __name__ == "__main__":
    app()
