"""CLI error boundary and the ``flagscan-demo`` program.

:func:`parse_or_exit` is the helper real programs use: it turns a
:class:`~flagscan.exceptions.ParseError` into a message, the usage
line, and a :data:`~flagscan.cli.exit_codes.USAGE_ERROR` exit.

The rest of the module is a small self-describing program that parses
its own command line and shows the result, which is handy for trying
out tokenizing rules from a shell::

    python -m flagscan -vo out.txt --level=3 src dst
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from flagscan.cli import exit_codes
from flagscan.cli.console import configure_logging, console, escape
from flagscan.core.models import ParsedResult
from flagscan.core.parser import Parser
from flagscan.exceptions import FlagscanError, ParseError
from flagscan.version import __version__


# ---------------------------------------------------------------------------
# Error boundary for parsing
# ---------------------------------------------------------------------------

def _print_error(exc: FlagscanError) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(exc)}")
    if exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")


def report_parse_error(parser: Parser, exc: ParseError) -> None:
    """Show *exc*, its hint if any, and the usage line on stderr."""
    _print_error(exc)
    console.print(escape(parser.format_usage()))


def parse_or_exit(parser: Parser, argv: Sequence[str] | None = None) -> ParsedResult:
    """Parse *argv* (default ``sys.argv``) or exit with ``USAGE_ERROR``.

    *argv* is a full vector: its first element is the program name.
    """
    raw_args = list(sys.argv if argv is None else argv)
    try:
        return parser.parse(raw_args)
    except ParseError as exc:
        report_parse_error(parser, exc)
        sys.exit(exit_codes.USAGE_ERROR)


# ---------------------------------------------------------------------------
# Demo program
# ---------------------------------------------------------------------------

def build_demo_parser() -> Parser:
    """Construct the parser used by ``flagscan-demo``."""
    parser = Parser("flagscan-demo")
    parser.option("v", "verbose", "print more detail")
    parser.option("q", "quiet", "print less detail")
    parser.option("d", "debug", "log scanner decisions to stderr")
    parser.option("o", "output", "write the report to <arg>", takes_value=True)
    parser.option("l", "level", "verbosity level", takes_value=True)
    parser.parameter("source", "first positional value")
    parser.parameter("target", "second positional value")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the demo program.

    Parameters
    ----------
    argv:
        Arguments *after* the program name.  When ``None`` (default),
        ``sys.argv[1:]`` is used.

    Returns
    -------
    int
        OS process exit code.
    """
    args = sys.argv[1:] if argv is None else argv
    parser = build_demo_parser()

    if not args or args in (["-h"], ["--help"]):
        print(parser.format_help(), end="")
        return exit_codes.SUCCESS

    if args == ["--version"]:
        print(f"flagscan-demo {__version__}")
        return exit_codes.SUCCESS

    raw_args = [parser.program, *args]
    try:
        result = parser.parse(raw_args)
        if result.has_option("d"):
            # Parsing is pure, so replaying it with logging on is safe.
            configure_logging()
            result = parser.parse(raw_args)
    except ParseError as exc:
        report_parse_error(parser, exc)
        return exit_codes.USAGE_ERROR

    from flagscan.cli.report import render_result_table

    render_result_table(parser, result)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except FlagscanError as exc:
        _print_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
