"""Tabular rendering of a :class:`~flagscan.core.models.ParsedResult`.

Used by the demo program to show what a command line parsed into.
Renders a Rich table when Rich is installed, else aligned plain text.
"""

from __future__ import annotations

import sys

from flagscan.cli.console import console, escape, rich_available
from flagscan.core.models import ParsedResult
from flagscan.core.parser import Parser


# ---------------------------------------------------------------------------
# Row collection
# ---------------------------------------------------------------------------

def collect_rows(parser: Parser, result: ParsedResult) -> list[tuple[str, str, str]]:
    """Return ``(name, kind, value)`` rows in declaration order.

    Parameters come first, then every declared option; absent options
    are included with the value ``"-"`` so the table mirrors the help text.
    """
    rows: list[tuple[str, str, str]] = []
    for parameter in parser.spec.parameters:
        rows.append(
            (f"<{parameter.name}>", "parameter", result.get_parameter(parameter.name) or ""),
        )

    for option in parser.spec.options:
        label = f"-{option.short}, --{option.long}"
        if not result.has_option(option.short):
            value = "-"
        elif option.takes_value:
            value = result.get_option_value(option.short) or ""
        else:
            value = "set"
        kind = "required" if option.required else "optional"
        rows.append((label, kind, value))
    return rows


def _print_plain_table(title: str, rows: list[tuple[str, str, str]]) -> None:
    """Render rows without Rich."""
    print(f"\n{title}", file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print(f"{'Name':<24} {'Kind':<10} {'Value':<24}", file=sys.stderr)
    print("-" * 60, file=sys.stderr)
    for name, kind, value in rows:
        print(f"{name:<24} {kind:<10} {value:<24}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def render_result_table(parser: Parser, result: ParsedResult) -> None:
    """Print the parsed result for *parser* as a table on stderr."""
    rows = collect_rows(parser, result)
    title = f"{parser.program} arguments"

    if not rich_available():
        _print_plain_table(title, rows)
        return

    from rich.table import Table

    table = Table(
        title=title,
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Name", style="bold", min_width=12)
    table.add_column("Kind", min_width=9)
    table.add_column("Value", min_width=12)

    for name, kind, value in rows:
        style = "dim" if value == "-" else None
        table.add_row(escape(name), escape(kind), escape(value), style=style)

    console.print()
    console.print(table)
    console.print()
