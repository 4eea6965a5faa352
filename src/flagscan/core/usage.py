"""Pure usage-line and help-text rendering.

Nothing here prints; callers decide where the text goes.
"""

from __future__ import annotations

from collections.abc import Sequence

from flagscan.core.models import OptionSpec
from flagscan.core.registry import Specification

ARG_PLACEHOLDER = "<arg>"


def _bundle(options: Sequence[OptionSpec]) -> str:
    """Concatenate the short names of no-value options, e.g. ``abc``."""
    return "".join(o.short for o in options if not o.takes_value)


def _optional_usage(options: Sequence[OptionSpec]) -> list[str]:
    parts: list[str] = []
    bundled = _bundle(options)
    if bundled:
        parts.append(f"[-{bundled}]")
    parts.extend(f"[-{o.short} {ARG_PLACEHOLDER}]" for o in options if o.takes_value)
    return parts


def _required_usage(options: Sequence[OptionSpec]) -> list[str]:
    parts: list[str] = []
    bundled = _bundle(options)
    if bundled:
        parts.append(f"-{bundled}")
    parts.extend(f"-{o.short} {ARG_PLACEHOLDER}" for o in options if o.takes_value)
    return parts


def render_usage(program: str, spec: Specification) -> str:
    """Return the one-line usage summary.

    Optional options come first in brackets, then required options,
    then the end-of-options marker and the parameters::

        usage: prog [-ab] [-f <arg>] -r -o <arg> [--] <src> <dst>
    """
    parts = ["usage:", program]
    parts.extend(_optional_usage(spec.optional_options))
    parts.extend(_required_usage(spec.required_options))
    parts.append("[--]")
    parts.extend(f"<{p.name}>" for p in spec.parameters)
    return " ".join(parts)


def render_option_line(option: OptionSpec) -> str:
    names = f"-{option.short}, --{option.long}"
    if option.takes_value:
        names += f"={ARG_PLACEHOLDER}"
    return f"\t{names}\t\t{option.description}"


def render_help(program: str, spec: Specification) -> str:
    """Return the usage line followed by one line per parameter and option.

    Parameters are listed first, then required options, then optional
    options, each group in registration order.
    """
    lines = [render_usage(program, spec)]
    lines.extend(f"\t<{p.name}>\t\t{p.description}" for p in spec.parameters)
    lines.extend(render_option_line(o) for o in spec.required_options)
    lines.extend(render_option_line(o) for o in spec.optional_options)
    return "\n".join(lines) + "\n"
