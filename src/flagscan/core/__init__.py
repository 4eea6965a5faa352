"""Core layer — declarations, scanning, validation and help rendering.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O; logging only at DEBUG level.
* No imports from ``cli``.
* Parsing never mutates a :class:`Specification`.
"""

from flagscan.core.models import (
    ExtraPositionalPolicy,
    MissingValuePolicy,
    OptionSpec,
    ParameterSpec,
    ParsedResult,
    ParserSettings,
)
from flagscan.core.parser import Parser
from flagscan.core.registry import Specification
from flagscan.core.scanner import parse
from flagscan.core.usage import render_help, render_usage

__all__: list[str] = [
    "ExtraPositionalPolicy",
    "MissingValuePolicy",
    "OptionSpec",
    "ParameterSpec",
    "ParsedResult",
    "Parser",
    "ParserSettings",
    "Specification",
    "parse",
    "render_help",
    "render_usage",
]
