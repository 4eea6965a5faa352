"""flagscan — POSIX/GNU-style command-line argument parsing.

Declare options and positional parameters once, then scan an argument
vector into a read-only, queryable result.
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
from flagscan.exceptions import FlagscanError, ParseError, SpecificationError
from flagscan.version import __version__

__all__: list[str] = [
    "ExtraPositionalPolicy",
    "FlagscanError",
    "MissingValuePolicy",
    "OptionSpec",
    "ParameterSpec",
    "ParseError",
    "ParsedResult",
    "Parser",
    "ParserSettings",
    "Specification",
    "SpecificationError",
    "__version__",
    "parse",
]
