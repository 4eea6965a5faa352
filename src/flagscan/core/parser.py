"""High-level parser facade.

:class:`Parser` bundles a program name, a
:class:`~flagscan.core.registry.Specification` and
:class:`~flagscan.core.models.ParserSettings` behind the small API most
programs need::

    parser = Parser("cp")
    parser.option("r", "recursive", "copy directories recursively")
    parser.parameter("source", "file to copy")
    parser.parameter("target", "destination")
    result = parser.parse(sys.argv)
"""

from __future__ import annotations

from collections.abc import Sequence

from flagscan.core.models import OptionSpec, ParameterSpec, ParsedResult, ParserSettings
from flagscan.core.registry import Specification
from flagscan.core.scanner import parse
from flagscan.core.usage import render_help, render_usage


class Parser:
    """Declarative command-line parser.

    Parameters
    ----------
    program:
        Name shown in usage and help text.
    settings:
        Scanner behaviour; defaults to :class:`ParserSettings()`.
    """

    def __init__(self, program: str, settings: ParserSettings | None = None) -> None:
        self.program: str = program
        self.settings: ParserSettings = settings or ParserSettings()
        self.spec: Specification = Specification()

    # ------------------------------------------------------------------
    # Declaration
    # ------------------------------------------------------------------

    def option(
        self,
        short: str,
        long: str,
        description: str,
        required: bool = False,
        takes_value: bool = False,
    ) -> OptionSpec:
        """Declare an option.  See :meth:`Specification.register_option`."""
        return self.spec.register_option(short, long, description, required, takes_value)

    def parameter(self, name: str, description: str) -> ParameterSpec:
        """Declare the next positional parameter."""
        return self.spec.register_parameter(name, description)

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(self, raw_args: Sequence[str]) -> ParsedResult:
        """Parse a full argument vector (``raw_args[0]`` is skipped)."""
        return parse(self.spec, raw_args, self.settings)

    # ------------------------------------------------------------------
    # Help
    # ------------------------------------------------------------------

    def format_usage(self) -> str:
        return render_usage(self.program, self.spec)

    def format_help(self) -> str:
        return render_help(self.program, self.spec)
