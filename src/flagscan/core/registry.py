"""Specification registry — the declared options and parameters.

A :class:`Specification` is filled through a sequence of
``register_*`` calls and is then only read: the scanner never mutates
it, so one instance can back any number of parses.
"""

from __future__ import annotations

import logging

from flagscan.core.models import OptionSpec, ParameterSpec
from flagscan.exceptions import (
    DuplicateOptionError,
    DuplicateParameterError,
    InvalidOptionError,
    InvalidParameterError,
)

_log = logging.getLogger(__name__)


class Specification:
    """Options keyed by short and long name, plus ordered parameters."""

    def __init__(self) -> None:
        self._by_short: dict[str, OptionSpec] = {}
        self._by_long: dict[str, OptionSpec] = {}
        self._parameters: list[ParameterSpec] = []

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_option(
        self,
        short: str,
        long: str,
        description: str,
        required: bool = False,
        takes_value: bool = False,
    ) -> OptionSpec:
        """Declare an option and return its :class:`OptionSpec`.

        Raises
        ------
        InvalidOptionError
            If *short* is not a single non-dash character, or *long* is
            empty, starts with a dash, or contains ``=`` or whitespace.
        DuplicateOptionError
            If *short* or *long* is already taken by another option.
        """
        self._validate_short(short)
        self._validate_long(long)

        if short in self._by_short:
            raise DuplicateOptionError(
                f"Option '-{short}' is already registered!",
                hint=f"It belongs to '--{self._by_short[short].long}'.",
            )
        if long in self._by_long:
            raise DuplicateOptionError(f"Option '--{long}' is already registered!")

        option = OptionSpec(
            short=short,
            long=long,
            description=description,
            takes_value=takes_value,
            required=required,
        )
        self._by_short[short] = option
        self._by_long[long] = option
        _log.debug("registered option %r", option)
        return option

    def register_parameter(self, name: str, description: str) -> ParameterSpec:
        """Declare the next positional parameter and return its spec.

        Raises
        ------
        InvalidParameterError
            If *name* is empty or contains whitespace.
        DuplicateParameterError
            If *name* is already declared.
        """
        if not name or any(ch.isspace() for ch in name):
            raise InvalidParameterError(f"Invalid parameter name {name!r}!")
        if any(p.name == name for p in self._parameters):
            raise DuplicateParameterError(f"Parameter <{name}> is already registered!")

        parameter = ParameterSpec(name=name, description=description)
        self._parameters.append(parameter)
        _log.debug("registered parameter %r at position %d", name, len(self._parameters) - 1)
        return parameter

    @staticmethod
    def _validate_short(short: str) -> None:
        if len(short) != 1 or short == "-" or short.isspace():
            raise InvalidOptionError(
                f"Invalid short option name {short!r}!",
                hint="Short names are exactly one character other than '-'.",
            )

    @staticmethod
    def _validate_long(long: str) -> None:
        if (
            not long
            or long.startswith("-")
            or "=" in long
            or any(ch.isspace() for ch in long)
        ):
            raise InvalidOptionError(
                f"Invalid long option name {long!r}!",
                hint="Long names are given without dashes and may not contain '=' or spaces.",
            )

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def lookup_by_short(self, short: str) -> OptionSpec | None:
        """Return the option whose short name is *short*, or ``None``."""
        return self._by_short.get(short)

    def lookup_by_long(self, long: str) -> OptionSpec | None:
        """Return the option whose long name is *long*, or ``None``."""
        return self._by_long.get(long)

    # ------------------------------------------------------------------
    # Read-only views (insertion order)
    # ------------------------------------------------------------------

    @property
    def required_options(self) -> tuple[OptionSpec, ...]:
        return tuple(o for o in self._by_short.values() if o.required)

    @property
    def optional_options(self) -> tuple[OptionSpec, ...]:
        return tuple(o for o in self._by_short.values() if not o.required)

    @property
    def options(self) -> tuple[OptionSpec, ...]:
        """All options, required ones first."""
        return self.required_options + self.optional_options

    @property
    def parameters(self) -> tuple[ParameterSpec, ...]:
        return tuple(self._parameters)
