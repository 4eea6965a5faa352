"""Domain models for flagscan.

Declarations (:class:`OptionSpec`, :class:`ParameterSpec`), parser
configuration (:class:`ParserSettings`) and the scan output
(:class:`ParsedResult`) are all **frozen** dataclasses: immutable value
objects that can be shared freely between parses.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class OptionSpec:
    """One recognised flag."""

    short: str
    """Single-character name, used as ``-x`` and as the result key."""

    long: str
    """Word name, used as ``--name`` and ``--name=value``."""

    description: str
    """Free text shown in help output."""

    takes_value: bool = False
    """Whether the flag consumes a value."""

    required: bool = False
    """Whether the flag must be present for a parse to succeed."""


@dataclass(frozen=True, slots=True)
class ParameterSpec:
    """One positional parameter slot.  Every declared slot is required."""

    name: str
    """Lookup key in the result and label in error/help text."""

    description: str
    """Free text shown in help output."""


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

class MissingValuePolicy(enum.Enum):
    """What to do when a value-taking option is the last token."""

    ERROR = "error"
    """Fail with :class:`~flagscan.exceptions.MissingValueError`."""

    IGNORE = "ignore"
    """Leave the option unbound, as if it had not been given."""


class ExtraPositionalPolicy(enum.Enum):
    """What to do with positionals beyond the declared parameters."""

    LENIENT = "lenient"
    """Silently drop them."""

    STRICT = "strict"
    """Fail with :class:`~flagscan.exceptions.UnexpectedParameterError`."""


@dataclass(frozen=True, slots=True)
class ParserSettings:
    """Behavioural switches for the scanner."""

    missing_value: MissingValuePolicy = MissingValuePolicy.ERROR
    extra_positionals: ExtraPositionalPolicy = ExtraPositionalPolicy.LENIENT


# ---------------------------------------------------------------------------
# Scan output
# ---------------------------------------------------------------------------

def _frozen_mapping(data: Mapping[str, str] | None = None) -> Mapping[str, str]:
    return MappingProxyType(dict(data or {}))


@dataclass(frozen=True, slots=True)
class ParsedResult:
    """Outcome of one successful parse.

    Options are keyed by their short name even when they were given in
    long form.
    """

    flags: frozenset[str] = frozenset()
    """Short names of present options that take no value."""

    valued_flags: Mapping[str, str] = field(default_factory=_frozen_mapping)
    """Short name → supplied value, for present value-taking options."""

    positionals: Mapping[str, str] = field(default_factory=_frozen_mapping)
    """Parameter name → supplied value."""

    def __post_init__(self) -> None:
        # Detach from whatever mutable containers the caller handed in.
        object.__setattr__(self, "flags", frozenset(self.flags))
        object.__setattr__(self, "valued_flags", _frozen_mapping(self.valued_flags))
        object.__setattr__(self, "positionals", _frozen_mapping(self.positionals))

    def __hash__(self) -> int:
        return hash(
            (
                self.flags,
                frozenset(self.valued_flags.items()),
                frozenset(self.positionals.items()),
            )
        )

    def has_option(self, short: str) -> bool:
        """Return ``True`` if *short* was given, with or without a value."""
        return short in self.flags or short in self.valued_flags

    def get_option_value(self, short: str) -> str | None:
        """Return the value bound to *short*, or ``None``.

        ``None`` is also returned for options present as bare flags.
        """
        return self.valued_flags.get(short)

    def get_parameter(self, name: str) -> str | None:
        """Return the value bound to parameter *name*, or ``None``."""
        return self.positionals.get(name)
