"""Argument-vector scanner and validator.

The scanner is a two-state machine:

* **Normal** — the next token is classified as the end-of-options
  marker, a long option, a bundle of short options, or a positional.
* **AwaitingValue(option)** — the previous token was a value-taking
  option with nothing attached, so the next token is its value, no
  matter what it looks like.

:func:`parse` feeds tokens one at a time through :func:`_step`, then
resolves a dangling ``AwaitingValue`` according to the settings and
finally validates required options and parameters.  All scan state is
local to one call; the :class:`~flagscan.core.registry.Specification`
is only read.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from flagscan.core.models import (
    ExtraPositionalPolicy,
    MissingValuePolicy,
    OptionSpec,
    ParsedResult,
    ParserSettings,
)
from flagscan.core.registry import Specification
from flagscan.exceptions import (
    MissingOptionError,
    MissingParameterError,
    MissingValueError,
    UnexpectedParameterError,
    UnexpectedValueError,
    UnknownOptionError,
)

_log = logging.getLogger(__name__)

END_OF_OPTIONS = "--"


# ---------------------------------------------------------------------------
# Scan state
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class _Bindings:
    """Mutable accumulator, private to a single :func:`parse` call."""

    flags: set[str] = field(default_factory=set)
    valued_flags: dict[str, str] = field(default_factory=dict)
    positionals: dict[str, str] = field(default_factory=dict)

    def bind_value(self, option: OptionSpec, value: str) -> None:
        self.valued_flags[option.short] = value

    def bind_flag(self, option: OptionSpec) -> None:
        self.flags.add(option.short)

    def freeze(self) -> ParsedResult:
        return ParsedResult(
            flags=frozenset(self.flags),
            valued_flags=self.valued_flags,
            positionals=self.positionals,
        )


@dataclass(frozen=True, slots=True)
class _State:
    """Position of the machine between two tokens.

    ``awaiting`` is ``None`` in the Normal state and holds the option
    whose value is due in the AwaitingValue state.
    """

    awaiting: OptionSpec | None = None
    end_of_options: bool = False
    next_positional: int = 0


# ---------------------------------------------------------------------------
# Token handlers
# ---------------------------------------------------------------------------

def _scan_long(
    spec: Specification, token: str, state: _State, bindings: _Bindings,
) -> _State:
    """Handle ``--name`` and ``--name=value``."""
    body = token[2:]
    name, sep, value = body.partition("=")

    option = spec.lookup_by_long(name)
    if option is None:
        raise UnknownOptionError(f"Unknown option '--{name}'!", option=name)

    if sep:
        if not option.takes_value:
            raise UnexpectedValueError(
                f"Option '--{name}' should have no arguments!",
                option=name,
                value=value,
            )
        bindings.bind_value(option, value)
        return state

    if option.takes_value:
        return replace(state, awaiting=option)

    bindings.bind_flag(option)
    return state


def _scan_short(
    spec: Specification, token: str, state: _State, bindings: _Bindings,
) -> _State:
    """Handle a bundle such as ``-abc`` or ``-farg``."""
    for i in range(1, len(token)):
        char = token[i]
        option = spec.lookup_by_short(char)
        if option is None:
            raise UnknownOptionError(
                f"Unknown or duplicated option {char}!",
                option=char,
            )

        if not option.takes_value:
            bindings.bind_flag(option)
            continue

        rest = token[i + 1:]
        if rest:
            bindings.bind_value(option, rest)
            return state
        return replace(state, awaiting=option)

    return state


def _scan_positional(
    spec: Specification,
    token: str,
    state: _State,
    bindings: _Bindings,
    settings: ParserSettings,
) -> _State:
    parameters = spec.parameters
    if state.next_positional < len(parameters):
        parameter = parameters[state.next_positional]
        bindings.positionals[parameter.name] = token
        return replace(state, next_positional=state.next_positional + 1)

    if settings.extra_positionals is ExtraPositionalPolicy.STRICT:
        raise UnexpectedParameterError(f"Unexpected parameter '{token}'!", token=token)

    _log.debug("dropping surplus positional %r", token)
    return state


def _step(
    spec: Specification,
    token: str,
    state: _State,
    bindings: _Bindings,
    settings: ParserSettings,
) -> _State:
    """Consume one token and return the next machine state."""
    if state.awaiting is not None:
        bindings.bind_value(state.awaiting, token)
        return replace(state, awaiting=None)

    if state.end_of_options:
        return _scan_positional(spec, token, state, bindings, settings)

    if token == END_OF_OPTIONS:
        return replace(state, end_of_options=True)

    if token.startswith("--"):
        return _scan_long(spec, token, state, bindings)

    if token.startswith("-") and len(token) > 1:
        return _scan_short(spec, token, state, bindings)

    return _scan_positional(spec, token, state, bindings, settings)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def _validate(spec: Specification, bindings: _Bindings) -> None:
    """Fail on the first missing required option, then parameter."""
    for option in spec.required_options:
        if option.short not in bindings.flags and option.short not in bindings.valued_flags:
            raise MissingOptionError(
                f"Option '--{option.long}' is required!",
                option=option.long,
            )

    for parameter in spec.parameters:
        if parameter.name not in bindings.positionals:
            raise MissingParameterError(
                f"Parameter <{parameter.name}> is required!",
                parameter=parameter.name,
            )


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def parse(
    spec: Specification,
    raw_args: Sequence[str],
    settings: ParserSettings | None = None,
) -> ParsedResult:
    """Scan *raw_args* against *spec* and return the bound values.

    ``raw_args[0]`` is taken to be the program name and is skipped.

    Raises
    ------
    UnknownOptionError
        A token names an unregistered option.
    UnexpectedValueError
        ``--name=value`` was given for an option that takes no value.
    MissingValueError
        A value-taking option ended the vector and
        ``settings.missing_value`` is ``ERROR``.
    UnexpectedParameterError
        A surplus positional was given and ``settings.extra_positionals``
        is ``STRICT``.
    MissingOptionError
        A required option is absent.
    MissingParameterError
        A declared parameter is absent.
    """
    settings = settings or ParserSettings()
    bindings = _Bindings()
    state = _State()

    for token in raw_args[1:]:
        state = _step(spec, token, state, bindings, settings)

    if state.awaiting is not None:
        option = state.awaiting
        if settings.missing_value is MissingValuePolicy.ERROR:
            raise MissingValueError(
                f"Option '--{option.long}' requires an argument!",
                option=option.long,
            )
        _log.debug("option %r left unbound at end of input", option.long)

    _validate(spec, bindings)
    return bindings.freeze()
