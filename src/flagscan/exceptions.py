"""Custom exception hierarchy for flagscan.

Every error the library raises inherits from :class:`FlagscanError`.
Mistakes made while *declaring* a command line surface as
:class:`SpecificationError`; problems with the *argument vector* being
scanned surface as :class:`ParseError`, which is what CLI error
boundaries are expected to catch and display.

Hierarchy
---------
FlagscanError
├── SpecificationError
│   ├── InvalidOptionError
│   ├── DuplicateOptionError
│   ├── InvalidParameterError
│   └── DuplicateParameterError
└── ParseError
    ├── UnknownOptionError
    ├── UnexpectedValueError
    ├── MissingValueError
    ├── MissingOptionError
    ├── MissingParameterError
    └── UnexpectedParameterError
"""

from __future__ import annotations


class FlagscanError(Exception):
    """Base exception for all flagscan errors.

    The message passed to the constructor is the exact user-facing text;
    ``str(exc)`` returns it unchanged.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Declaration errors ----------------------------------------------------

class SpecificationError(FlagscanError):
    """Raised when an option or parameter declaration is invalid."""


class InvalidOptionError(SpecificationError):
    """Raised when a short or long option name is malformed."""


class DuplicateOptionError(SpecificationError):
    """Raised when a short or long option name is registered twice."""


class InvalidParameterError(SpecificationError):
    """Raised when a positional parameter name is malformed."""


class DuplicateParameterError(SpecificationError):
    """Raised when a positional parameter name is registered twice."""


# --- Argument-vector errors ------------------------------------------------

class ParseError(FlagscanError):
    """Base class for errors found while scanning an argument vector."""


class UnknownOptionError(ParseError):
    """Raised when a token names an option that was never registered."""

    def __init__(self, message: str, *, option: str, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.option: str = option


class UnexpectedValueError(ParseError):
    """Raised when ``--name=value`` targets an option without a value."""

    def __init__(
        self, message: str, *, option: str, value: str, hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.option: str = option
        self.value: str = value


class MissingValueError(ParseError):
    """Raised when a value-taking option ends the argument vector."""

    def __init__(self, message: str, *, option: str, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.option: str = option


class MissingOptionError(ParseError):
    """Raised when a required option was not supplied."""

    def __init__(self, message: str, *, option: str, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.option: str = option


class MissingParameterError(ParseError):
    """Raised when a declared positional parameter was not supplied."""

    def __init__(self, message: str, *, parameter: str, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.parameter: str = parameter


class UnexpectedParameterError(ParseError):
    """Raised in strict mode for positionals beyond the declared ones."""

    def __init__(self, message: str, *, token: str, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.token: str = token
