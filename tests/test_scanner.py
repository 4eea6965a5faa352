"""Tests for the argument-vector scanner (core/scanner.py).

Every test is a pure function call against a freshly built parser.
These tests exercise:

* Short options — bundling, attached values, separate values
* Long options — bare, ``=value``, separate value
* Positional binding and the ``--`` end-of-options marker
* Required-option and required-parameter validation order
* Missing-value and surplus-positional policies
"""

from __future__ import annotations

import pytest

from flagscan.core.models import (
    ExtraPositionalPolicy,
    MissingValuePolicy,
    ParserSettings,
)
from flagscan.core.parser import Parser
from flagscan.core.registry import Specification
from flagscan.core.scanner import parse
from flagscan.exceptions import (
    MissingOptionError,
    MissingParameterError,
    MissingValueError,
    ParseError,
    UnexpectedParameterError,
    UnexpectedValueError,
    UnknownOptionError,
)


# ---------------------------------------------------------------------------
# Short options
# ---------------------------------------------------------------------------

class TestShortOptions:
    def test_bundled_and_attached(self, bundle_parser: Parser) -> None:
        result = bundle_parser.parse(
            ["test", "-abc", "-d", "-e", "-f", "arg", "-garg"],
        )
        for name in "abcde":
            assert result.has_option(name)
        assert result.get_option_value("f") == "arg"
        assert result.get_option_value("g") == "arg"

    def test_value_option_inside_bundle_consumes_rest(
        self, bundle_parser: Parser,
    ) -> None:
        result = bundle_parser.parse(["test", "-afbc"])
        assert result.has_option("a")
        assert result.get_option_value("f") == "bc"
        assert not result.has_option("b")
        assert not result.has_option("c")

    def test_value_option_last_in_bundle_takes_next_token(
        self, bundle_parser: Parser,
    ) -> None:
        result = bundle_parser.parse(["test", "-abf", "value"])
        assert result.has_option("a")
        assert result.has_option("b")
        assert result.get_option_value("f") == "value"

    def test_next_token_is_value_even_if_dashed(self, bundle_parser: Parser) -> None:
        result = bundle_parser.parse(["test", "-f", "-a"])
        assert result.get_option_value("f") == "-a"
        assert not result.has_option("a")

    def test_unknown_short_option(self, bundle_parser: Parser) -> None:
        with pytest.raises(UnknownOptionError, match="Unknown or duplicated option z!") as exc_info:
            bundle_parser.parse(["test", "-z"])
        assert exc_info.value.option == "z"

    def test_unknown_inside_bundle(self, bundle_parser: Parser) -> None:
        with pytest.raises(UnknownOptionError) as exc_info:
            bundle_parser.parse(["test", "-abz"])
        assert str(exc_info.value) == "Unknown or duplicated option z!"

    def test_bare_dash_is_positional(self) -> None:
        parser = Parser("test")
        parser.parameter("input", "input file")
        result = parser.parse(["test", "-"])
        assert result.get_parameter("input") == "-"

    def test_flag_is_not_a_value(self, bundle_parser: Parser) -> None:
        result = bundle_parser.parse(["test", "-a"])
        assert result.has_option("a")
        assert result.get_option_value("a") is None

    def test_repeated_value_option_keeps_last(self, bundle_parser: Parser) -> None:
        result = bundle_parser.parse(["test", "-fone", "-f", "two"])
        assert result.get_option_value("f") == "two"


# ---------------------------------------------------------------------------
# Long options
# ---------------------------------------------------------------------------

class TestLongOptions:
    @pytest.fixture()
    def parser(self) -> Parser:
        parser = Parser("test")
        parser.option("v", "verbose", "verbosity", takes_value=True)
        parser.option("q", "quiet", "no output")
        return parser

    def test_equals_form(self, parser: Parser) -> None:
        result = parser.parse(["test", "--verbose=3"])
        assert result.get_option_value("v") == "3"

    def test_split_on_first_equals(self, parser: Parser) -> None:
        result = parser.parse(["test", "--verbose=a=b"])
        assert result.get_option_value("v") == "a=b"

    def test_empty_value_after_equals(self, parser: Parser) -> None:
        result = parser.parse(["test", "--verbose="])
        assert result.has_option("v")
        assert result.get_option_value("v") == ""

    def test_separate_value(self, parser: Parser) -> None:
        result = parser.parse(["test", "--verbose", "2"])
        assert result.get_option_value("v") == "2"

    def test_flag(self, parser: Parser) -> None:
        result = parser.parse(["test", "--quiet"])
        assert result.has_option("q")
        assert result.get_option_value("q") is None

    def test_value_for_flag_rejected(self, parser: Parser) -> None:
        with pytest.raises(UnexpectedValueError) as exc_info:
            parser.parse(["test", "--quiet=yes"])
        assert str(exc_info.value) == "Option '--quiet' should have no arguments!"
        assert exc_info.value.value == "yes"

    @pytest.mark.parametrize("token", ["--nope", "--nope=1"])
    def test_unknown(self, parser: Parser, token: str) -> None:
        with pytest.raises(UnknownOptionError) as exc_info:
            parser.parse(["test", token])
        assert str(exc_info.value) == "Unknown option '--nope'!"

    def test_no_prefix_matching(self, parser: Parser) -> None:
        with pytest.raises(UnknownOptionError):
            parser.parse(["test", "--verb=1"])


# ---------------------------------------------------------------------------
# Positionals and end of options
# ---------------------------------------------------------------------------

class TestPositionals:
    def test_binding_order(self, positional_parser: Parser) -> None:
        result = positional_parser.parse(["test", "foo", "bar", "fooBar"])
        assert result.get_parameter("first") == "foo"
        assert result.get_parameter("second") == "bar"
        assert result.get_parameter("third") == "fooBar"

    def test_program_name_is_skipped(self) -> None:
        parser = Parser("test")
        parser.parameter("only", "only parameter")
        result = parser.parse(["-z", "value"])
        assert result.get_parameter("only") == "value"

    def test_interleaved_with_options(self, bundle_parser: Parser) -> None:
        bundle_parser.parameter("name", "a name")
        result = bundle_parser.parse(["test", "-a", "x", "-b"])
        assert result.get_parameter("name") == "x"
        assert result.has_option("b")

    def test_end_of_options_marker(self, bundle_parser: Parser) -> None:
        bundle_parser.parameter("one", "one")
        bundle_parser.parameter("two", "two")
        result = bundle_parser.parse(["test", "-a", "--", "-b", "--c"])
        assert result.has_option("a")
        assert not result.has_option("b")
        assert result.get_parameter("one") == "-b"
        assert result.get_parameter("two") == "--c"

    def test_second_marker_is_positional(self) -> None:
        parser = Parser("test")
        parser.parameter("one", "one")
        result = parser.parse(["test", "--", "--"])
        assert result.get_parameter("one") == "--"

    def test_marker_as_option_value(self, bundle_parser: Parser) -> None:
        bundle_parser.parameter("one", "one")
        result = bundle_parser.parse(["test", "-f", "--", "-a", "x"])
        assert result.get_option_value("f") == "--"
        assert result.has_option("a")
        assert result.get_parameter("one") == "x"

        result = bundle_parser.parse(["test", "-f", "--", "--", "-a"])
        assert result.get_option_value("f") == "--"
        assert not result.has_option("a")
        assert result.get_parameter("one") == "-a"

    def test_surplus_dropped_by_default(self, positional_parser: Parser) -> None:
        result = positional_parser.parse(["test", "1", "2", "3", "4"])
        assert result.get_parameter("third") == "3"
        assert dict(result.positionals) == {"first": "1", "second": "2", "third": "3"}

    def test_surplus_rejected_in_strict_mode(self) -> None:
        parser = Parser(
            "test",
            ParserSettings(extra_positionals=ExtraPositionalPolicy.STRICT),
        )
        parser.parameter("one", "one")
        with pytest.raises(UnexpectedParameterError) as exc_info:
            parser.parse(["test", "a", "b"])
        assert str(exc_info.value) == "Unexpected parameter 'b'!"
        assert exc_info.value.token == "b"

    def test_undeclared_parameter_lookup(self, positional_parser: Parser) -> None:
        result = positional_parser.parse(["test", "a", "b", "c"])
        assert result.get_parameter("fourth") is None


# ---------------------------------------------------------------------------
# Trailing value-taking option
# ---------------------------------------------------------------------------

class TestMissingValue:
    @pytest.mark.parametrize("token", ["-f", "--f", "-af"])
    def test_error_by_default(self, bundle_parser: Parser, token: str) -> None:
        with pytest.raises(MissingValueError) as exc_info:
            bundle_parser.parse(["test", token])
        assert str(exc_info.value) == "Option '--f' requires an argument!"

    def test_ignore_leaves_option_unbound(self) -> None:
        spec = Specification()
        spec.register_option("f", "file", "file", takes_value=True)
        spec.register_option("a", "all", "all")
        settings = ParserSettings(missing_value=MissingValuePolicy.IGNORE)

        result = parse(spec, ["test", "-a", "-f"], settings)
        assert result.has_option("a")
        assert not result.has_option("f")
        assert result.get_option_value("f") is None

    def test_ignored_required_option_still_missing(self) -> None:
        spec = Specification()
        spec.register_option("f", "file", "file", required=True, takes_value=True)
        settings = ParserSettings(missing_value=MissingValuePolicy.IGNORE)

        with pytest.raises(MissingOptionError, match="Option '--file' is required!"):
            parse(spec, ["test", "--file"], settings)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

class TestValidation:
    def test_missing_required_option(self) -> None:
        parser = Parser("test")
        parser.option("r", "required", "required option", required=True)
        with pytest.raises(MissingOptionError) as exc_info:
            parser.parse(["test", "foo", "bar", "fooBar"])
        assert str(exc_info.value) == "Option '--required' is required!"
        assert exc_info.value.option == "required"

    def test_missing_parameter(self, positional_parser: Parser) -> None:
        with pytest.raises(MissingParameterError) as exc_info:
            positional_parser.parse(["test", "foo", "bar"])
        assert str(exc_info.value) == "Parameter <third> is required!"
        assert exc_info.value.parameter == "third"

    def test_required_given_in_long_form(self) -> None:
        parser = Parser("test")
        parser.option("o", "output", "output", required=True, takes_value=True)
        result = parser.parse(["test", "--output=x"])
        assert result.get_option_value("o") == "x"

    def test_options_checked_before_parameters(self, positional_parser: Parser) -> None:
        positional_parser.option("r", "req", "req", required=True)
        with pytest.raises(MissingOptionError):
            positional_parser.parse(["test"])

    def test_first_missing_option_reported(self) -> None:
        parser = Parser("test")
        parser.option("x", "xray", "x", required=True)
        parser.option("y", "yankee", "y", required=True)
        with pytest.raises(MissingOptionError, match="--xray"):
            parser.parse(["test"])
        with pytest.raises(MissingOptionError, match="--yankee"):
            parser.parse(["test", "-x"])

    def test_first_missing_parameter_reported(self, positional_parser: Parser) -> None:
        with pytest.raises(MissingParameterError, match="<second>"):
            positional_parser.parse(["test", "foo"])

    def test_all_parse_errors_share_base(self, bundle_parser: Parser) -> None:
        with pytest.raises(ParseError):
            bundle_parser.parse(["test", "-z"])


# ---------------------------------------------------------------------------
# Purity
# ---------------------------------------------------------------------------

class TestPurity:
    def test_parsing_twice_gives_equal_results(self, bundle_parser: Parser) -> None:
        bundle_parser.parameter("name", "name")
        argv = ["test", "-ab", "--f=1", "-g", "2", "n"]
        first = bundle_parser.parse(argv)
        second = bundle_parser.parse(argv)
        assert first == second
        assert first is not second

    def test_earlier_parse_not_affected(self, bundle_parser: Parser) -> None:
        first = bundle_parser.parse(["test", "-a"])
        bundle_parser.parse(["test", "-b", "-fx"])
        assert first.has_option("a")
        assert not first.has_option("b")
        assert not first.has_option("f")

    def test_argv_not_mutated(self, bundle_parser: Parser) -> None:
        argv = ["test", "-abc", "-f", "x"]
        bundle_parser.parse(argv)
        assert argv == ["test", "-abc", "-f", "x"]

    def test_failed_parse_leaves_spec_usable(self, bundle_parser: Parser) -> None:
        with pytest.raises(UnknownOptionError):
            bundle_parser.parse(["test", "-a", "-z"])
        assert not bundle_parser.parse(["test"]).has_option("a")
