"""Shared pytest fixtures for the flagscan test suite.

Guidelines
----------
* Core tests are pure — no I/O, no mocking.
* CLI tests assert on captured stderr/stdout and exit codes.
"""

from __future__ import annotations

import pytest

from flagscan.core.parser import Parser


@pytest.fixture()
def bundle_parser() -> Parser:
    """No-value options ``a``–``e`` and value-taking options ``f``, ``g``."""
    parser = Parser("test")
    for name in "abcde":
        parser.option(name, name, name)
    parser.option("f", "f", "f", takes_value=True)
    parser.option("g", "g", "g", takes_value=True)
    return parser


@pytest.fixture()
def positional_parser() -> Parser:
    """Parameters ``first``, ``second``, ``third`` in that order."""
    parser = Parser("test")
    parser.parameter("first", "first parameter")
    parser.parameter("second", "second parameter")
    parser.parameter("third", "third parameter")
    return parser
