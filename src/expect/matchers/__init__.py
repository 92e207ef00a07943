"""Matchers to pass to ``Expectation.to`` and ``Expectation.not_to``."""

from expect.matchers.collection import be_empty, contain
from expect.matchers.equality import equal
from expect.matchers.error import raise_error
from expect.matchers.option import be_none, be_some
from expect.matchers.path import be_a_directory, be_a_file, exist
from expect.matchers.string import contain_str, end_with, match_regex, start_with

__all__ = [
    "be_a_directory",
    "be_a_file",
    "be_empty",
    "be_none",
    "be_some",
    "contain",
    "contain_str",
    "end_with",
    "equal",
    "exist",
    "match_regex",
    "raise_error",
    "start_with",
]
