"""Readable test assertions: ``expect(subject).to(matcher)``."""

from expect.collection import Collection, as_collection
from expect.config import ExpectConfig, configure, load_config
from expect.errors import ExpectError, ExpectationFailed, ExpectationReused
from expect.expectation import Expectation, expect
from expect.matcher import Match, Matched, Matcher, NotMatched, SelfDescribingMatcher
from expect.matchers import (
    be_a_directory,
    be_a_file,
    be_empty,
    be_none,
    be_some,
    contain,
    contain_str,
    end_with,
    equal,
    exist,
    match_regex,
    raise_error,
    start_with,
)

__all__ = [
    "Collection",
    "ExpectConfig",
    "ExpectError",
    "Expectation",
    "ExpectationFailed",
    "ExpectationReused",
    "Match",
    "Matched",
    "Matcher",
    "NotMatched",
    "SelfDescribingMatcher",
    "as_collection",
    "be_a_directory",
    "be_a_file",
    "be_empty",
    "be_none",
    "be_some",
    "configure",
    "contain",
    "contain_str",
    "end_with",
    "equal",
    "exist",
    "expect",
    "load_config",
    "match_regex",
    "raise_error",
    "start_with",
]
