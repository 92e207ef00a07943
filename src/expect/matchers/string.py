"""String matchers.

``contain`` treats strings as opaque, so substring checks live here. Each
matcher accepts ``str`` subjects with ``str`` operands, or ``bytes`` with
``bytes``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Union

from expect.matcher import Match, outcome

Text = Union[str, bytes]


def contain_str(substring: Text) -> ContainStrMatcher:
    """Match if the subject has *substring* anywhere in it."""
    return ContainStrMatcher(substring)


def start_with(prefix: Text) -> StartWithMatcher:
    """Match if the subject begins with *prefix*."""
    return StartWithMatcher(prefix)


def end_with(suffix: Text) -> EndWithMatcher:
    """Match if the subject ends with *suffix*."""
    return EndWithMatcher(suffix)


def match_regex(pattern: Text | re.Pattern) -> RegexMatcher:
    """Match if *pattern* is found anywhere in the subject (``re.search``)."""
    return RegexMatcher(re.compile(pattern))


def _require_text(actual: Any, operand: Text) -> None:
    if isinstance(operand, str) and isinstance(actual, str):
        return
    if isinstance(operand, bytes) and isinstance(actual, (bytes, bytearray)):
        return
    raise TypeError(
        f"string matchers need a {type(operand).__name__} subject, "
        f"got {type(actual).__name__}"
    )


@dataclass(frozen=True)
class ContainStrMatcher:
    substring: Text

    def match(self, actual: Any) -> Match:
        _require_text(actual, self.substring)
        return outcome(self.substring in actual, actual, "contain", self.substring)


@dataclass(frozen=True)
class StartWithMatcher:
    prefix: Text

    def match(self, actual: Any) -> Match:
        _require_text(actual, self.prefix)
        return outcome(actual.startswith(self.prefix), actual, "start with", self.prefix)


@dataclass(frozen=True)
class EndWithMatcher:
    suffix: Text

    def match(self, actual: Any) -> Match:
        _require_text(actual, self.suffix)
        return outcome(actual.endswith(self.suffix), actual, "end with", self.suffix)


@dataclass(frozen=True)
class RegexMatcher:
    pattern: re.Pattern

    def match(self, actual: Any) -> Match:
        _require_text(actual, self.pattern.pattern)
        found = self.pattern.search(actual) is not None
        return outcome(found, actual, "match", self.pattern.pattern)
