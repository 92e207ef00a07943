"""Matchers for optional values, where ``None`` means "absent"."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from expect.formatting import describe_failure, render
from expect.matcher import Match, Matched, NotMatched


def be_some() -> SomeMatcher:
    """Match if the subject is present, i.e. not ``None``."""
    return SomeMatcher()


def be_none() -> NoneMatcher:
    """Match if the subject is ``None``."""
    return NoneMatcher()


@dataclass(frozen=True)
class SomeMatcher:
    def match(self, actual: Any) -> Match:
        if actual is not None:
            return Matched(f"expected {render(actual)} not to be present")
        return NotMatched("expected None to be present")


@dataclass(frozen=True)
class NoneMatcher:
    def match(self, actual: Any) -> bool:
        return actual is None

    def failure_message(self, actual: Any) -> str:
        return describe_failure(actual, "be None")

    def negated_failure_message(self, actual: Any) -> str:
        return describe_failure(actual, "be None", negated=True)
