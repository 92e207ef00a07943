"""Matcher protocol: the contract between matchers and expectations.

Two dialects coexist. A boolean matcher answers ``match`` with a ``bool``
and renders each failure direction through its own message method. A
self-describing matcher answers ``match`` with a ``Matched`` or
``NotMatched`` value that already carries the message for the direction
that would fail. New matchers should prefer the self-describing dialect so
the outcome and its message cannot disagree.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, TypeVar, Union

from expect.formatting import NOTHING, render

T_contra = TypeVar("T_contra", contravariant=True)


@dataclass(frozen=True)
class Matched:
    """The matcher holds.

    Attributes:
        message: Explanation used when a ``not_to`` expectation fails.
    """

    message: str


@dataclass(frozen=True)
class NotMatched:
    """The matcher does not hold.

    Attributes:
        message: Explanation used when a ``to`` expectation fails.
    """

    message: str


Match = Union[Matched, NotMatched]


class Matcher(Protocol[T_contra]):
    """Boolean matcher with one failure message per direction."""

    def match(self, actual: T_contra) -> bool:
        """Return whether *actual* satisfies the matcher. Must be pure."""
        ...

    def failure_message(self, actual: T_contra) -> str:
        """Explain why ``to`` failed, i.e. ``match`` returned False."""
        ...

    def negated_failure_message(self, actual: T_contra) -> str:
        """Explain why ``not_to`` failed, i.e. ``match`` returned True."""
        ...


class SelfDescribingMatcher(Protocol[T_contra]):
    """Matcher whose result carries its own failure message."""

    def match(self, actual: T_contra) -> Match:
        ...


AnyMatcher = Union[Matcher[T_contra], SelfDescribingMatcher[T_contra]]


def outcome(
    holds: bool,
    actual: object,
    verb_phrase: str,
    expected: object = NOTHING,
) -> Match:
    """Build the self-describing result for a simple "to <verb-phrase>" check.

    ``outcome(True, "foo", "start with", "f")`` returns
    ``Matched("expected 'foo' not to start with 'f'")``.
    """
    subject = render(actual)
    suffix = "" if expected is NOTHING else f" {render(expected)}"
    if holds:
        return Matched(f"expected {subject} not to {verb_phrase}{suffix}")
    return NotMatched(f"expected {subject} to {verb_phrase}{suffix}")
