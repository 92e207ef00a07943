"""Membership and emptiness matchers for any supported container."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from expect.collection import as_collection
from expect.formatting import describe_failure

E = TypeVar("E")


def contain(element: E) -> ContainMatcher[E]:
    """Match if the subject container holds *element*.

    Works for sequences of any length, deques, sets, mappings (by key) and
    any sized, re-iterable container; see :mod:`expect.collection`.

    Example::

        expect((1, 2, 3)).to(contain(2))
        expect([1, 2, 3]).not_to(contain(4))
    """
    return ContainMatcher(element)


def be_empty() -> BeEmptyMatcher:
    """Match if the subject container has no elements.

    Example::

        expect([]).to(be_empty())
    """
    return BeEmptyMatcher()


@dataclass(frozen=True)
class ContainMatcher(Generic[E]):
    element: E

    def match(self, actual: Any) -> bool:
        return as_collection(actual).contains_element(self.element)

    def failure_message(self, actual: Any) -> str:
        return describe_failure(actual, "contain", self.element)

    def negated_failure_message(self, actual: Any) -> str:
        return describe_failure(actual, "contain", self.element, negated=True)


@dataclass(frozen=True)
class BeEmptyMatcher:
    def match(self, actual: Any) -> bool:
        return as_collection(actual).is_empty()

    def failure_message(self, actual: Any) -> str:
        return describe_failure(actual, "be empty")

    def negated_failure_message(self, actual: Any) -> str:
        return describe_failure(actual, "be empty", negated=True)
