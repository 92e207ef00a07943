"""Equality matcher."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from expect.formatting import describe_failure

E = TypeVar("E")


def equal(expected: E) -> EqualMatcher[E]:
    """Match if the subject equals *expected*.

    The subject's own ``==`` decides, so ``equal(1)`` holds for ``1.0``.

    Example::

        expect("foo").to(equal("foo"))
        expect("foo").not_to(equal("bar"))
    """
    return EqualMatcher(expected)


@dataclass(frozen=True)
class EqualMatcher(Generic[E]):
    expected: E

    def match(self, actual: Any) -> bool:
        return bool(actual == self.expected)

    def failure_message(self, actual: Any) -> str:
        return describe_failure(actual, "equal", self.expected)

    def negated_failure_message(self, actual: Any) -> str:
        return describe_failure(actual, "equal", self.expected, negated=True)
