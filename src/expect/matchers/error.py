"""Matchers for the error outcome of a call.

The subject is a zero-argument callable; the matcher calls it on every
evaluation.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Union

from expect.formatting import render
from expect.matcher import Match, Matched, NotMatched

ExceptionTypes = Union[type[BaseException], tuple[type[BaseException], ...]]


def raise_error(
    exc_type: ExceptionTypes = Exception,
    match: str | re.Pattern | None = None,
) -> RaiseErrorMatcher:
    """Match if calling the subject raises *exc_type*.

    When *match* is given, ``str()`` of the raised exception must also
    contain a match for it (``re.search``). Exceptions that are not
    *exc_type* are not caught and propagate out of the expectation.

    Example::

        expect(lambda: int("x")).to(raise_error(ValueError, match="invalid literal"))
    """
    pattern = re.compile(match) if match is not None else None
    return RaiseErrorMatcher(exc_type, pattern)


def _callable_name(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__qualname__", None) or render(fn)


@dataclass(frozen=True)
class RaiseErrorMatcher:
    exc_type: ExceptionTypes
    pattern: re.Pattern | None = None

    def describe_expected(self) -> str:
        if isinstance(self.exc_type, tuple):
            names = " or ".join(t.__name__ for t in self.exc_type)
        else:
            names = self.exc_type.__name__
        if self.pattern is None:
            return names
        return f"{names} matching {render(self.pattern.pattern)}"

    def match(self, actual: Any) -> Match:
        if not callable(actual):
            raise TypeError(
                f"raise_error() needs a callable subject, got {type(actual).__name__}"
            )

        name = _callable_name(actual)
        expected = self.describe_expected()
        try:
            actual()
        except self.exc_type as e:
            if self.pattern is not None and self.pattern.search(str(e)) is None:
                return NotMatched(f"expected {name} to raise {expected}, but raised {e!r}")
            return Matched(f"expected {name} not to raise {expected}, but raised {e!r}")

        return NotMatched(f"expected {name} to raise {expected}, but nothing was raised")
