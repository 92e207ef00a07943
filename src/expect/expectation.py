"""The ``expect(subject).to(matcher)`` entry point."""

from __future__ import annotations

import logging
from typing import Generic, NoReturn, TypeVar

from expect.errors import ExpectationFailed, ExpectationReused
from expect.formatting import render
from expect.matcher import AnyMatcher, Matched, NotMatched

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Expectation(Generic[T]):
    """A subject waiting for the one matcher it will be checked against.

    The subject is held by reference and never copied. Callers must not
    mutate it while ``to`` or ``not_to`` is running.
    """

    __slots__ = ("_actual", "_consumed_by")

    def __init__(self, actual: T) -> None:
        self._actual = actual
        self._consumed_by: str | None = None

    @property
    def actual(self) -> T:
        return self._actual

    def to(self, matcher: AnyMatcher[T]) -> None:
        """Raise ExpectationFailed unless *matcher* holds for the subject."""
        __tracebackhide__ = True
        self._consume("to")
        result = matcher.match(self._actual)
        self._log_evaluation("to", matcher, result)

        if isinstance(result, Matched):
            return
        if isinstance(result, NotMatched):
            self._fail(result.message)
        if not result:
            self._fail(matcher.failure_message(self._actual))

    def not_to(self, matcher: AnyMatcher[T]) -> None:
        """Raise ExpectationFailed if *matcher* holds for the subject."""
        __tracebackhide__ = True
        self._consume("not_to")
        result = matcher.match(self._actual)
        self._log_evaluation("not_to", matcher, result)

        if isinstance(result, NotMatched):
            return
        if isinstance(result, Matched):
            self._fail(result.message)
        if result:
            self._fail(matcher.negated_failure_message(self._actual))

    def _consume(self, method: str) -> None:
        if self._consumed_by is not None:
            raise ExpectationReused(
                f"expectation on {render(self._actual)} was already evaluated "
                f"by {self._consumed_by}(); call expect() again for {method}()"
            )
        self._consumed_by = method

    def _log_evaluation(self, method: str, matcher: object, result: object) -> None:
        if not logger.isEnabledFor(logging.DEBUG):
            return
        if isinstance(result, (Matched, NotMatched)):
            holds = isinstance(result, Matched)
        else:
            holds = bool(result)
        logger.debug(
            f"{method}({type(matcher).__name__}) on {render(self._actual)}: holds={holds}"
        )

    def _fail(self, message: str) -> NoReturn:
        __tracebackhide__ = True
        logger.info(f"Expectation failed:\n{message}")
        raise ExpectationFailed(message)


def expect(actual: T) -> Expectation[T]:
    """Start an expectation on *actual*.

    Example::

        expect("foo").to(equal("foo"))
        expect([1, 2, 3]).not_to(contain(4))
    """
    return Expectation(actual)
