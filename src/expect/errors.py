"""Exceptions raised by expectations."""

from __future__ import annotations


class ExpectError(Exception):
    """Base class for everything expect raises."""


class ExpectationFailed(ExpectError, AssertionError):
    """A matcher did not hold (or, for ``not_to``, did hold).

    Subclasses ``AssertionError`` so test runners report it as an ordinary
    test failure rather than an error.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ExpectationReused(ExpectError, RuntimeError):
    """``to``/``not_to`` was called a second time on the same expectation."""
