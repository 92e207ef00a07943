"""Rendering of subjects and expected values in failure messages."""

from __future__ import annotations

from expect.config import current_config

NOTHING = object()
"""Placeholder for "this message has no expected value"."""

_ELLIPSIS = "..."


def render(value: object) -> str:
    """Return the debug representation of *value* used in messages.

    Uses ``repr()``. When ``max_repr_length`` is configured, longer
    representations keep their head and end in ``...``.
    """
    text = repr(value)
    limit = current_config().max_repr_length
    if limit is None or len(text) <= limit:
        return text
    return text[: limit - len(_ELLIPSIS)] + _ELLIPSIS


def describe_failure(
    actual: object,
    verb_phrase: str,
    expected: object = NOTHING,
    *,
    negated: bool = False,
) -> str:
    """Build the tab-indented message shared by boolean matchers.

    Matchers without an expected value (``be empty``, ``be None``) omit the
    colon and the trailing expected-value line.
    """
    direction = "not to" if negated else "to"
    message = f"\tExpected:\n\t\t{render(actual)}\n\t{direction} {verb_phrase}"
    if expected is NOTHING:
        return message
    return f"{message}:\n\t\t{render(expected)}"
