"""Tests for the equality, collection and optional-value matchers."""

from collections import deque

import pytest

from expect import Matched, NotMatched, expect
from expect.matchers import be_empty, be_none, be_some, contain, equal


# --- equal ---


def test_equal_matches_if_actual_equals_expected():
    assert equal("foo").match("foo") is True


def test_equal_does_not_match_if_actual_differs():
    assert equal("foo").match("bar") is False


def test_equal_uses_the_subjects_equality():
    assert equal(1).match(1.0)
    assert equal([1, 2]).match([1, 2])


def test_equal_always_holds_for_the_subject_itself():
    for value in ("foo", 0, [1], {"a": 1}, None):
        assert equal(value).match(value)


def test_equal_failure_messages():
    assert (
        equal("foo").failure_message("bar")
        == "\tExpected:\n\t\t'bar'\n\tto equal:\n\t\t'foo'"
    )
    assert (
        equal("foo").negated_failure_message("foo")
        == "\tExpected:\n\t\t'foo'\n\tnot to equal:\n\t\t'foo'"
    )


def test_equal_matcher_is_immutable():
    matcher = equal("foo")
    with pytest.raises(AttributeError):
        matcher.expected = "bar"


# --- contain ---


def test_contain_matches_if_collection_contains_element():
    assert contain("foo").match(["foo"])


def test_contain_does_not_match_if_element_is_missing():
    assert not contain("foo").match(["bar"])


@pytest.mark.parametrize(
    "container",
    [[1, 2, 3], (1, 2, 3), deque([1, 2, 3]), {1, 2, 3}, frozenset({1, 2, 3}), {1: "a", 2: "b", 3: "c"}],
)
def test_contain_is_independent_of_container_kind(container):
    assert contain(2).match(container)
    assert not contain(4).match(container)


def test_contain_works_on_linked_lists(linked_list):
    expect(linked_list("a", "b")).to(contain("b"))
    expect(linked_list("a", "b")).not_to(contain("c"))


def test_contain_and_be_empty_work_on_ordered_sets(sorted_set):
    expect(sorted_set(3, 1, 2)).to(contain(2))
    expect(sorted_set(3, 1, 2)).not_to(contain(4))
    expect(sorted_set(3, 1, 2)).not_to(contain("a"))
    expect(sorted_set()).to(be_empty())
    expect(sorted_set(1)).not_to(be_empty())


def test_contain_failure_messages():
    assert (
        contain("foo").failure_message(["bar"])
        == "\tExpected:\n\t\t['bar']\n\tto contain:\n\t\t'foo'"
    )
    assert (
        contain("foo").negated_failure_message(["foo"])
        == "\tExpected:\n\t\t['foo']\n\tnot to contain:\n\t\t'foo'"
    )


def test_contain_rejects_strings():
    with pytest.raises(TypeError, match="contain_str"):
        contain("o").match("foo")


# --- be_empty ---


def test_be_empty_matches_if_collection_is_empty():
    assert be_empty().match([])


def test_be_empty_does_not_match_if_collection_has_elements():
    assert not be_empty().match([42])


@pytest.mark.parametrize("empty", [[], (), deque(), set(), frozenset(), {}, range(0)])
def test_be_empty_holds_for_every_empty_kind(empty):
    expect(empty).to(be_empty())
    expect(empty).not_to(contain(None))


def test_be_empty_failure_messages():
    assert be_empty().failure_message(["bar"]) == "\tExpected:\n\t\t['bar']\n\tto be empty"
    assert be_empty().negated_failure_message([]) == "\tExpected:\n\t\t[]\n\tnot to be empty"


# --- be_some / be_none ---


def test_be_some_matches_present_values():
    assert be_some().match("foo") == Matched("expected 'foo' not to be present")


def test_be_some_does_not_match_none():
    assert be_some().match(None) == NotMatched("expected None to be present")


def test_be_some_treats_falsy_values_as_present():
    for value in (0, "", [], False):
        assert isinstance(be_some().match(value), Matched)


def test_be_none_matches_none():
    assert be_none().match(None)


def test_be_none_does_not_match_present_values():
    assert not be_none().match("thing")


def test_be_none_failure_messages():
    assert be_none().failure_message("foo") == "\tExpected:\n\t\t'foo'\n\tto be None"
    assert be_none().negated_failure_message(None) == "\tExpected:\n\t\tNone\n\tnot to be None"


@pytest.mark.parametrize("value", [None, "foo", 0, []])
def test_be_some_and_be_none_are_exclusive_and_exhaustive(value):
    some = isinstance(be_some().match(value), Matched)
    none = be_none().match(value)
    assert some is not none
