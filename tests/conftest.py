"""Pytest configuration and fixtures."""

import bisect
import collections.abc
import logging

import pytest

from expect import configure


@pytest.fixture(autouse=True)
def reset_expect():
    """Restore default settings and detach handlers after each test."""
    yield

    configure(None)

    # Module loggers are held by reference, so clear them instead of
    # removing them from the registry
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if not name.startswith("expect"):
            continue
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)


@pytest.fixture()
def linked_list():
    """Factory for a minimal singly linked list container."""

    class Node:
        def __init__(self, value, next_node=None):
            self.value = value
            self.next = next_node

    class LinkedList:
        def __init__(self, *values):
            self.head = None
            for value in reversed(values):
                self.head = Node(value, self.head)

        def __iter__(self):
            node = self.head
            while node is not None:
                yield node.value
                node = node.next

        def __len__(self):
            return sum(1 for _ in self)

        def __contains__(self, value):
            return any(item == value for item in self)

        def __repr__(self):
            return f"LinkedList({', '.join(repr(v) for v in self)})"

    return LinkedList


@pytest.fixture()
def sorted_set():
    """Factory for a minimal ordered set kept in a sorted list."""

    class SortedSet(collections.abc.MutableSet):
        def __init__(self, *values):
            self._items = []
            for value in values:
                self.add(value)

        def __contains__(self, value):
            i = bisect.bisect_left(self._items, value)
            return i < len(self._items) and self._items[i] == value

        def __iter__(self):
            return iter(self._items)

        def __len__(self):
            return len(self._items)

        def add(self, value):
            if value not in self:
                bisect.insort(self._items, value)

        def discard(self, value):
            if value in self:
                self._items.remove(value)

        def __repr__(self):
            return f"SortedSet({self._items!r})"

    return SortedSet
