"""Collection capability shared by the membership and emptiness matchers.

``contain`` and ``be_empty`` are written once against :class:`Collection`.
:func:`as_collection` picks the adapter for a container kind:

- sequences of any length (``list``, ``tuple``, ``range``, ``deque``
  and any other ``collections.abc.Sequence``),
- sets (``set``, ``frozenset``, dict key views, ordered or tree sets that
  register as ``collections.abc.Set``) and mappings, looked up by key,
- any other sized, re-iterable container such as a linked list.

Other container types join with ``as_collection.register``. Dispatch follows a
class's real MRO, so a class inheriting both ``MutableSet`` and ``Sequence``
(``sortedcontainers.SortedSet``, for one) gets whichever comes first. Only a
class registered as a virtual subclass of both ABCs is ambiguous and needs an
explicit registration.
"""

from __future__ import annotations

import collections.abc
import functools
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)

_EMPTY = object()


class Collection(Protocol[T_contra]):
    """Membership and emptiness over one container.

    Invariant: when ``is_empty()`` is true, ``contains_element`` is false for
    every element.
    """

    def contains_element(self, element: T_contra) -> bool:
        ...

    def is_empty(self) -> bool:
        ...


@dataclass(frozen=True)
class SequenceCollection(Generic[T]):
    """Fixed- or variable-length sequence, searched front to back."""

    items: collections.abc.Sequence[T]

    def contains_element(self, element: T) -> bool:
        return element in self.items

    def is_empty(self) -> bool:
        return len(self.items) == 0


@dataclass(frozen=True)
class SetCollection(Generic[T]):
    """Hash- or order-based set, searched with the set's own lookup.

    An element the set cannot look up (unhashable, or not comparable with a
    sorted set's members) is not a member.
    """

    items: collections.abc.Set[T]

    def contains_element(self, element: T) -> bool:
        try:
            return element in self.items
        except TypeError:
            return False

    def is_empty(self) -> bool:
        return len(self.items) == 0


@dataclass(frozen=True)
class LinkedCollection(Generic[T]):
    """Container only known to be iterable, e.g. a linked list.

    Walks the nodes instead of asking for ``len()``, which such containers
    often compute by traversal.
    """

    items: collections.abc.Collection[T]

    def contains_element(self, element: T) -> bool:
        return any(item is element or item == element for item in self.items)

    def is_empty(self) -> bool:
        return next(iter(self.items), _EMPTY) is _EMPTY


@functools.singledispatch
def as_collection(value: Any) -> Collection[Any]:
    """Return the :class:`Collection` adapter for *value*.

    Raises:
        TypeError: *value* is not a supported container.
    """
    raise TypeError(
        f"{type(value).__name__} is not a collection; "
        "contain() and be_empty() need a sequence, set, mapping or other "
        "sized, re-iterable container"
    )


@as_collection.register
def _(value: collections.abc.Sequence) -> Collection[Any]:
    return SequenceCollection(value)


@as_collection.register
def _(value: collections.abc.Set) -> Collection[Any]:
    return SetCollection(value)


@as_collection.register
def _(value: collections.abc.Mapping) -> Collection[Any]:
    return SetCollection(value.keys())


@as_collection.register
def _(value: collections.abc.Collection) -> Collection[Any]:
    return LinkedCollection(value)


@as_collection.register(str)
@as_collection.register(bytes)
@as_collection.register(bytearray)
def _(value: str | bytes | bytearray) -> Collection[Any]:
    raise TypeError(
        f"{type(value).__name__} is not treated as a collection; "
        "use contain_str() or the other string matchers"
    )
