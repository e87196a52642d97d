"""Traversal orders over a snapshot of a container's elements."""

from __future__ import annotations

from itertools import zip_longest
from typing import Any, Iterable, Iterator, List

_MISSING = object()


def _interleave(first: Iterable[Any], second: Iterable[Any]) -> List[Any]:
    """Alternate items from two sequences, then append whatever is left over."""
    return [
        item
        for pair in zip_longest(first, second, fillvalue=_MISSING)
        for item in pair
        if item is not _MISSING
    ]


class Traversal:
    """A fixed arrangement of a container's elements, taken when created.

    Later changes to the container do not affect an existing traversal.
    Subclasses decide the arrangement by overriding ``_arrange``.
    """

    def __init__(self, container: Iterable[Any]) -> None:
        self._items: List[Any] = self._arrange(list(container))

    @staticmethod
    def _arrange(elements: List[Any]) -> List[Any]:
        return list(elements)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._items[index]
        try:
            return self._items[index]
        except IndexError:
            raise IndexError("Iterator out of range") from None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


class AscendingOrder(Traversal):
    """Elements from smallest to largest."""

    @staticmethod
    def _arrange(elements: List[Any]) -> List[Any]:
        return sorted(elements)


class DescendingOrder(Traversal):
    """Elements from largest to smallest."""

    @staticmethod
    def _arrange(elements: List[Any]) -> List[Any]:
        return sorted(elements, reverse=True)


class SideCrossOrder(Traversal):
    """Smallest, largest, second smallest, second largest, and so on."""

    @staticmethod
    def _arrange(elements: List[Any]) -> List[Any]:
        ordered = sorted(elements)
        split = (len(ordered) + 1) // 2
        return _interleave(ordered[:split], reversed(ordered[split:]))


class ReverseOrder(Traversal):
    """Elements in reverse insertion order."""

    @staticmethod
    def _arrange(elements: List[Any]) -> List[Any]:
        return elements[::-1]


class Order(Traversal):
    """Elements in their original insertion order."""


class MiddleOutOrder(Traversal):
    """The middle element first, then alternately one to the left and one to the right.

    With an even number of elements the left-hand middle is taken.
    When one side runs out, the rest of the other side follows in order.
    """

    @staticmethod
    def _arrange(elements: List[Any]) -> List[Any]:
        if not elements:
            return []
        middle = (len(elements) - 1) // 2
        left = reversed(elements[:middle])
        right = elements[middle + 1:]
        return [elements[middle], *_interleave(left, right)]