"""A container of comparable elements that can be walked in several orders."""

from __future__ import annotations

import sys
from typing import Any, Iterable, Iterator, List, Optional, TextIO, Tuple

from ordercontainer.orders import (
    AscendingOrder,
    DescendingOrder,
    MiddleOutOrder,
    Order,
    ReverseOrder,
    SideCrossOrder,
)


class Container:
    """An ordered collection of elements that keeps duplicates.

    Elements are kept in insertion order. The traversal methods return a
    snapshot arranged in the requested order; later changes to the container
    do not affect a traversal already taken.
    """

    def __init__(self, elements: Optional[Iterable[Any]] = None) -> None:
        self._elements: List[Any] = list(elements) if elements is not None else []

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._elements)

    def __contains__(self, element: Any) -> bool:
        return element in self._elements

    def __str__(self) -> str:
        return "".join(f"{element} " for element in self._elements)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._elements!r})"

    def is_empty(self) -> bool:
        """Return True when the container holds no elements."""
        return not self._elements

    def add(self, element: Any) -> None:
        """Append an element; duplicates are kept."""
        self._elements.append(element)

    def remove(self, element: Any) -> None:
        """Remove every occurrence of ``element``.

        Raises ValueError if the element is not present.
        """
        if element not in self._elements:
            raise ValueError("Element not found in container")
        self._elements = [item for item in self._elements if item != element]

    def elements(self) -> Tuple[Any, ...]:
        """Return the elements in insertion order, as a read-only tuple."""
        return tuple(self._elements)

    def print(self, file: Optional[TextIO] = None) -> None:
        """Write the elements, each followed by a space, then a newline."""
        print(str(self), file=file if file is not None else sys.stdout)

    def ascending_order(self) -> AscendingOrder:
        """Return the elements from smallest to largest."""
        return AscendingOrder(self._elements)

    def descending_order(self) -> DescendingOrder:
        """Return the elements from largest to smallest."""
        return DescendingOrder(self._elements)

    def side_cross_order(self) -> SideCrossOrder:
        """Return smallest, largest, second smallest, second largest, and so on."""
        return SideCrossOrder(self._elements)

    def reverse_order(self) -> ReverseOrder:
        """Return the elements in reverse insertion order."""
        return ReverseOrder(self._elements)

    def order(self) -> Order:
        """Return the elements in insertion order."""
        return Order(self._elements)

    def middle_out_order(self) -> MiddleOutOrder:
        """Return the middle element first, then alternately left and right."""
        return MiddleOutOrder(self._elements)