"""A growable array that doubles its capacity when it runs out of room."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator, Sequence
from typing import Generic, TypeVar

T = TypeVar("T")


class DynamicArray(Sequence[T], Generic[T]):
    """An ordered collection with explicit capacity growth.

    Capacity starts at zero, becomes one on the first append and doubles each
    time it is exhausted. Removing items never shrinks it. Indices are
    non-negative positions; anything outside ``0 <= index < len`` is an error.
    """

    __slots__ = ("_items", "_capacity")

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._items: list[T] = []
        self._capacity = 0
        for item in items or ():
            self.append(item)

    def _position(self, index: object) -> int:
        position = operator.index(index)  # type: ignore[arg-type]
        if not 0 <= position < len(self._items):
            raise IndexError("Index out of range")
        return position

    def append(self, value: T) -> None:
        """Add ``value`` at the end, growing the capacity if it is full."""
        if len(self._items) >= self._capacity:
            self._capacity = 1 if self._capacity == 0 else self._capacity * 2
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the last item."""
        if not self._items:
            raise IndexError("Array is empty")
        return self._items.pop()

    def remove_at(self, index: int) -> T:
        """Remove and return the item at ``index``, shifting later items down."""
        return self._items.pop(self._position(index))

    def clear(self) -> None:
        """Remove every item; the capacity is kept."""
        self._items.clear()

    def capacity(self) -> int:
        """Number of items the array holds before it must grow again."""
        return self._capacity

    def __getitem__(self, index: int) -> T:  # type: ignore[override]
        return self._items[self._position(index)]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[self._position(index)] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"