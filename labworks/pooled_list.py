"""A singly linked list whose nodes are handed out by a reusing block pool."""

from __future__ import annotations

import operator
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from itertools import islice
from typing import Generic, TypeVar

T = TypeVar("T")

_NODE_SIZE = 16
_NODE_ALIGNMENT = 8


@dataclass(frozen=True)
class MemoryBlock:
    """A block reserved by the pool: where it starts and how large it is."""

    address: int
    size: int


def _align(address: int, alignment: int) -> int:
    """Round ``address`` up to the next multiple of ``alignment``."""
    return -(-address // alignment) * alignment


class BlockPool:
    """Hands out aligned addresses and reuses released blocks.

    A request for ``size`` bytes reserves ``size + alignment`` so that an
    aligned address always fits. Released blocks go to a free list; the first
    free block large enough serves the next request before a new one is made.
    """

    def __init__(self, base: int = 0x1000) -> None:
        self._next_address = base
        self._used: dict[int, MemoryBlock] = {}
        self._free: list[MemoryBlock] = []

    def allocate(self, size: int, alignment: int = _NODE_ALIGNMENT) -> int:
        """Reserve room for ``size`` bytes and return an aligned address."""
        if size < 0:
            raise ValueError("size must not be negative")
        if alignment <= 0:
            raise ValueError("alignment must be positive")
        needed = size + alignment

        block = next((free for free in self._free if free.size >= needed), None)
        if block is not None:
            self._free.remove(block)
        else:
            block = MemoryBlock(self._next_address, needed)
            self._next_address += needed

        address = _align(block.address, alignment)
        self._used[address] = block
        return address

    def deallocate(self, address: int) -> None:
        """Release the block behind ``address`` for later reuse."""
        try:
            block = self._used.pop(address)
        except KeyError:
            raise ValueError(
                f"address {address:#x} was not allocated by this pool"
            ) from None
        self._free.append(block)

    def used_count(self) -> int:
        """Number of blocks currently handed out."""
        return len(self._used)

    def free_count(self) -> int:
        """Number of released blocks waiting to be reused."""
        return len(self._free)


@dataclass(eq=False)
class _Node(Generic[T]):
    address: int
    item: T | None = None
    next: _Node[T] | None = None


class PooledList(Generic[T]):
    """An ordered list whose nodes come from a :class:`BlockPool`.

    The list always keeps one empty trailing node; appending fills it and
    allocates a fresh one behind it.
    """

    def __init__(self, pool: BlockPool | None = None) -> None:
        self._pool = pool if pool is not None else BlockPool()
        self._first: _Node[T] = self._new_node()
        self._last: _Node[T] = self._first

    def _new_node(self) -> _Node[T]:
        return _Node(self._pool.allocate(_NODE_SIZE, _NODE_ALIGNMENT))

    def _nodes(self) -> Iterator[_Node[T]]:
        node = self._first
        while node is not self._last:
            yield node
            assert node.next is not None
            node = node.next

    def _position(self, index: object) -> int:
        position = operator.index(index)  # type: ignore[arg-type]
        length = len(self)
        if position < 0:
            position += length
        if not 0 <= position < length:
            raise IndexError("Index out of range")
        return position

    def append(self, item: T) -> None:
        """Add ``item`` at the end."""
        self._last.item = item
        self._last.next = self._new_node()
        self._last = self._last.next

    def remove_at(self, index: int) -> T:
        """Remove and return the item at ``index``, releasing its node."""
        position = self._position(index)
        if position == 0:
            removed = self._first
            assert removed.next is not None
            self._first = removed.next
        else:
            previous = next(islice(self._nodes(), position - 1, None))
            removed = previous.next
            assert removed is not None
            previous.next = removed.next
        removed.next = None
        self._pool.deallocate(removed.address)
        return removed.item  # type: ignore[return-value]

    def to_list(self) -> list[T]:
        """The items, in order, as a plain list."""
        return list(self)

    def __getitem__(self, index: int) -> T:
        position = self._position(index)
        return next(islice(self._nodes(), position, None)).item  # type: ignore[return-value]

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.item  # type: ignore[misc]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"


def main(argv: Sequence[str] | None = None) -> int:
    """Fill a pooled list and print its elements.

    The items are taken from ``argv`` when given, otherwise 1, 2 and 3.
    """
    items: Iterable[object] = list(argv) if argv else [1, 2, 3]
    values: PooledList[object] = PooledList(BlockPool())
    for item in items:
        values.append(item)

    print(f"Elements (length {len(values)}):")
    for element in values:
        print(element)
    return 0


if __name__ == "__main__":
    sys.exit(main())