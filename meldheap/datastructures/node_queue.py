from __future__ import annotations
import ctypes
from typing import Generic, Iterable, Iterator, Optional, TypeVar

from .errors import InvalidArgumentError

T = TypeVar("T")


class NodeQueue(Generic[T]):
    """A FIFO queue implemented as a ring buffer over a ctypes array.

    Implementation notes
    --------------------
    • Storage is a ctypes array of `py_object` (not Python's built-in list).
    • `_head` indexes the front slot; the live items wrap around the end.
    • Capacity grows geometrically (x2) when full; the ring is unrolled
      into the new buffer so the front lands at slot 0 again.
    • Used by the heap bulk build, where every dequeue is paired with an
      enqueue and the queue never needs to shrink.
    """

    __slots__ = ("_buf", "_head", "_size", "_capacity")

    # Initial allocated capacity for the ring buffer.
    _INITIAL_CAPACITY = 4

    def __init__(self, capacity: int = _INITIAL_CAPACITY, it: Optional[Iterable[T]] = None) -> None:
        if capacity <= 0:
            raise InvalidArgumentError(f"capacity must be positive, got {capacity!r}")
        self._capacity = capacity
        self._buf = self._make_array(capacity)
        self._head = 0
        self._size = 0

        if it is not None:
            for v in it:
                self.enqueue(v)

    # ------------------------------- internals -------------------------------

    @staticmethod
    def _make_array(capacity: int):
        """Allocate a raw ctypes array of length `capacity` to hold py_object."""
        return (capacity * ctypes.py_object)()

    def _slot(self, offset: int) -> int:
        """Physical index of the item `offset` positions behind the front."""
        return (self._head + offset) % self._capacity

    def _resize(self, new_capacity: int) -> None:
        """Copy the live items, front first, into a buffer of `new_capacity`."""
        new_buf = self._make_array(new_capacity)
        for i in range(self._size):
            new_buf[i] = self._buf[self._slot(i)]
        self._buf = new_buf
        self._head = 0
        self._capacity = new_capacity

    # --------------------------------- API -----------------------------------

    def enqueue(self, item: T) -> None:
        """Append `item` at the back. Amortized O(1)."""
        if self._size == self._capacity:
            self._resize(self._capacity * 2)
        self._buf[self._slot(self._size)] = item
        self._size += 1

    def dequeue(self) -> T:
        """Remove and return the front item. O(1).

        Raises:
            IndexError: if the queue is empty.
        """
        if self._size == 0:
            raise IndexError("dequeue from empty queue")
        item = self._buf[self._head]
        # Drop the reference so the slot does not keep the item alive.
        self._buf[self._head] = None
        self._head = self._slot(1)
        self._size -= 1
        return item  # type: ignore[return-value]

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return self._size != 0

    def __iter__(self) -> Iterator[T]:
        """Yield items from front to back."""
        for i in range(self._size):
            yield self._buf[self._slot(i)]  # type: ignore[misc]

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"NodeQueue({list(self)!r})"
