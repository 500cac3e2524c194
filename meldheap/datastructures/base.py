from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Generic, Iterable, Iterator, TypeVar

from .ordering import Comparator

T = TypeVar("T")


class Heap(ABC, Generic[T]):
    """Priority-queue capability: the smallest element (by comparator) comes out first."""

    __slots__ = ()

    @property
    @abstractmethod
    def comparator(self) -> Comparator:
        """The ordering used for every element comparison."""

    @abstractmethod
    def is_empty(self) -> bool: ...

    @abstractmethod
    def size(self) -> int: ...

    @abstractmethod
    def insert(self, element: T) -> None: ...

    @abstractmethod
    def minimum(self) -> T:
        """Return the smallest element without removing it."""

    @abstractmethod
    def delete_minimum(self) -> None:
        """Remove the smallest element."""

    @abstractmethod
    def clear(self) -> None: ...

    # -----------------------------
    # Derived operations
    # -----------------------------
    def pop(self) -> T:
        """Remove and return the smallest element."""
        element = self.minimum()
        self.delete_minimum()
        return element

    def drain(self) -> Iterator[T]:
        """Pop elements until the heap is empty, yielding them in order."""
        while not self.is_empty():
            yield self.pop()

    def extend(self, elements: Iterable[T]) -> None:
        for element in elements:
            self.insert(element)

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_empty()
