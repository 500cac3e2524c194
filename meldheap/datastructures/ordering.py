"""Comparators: callables ``(a, b) -> int`` returning <0, 0 or >0."""

from __future__ import annotations
from typing import Any, Callable, TypeVar

T = TypeVar("T")
K = TypeVar("K")

Comparator = Callable[[T, T], int]


def natural_order(a: Any, b: Any) -> int:
    """Compare two elements with their own ``<`` / ``>`` operators."""
    return (a > b) - (a < b)


def reverse_order(a: Any, b: Any) -> int:
    """Inverse of :func:`natural_order` (turns a min-heap into a max-heap)."""
    return natural_order(b, a)


def comparing(key: Callable[[T], K], comparator: Comparator = natural_order) -> Comparator:
    """Build a comparator that orders elements by ``key(element)``.

    Each call returns a new function; heaps that are going to be melded
    must share the same comparator object.
    """

    def compare(a: T, b: T) -> int:
        return comparator(key(a), key(b))

    return compare
