"""Weight-biased leftist heaps: a meldable priority queue."""

from .datastructures import (
    EmptyHeapError,
    Heap,
    HeapError,
    InvalidArgumentError,
    InvariantViolation,
    WBLeftistHeap,
    comparing,
    natural_order,
    reverse_order,
)

__version__ = "0.1.0"

__all__ = [
    "Heap",
    "WBLeftistHeap",
    "natural_order",
    "reverse_order",
    "comparing",
    "HeapError",
    "EmptyHeapError",
    "InvalidArgumentError",
    "InvariantViolation",
]
