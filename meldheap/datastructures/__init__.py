from .base import Heap
from .errors import EmptyHeapError, HeapError, InvalidArgumentError, InvariantViolation
from .heap import WBLeftistHeap
from .node_queue import NodeQueue
from .ordering import Comparator, comparing, natural_order, reverse_order

__all__ = [
    "Heap",
    "WBLeftistHeap",
    "NodeQueue",
    "Comparator",
    "natural_order",
    "reverse_order",
    "comparing",
    "HeapError",
    "EmptyHeapError",
    "InvalidArgumentError",
    "InvariantViolation",
]
