"""Exception types raised by the heap containers."""


class HeapError(Exception):
    """Base class for every error raised by :mod:`meldheap`."""


class EmptyHeapError(HeapError, IndexError):
    """Raised when the minimum of an empty heap is requested or removed.

    Also an :class:`IndexError`, matching the built-in ``pop from empty``
    convention.
    """


class InvalidArgumentError(HeapError, ValueError):
    """Raised for bad arguments (non-positive capacities, mismatched comparators...)."""


class InvariantViolation(HeapError, AssertionError):
    """Raised by the shape checker when a tree breaks a structural invariant."""
