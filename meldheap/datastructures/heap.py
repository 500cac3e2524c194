from __future__ import annotations
import copy
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Sized, Tuple, TypeVar

from .base import Heap
from .errors import EmptyHeapError, InvalidArgumentError
from .node_queue import NodeQueue
from .ordering import Comparator, natural_order

T = TypeVar("T")


class _Node(Generic[T]):
    """A tree node; `weight` is the number of nodes in the subtree rooted here."""

    __slots__ = ("element", "weight", "left", "right")

    def __init__(
        self,
        element: T,
        weight: int = 1,
        left: Optional["_Node[T]"] = None,
        right: Optional["_Node[T]"] = None,
    ) -> None:
        self.element = element
        self.weight = weight
        self.left = left
        self.right = right


def _weight(node: Optional[_Node[T]]) -> int:
    return 0 if node is None else node.weight


class WBLeftistHeap(Heap[T]):
    """A meldable min-heap over weight-biased leftist trees.

    Every node holds an element no greater (by the comparator) than its
    children's, and its left subtree is at least as heavy as its right one.
    The right spine of a heap of n elements therefore has at most
    ``floor(log2(n + 1))`` nodes, and merging two heaps only walks right spines.

    Merging is destructive: :meth:`merge` empties its argument and
    :meth:`meld` empties both of its operands, so each node is owned by
    exactly one heap. Use :meth:`copy` to obtain an independent heap.

    Deep copies and pickles flatten the tree into a pre-order list, so
    long left paths never hit the recursion limit. Pickling needs a
    picklable comparator (the module-level orderings are; closures from
    :func:`comparing` are not).
    """

    __slots__ = ("_comparator", "_root")

    def __init__(self, comparator: Comparator = natural_order) -> None:
        if not callable(comparator):
            raise InvalidArgumentError(f"comparator must be callable, got {comparator!r}")
        self._comparator = comparator
        self._root: Optional[_Node[T]] = None

    # -----------------------------
    # Construction
    # -----------------------------
    @classmethod
    def empty(cls, comparator: Comparator = natural_order) -> "WBLeftistHeap[T]":
        """Create an empty heap (O(1))."""
        return cls(comparator)

    @classmethod
    def of(cls, *elements: T, comparator: Comparator = natural_order) -> "WBLeftistHeap[T]":
        """Create a heap holding `elements` (O(n))."""
        return cls.from_iterable(elements, comparator)

    @classmethod
    def from_iterable(cls, iterable: Iterable[T], comparator: Comparator = natural_order) -> "WBLeftistHeap[T]":
        """Create a heap holding every element of `iterable` (O(n))."""
        heap = cls(comparator)
        heap._root = heap._merge_all(iterable)
        return heap

    @classmethod
    def copy_of(cls, heap: "WBLeftistHeap[T]") -> "WBLeftistHeap[T]":
        """Return an independent heap with the same shape and elements (O(n))."""
        if not isinstance(heap, WBLeftistHeap):
            raise TypeError(f"cannot copy {type(heap).__name__} as WBLeftistHeap")
        clone = cls(heap._comparator)
        clone._root = _copy_tree(heap._root)
        return clone

    @classmethod
    def meld(cls, first: "WBLeftistHeap[T]", second: "WBLeftistHeap[T]") -> "WBLeftistHeap[T]":
        """Return a new heap holding the elements of both operands (O(log n)).

        Both operands are left empty.
        """
        first._check_mergeable(second)
        heap = cls(first._comparator)
        heap._root = heap._merge(first._root, second._root)
        first._root = None
        second._root = None
        return heap

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _merge(self, node1: Optional[_Node[T]], node2: Optional[_Node[T]]) -> Optional[_Node[T]]:
        """Merge two trees along their right spines, reusing their nodes."""
        if node1 is None:
            return node2
        if node2 is None:
            return node1

        # node1 keeps the smaller root; ties stay with node1
        if self._comparator(node1.element, node2.element) > 0:
            node1, node2 = node2, node1

        node1.right = self._merge(node1.right, node2)

        weight_left = _weight(node1.left)
        weight_right = _weight(node1.right)
        node1.weight = weight_left + weight_right + 1

        # heavier subtree goes left
        if weight_left < weight_right:
            node1.left, node1.right = node1.right, node1.left

        return node1

    def _merge_all(self, elements: Iterable[T]) -> Optional[_Node[T]]:
        """Build one tree out of `elements` in O(n) by pairwise merging.

        Singletons are queued; the two front trees are repeatedly merged and
        the result goes to the back. Each round halves the number of trees
        while doubling their size, so the spine work sums to O(n).
        """
        capacity = max(len(elements), 1) if isinstance(elements, Sized) else NodeQueue._INITIAL_CAPACITY
        queue: NodeQueue[_Node[T]] = NodeQueue(capacity, (_Node(e) for e in elements))
        if not queue:
            return None
        while len(queue) > 1:
            first = queue.dequeue()
            second = queue.dequeue()
            queue.enqueue(self._merge(first, second))
        return queue.dequeue()

    def _check_mergeable(self, other: "WBLeftistHeap[T]") -> None:
        if not isinstance(other, WBLeftistHeap):
            raise TypeError(f"cannot merge {type(other).__name__} into WBLeftistHeap")
        if other is self:
            raise InvalidArgumentError("cannot merge a heap with itself")
        if other._comparator is not self._comparator:
            raise InvalidArgumentError("cannot merge heaps ordered by different comparators")

    # -----------------------------
    # Public API
    # -----------------------------
    @property
    def comparator(self) -> Comparator:
        return self._comparator

    def is_empty(self) -> bool:
        """True if the heap holds no element (O(1))."""
        return self._root is None

    def size(self) -> int:
        """Number of elements, read from the root's weight (O(1))."""
        return _weight(self._root)

    def clear(self) -> None:
        """Discard every element (O(1))."""
        self._root = None

    def insert(self, element: T) -> None:
        """Add `element` to the heap (O(log n))."""
        self._root = self._merge(self._root, _Node(element))

    def extend(self, elements: Iterable[T]) -> None:
        """Add all `elements`: build them into a tree in O(k), then merge it in."""
        self._root = self._merge(self._root, self._merge_all(elements))

    def merge(self, other: "WBLeftistHeap[T]") -> None:
        """Move every element of `other` into this heap (O(log n)).

        `other` is left empty. Both heaps must share the same comparator.
        """
        self._check_mergeable(other)
        self._root = self._merge(self._root, other._root)
        other._root = None

    def minimum(self) -> T:
        """Return the smallest element without removing it (O(1))."""
        if self._root is None:
            raise EmptyHeapError("minimum on empty heap")
        return self._root.element

    def delete_minimum(self) -> None:
        """Remove the smallest element (O(log n))."""
        if self._root is None:
            raise EmptyHeapError("delete_minimum on empty heap")
        self._root = self._merge(self._root.left, self._root.right)

    def copy(self) -> "WBLeftistHeap[T]":
        return WBLeftistHeap.copy_of(self)

    def __copy__(self) -> "WBLeftistHeap[T]":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "WBLeftistHeap[T]":
        clone = type(self)(self._comparator)
        memo[id(self)] = clone
        clone._root = _copy_tree(self._root, lambda element: copy.deepcopy(element, memo))
        return clone

    def __getstate__(self) -> tuple:
        return self._comparator, _flatten(self._root)

    def __setstate__(self, state: tuple) -> None:
        self._comparator, entries = state
        self._root = _unflatten(entries)

    def to_list(self) -> List[T]:
        return list(self)

    def __iter__(self) -> Iterator[T]:
        # Pre-order walk (heap order, not sorted order)
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.element
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def __repr__(self) -> str:
        """Render the tree as nested ``Node(left, element, right)`` terms."""
        parts = [f"{type(self).__name__}("]
        stack: list = [")", self._root]
        while stack:
            item = stack.pop()
            if item is None:
                parts.append("None")
            elif isinstance(item, _Node):
                parts.append("Node(")
                stack.extend((")", item.right, ", ", repr(item.element), ", ", item.left))
            else:
                parts.append(item)
        return "".join(parts)


def _copy_tree(
    root: Optional[_Node[T]],
    copy_element: Optional[Callable[[T], T]] = None,
) -> Optional[_Node[T]]:
    """Clone every node of a tree with an explicit stack (left paths can be long).

    Elements are shared unless `copy_element` is given.
    """
    if root is None:
        return None
    clone_of = copy_element or (lambda element: element)
    clone = _Node(clone_of(root.element), root.weight)
    stack = [(root, clone)]
    while stack:
        source, target = stack.pop()
        if source.left is not None:
            target.left = _Node(clone_of(source.left.element), source.left.weight)
            stack.append((source.left, target.left))
        if source.right is not None:
            target.right = _Node(clone_of(source.right.element), source.right.weight)
            stack.append((source.right, target.right))
    return clone


def _flatten(root: Optional[_Node[T]]) -> List[Tuple[Any, int, bool, bool]]:
    """Pre-order list of ``(element, weight, has_left, has_right)`` entries."""
    entries = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        entries.append((node.element, node.weight, node.left is not None, node.right is not None))
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return entries


def _unflatten(entries: Iterable[Tuple[Any, int, bool, bool]]) -> Optional[_Node[T]]:
    """Rebuild the tree written by :func:`_flatten`."""
    root = None
    # child slots still waiting for a node; the top one comes next in pre-order
    pending: List[Tuple[_Node[T], str]] = []
    for element, weight, has_left, has_right in entries:
        node = _Node(element, weight)
        if pending:
            parent, side = pending.pop()
            setattr(parent, side, node)
        else:
            root = node
        if has_right:
            pending.append((node, "right"))
        if has_left:
            pending.append((node, "left"))
    return root
