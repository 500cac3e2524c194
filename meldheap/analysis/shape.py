"""Structural inspection of weight-biased leftist heaps.

These helpers walk a heap's private tree to report its shape and to verify
the invariants the merge routine maintains:

- heap order: a node's element is <= its children's (by the heap comparator)
- weight consistency: weight == 1 + weight(left) + weight(right)
- weight bias: weight(left) >= weight(right)

All walks use an explicit stack so degenerate (long left path) trees are fine.
"""

from __future__ import annotations

from typing import Any

from ..datastructures.errors import InvariantViolation
from ..datastructures.heap import WBLeftistHeap, _weight


# -----------------------------------------------------------
# Shape metrics
# -----------------------------------------------------------

def right_spine_length(heap: WBLeftistHeap) -> int:
    """Return the number of nodes on the path of right children from the root."""
    length = 0
    node = heap._root
    while node is not None:
        length += 1
        node = node.right
    return length


def spine_bound(n: int) -> int:
    """Upper bound ``floor(log2(n + 1))`` on the right spine of an n-node tree."""
    return (n + 1).bit_length() - 1


def height(heap: WBLeftistHeap) -> int:
    """Return the number of nodes on the longest root-to-leaf path (0 if empty)."""
    if heap._root is None:
        return 0
    best = 0
    stack = [(heap._root, 1)]
    while stack:
        node, depth = stack.pop()
        best = max(best, depth)
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, depth + 1))
    return best


# -----------------------------------------------------------
# Invariant checks
# -----------------------------------------------------------

def check_invariants(heap: WBLeftistHeap) -> int:
    """Verify every structural invariant and return the node count.

    Raises :class:`InvariantViolation` describing the first node found that
    breaks heap order, weight consistency or the weight bias.
    """
    compare = heap.comparator
    count = 0
    stack = [heap._root] if heap._root is not None else []
    while stack:
        node = stack.pop()
        count += 1
        wl, wr = _weight(node.left), _weight(node.right)
        if node.weight != 1 + wl + wr:
            raise InvariantViolation(
                f"weight of node {node.element!r} is {node.weight}, expected {1 + wl + wr}"
            )
        if wl < wr:
            raise InvariantViolation(
                f"node {node.element!r} has left weight {wl} < right weight {wr}"
            )
        for child in (node.left, node.right):
            if child is None:
                continue
            if compare(node.element, child.element) > 0:
                raise InvariantViolation(
                    f"heap order broken: {node.element!r} above {child.element!r}"
                )
            stack.append(child)

    return count


# -----------------------------------------------------------
# Reporting
# -----------------------------------------------------------

def describe(heap: WBLeftistHeap) -> dict[str, Any]:
    """Summarize a heap's shape as a plain ``dict`` (used by the CLI)."""
    n = heap.size()
    return {
        "size": n,
        "minimum": None if heap.is_empty() else heap.minimum(),
        "height": height(heap),
        "right_spine": right_spine_length(heap),
        "spine_bound": spine_bound(n),
    }
