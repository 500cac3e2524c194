import os
import sys

import pytest

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from meldheap.analysis.shape import check_invariants, describe, height, right_spine_length, spine_bound
from meldheap.datastructures import InvariantViolation, WBLeftistHeap
from meldheap.datastructures.heap import _Node


def heap_with_root(root):
    h = WBLeftistHeap()
    h._root = root
    return h


@pytest.mark.parametrize("n, bound", [(0, 0), (1, 1), (2, 1), (3, 2), (6, 2), (7, 3), (1000, 9)])
def test_spine_bound(n, bound):
    assert spine_bound(n) == bound


def test_valid_tree_returns_node_count():
    h = WBLeftistHeap.of(5, 3, 8, 1, 1)
    assert check_invariants(h) == 5
    assert check_invariants(WBLeftistHeap()) == 0


def test_detects_wrong_weight():
    h = heap_with_root(_Node(1, weight=5))
    with pytest.raises(InvariantViolation, match="weight"):
        check_invariants(h)


def test_detects_right_heavy_node():
    h = heap_with_root(_Node(1, 2, left=None, right=_Node(2)))
    with pytest.raises(InvariantViolation, match="left weight"):
        check_invariants(h)


def test_detects_heap_order_violation():
    h = heap_with_root(_Node(5, 2, left=_Node(1)))
    with pytest.raises(InvariantViolation, match="heap order"):
        check_invariants(h)


def test_violation_is_an_assertion_error():
    h = heap_with_root(_Node(5, 2, left=_Node(1)))
    with pytest.raises(AssertionError):
        check_invariants(h)


def test_metrics_on_small_heap():
    h = WBLeftistHeap.of(1, 2)
    assert height(h) == 2
    assert right_spine_length(h) == 1
    assert height(WBLeftistHeap()) == 0
    assert right_spine_length(WBLeftistHeap()) == 0


def test_describe():
    info = describe(WBLeftistHeap.of(5, 3, 8, 1))
    assert info["size"] == 4
    assert info["minimum"] == 1
    assert info["spine_bound"] == 2
    assert 1 <= info["right_spine"] <= info["spine_bound"]
    assert describe(WBLeftistHeap())["minimum"] is None
