import os
import sys

import pytest

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from meldheap.datastructures import InvalidArgumentError, NodeQueue


def test_fifo_order():
    q = NodeQueue(it=[1, 2, 3])
    assert len(q) == 3
    assert [q.dequeue(), q.dequeue(), q.dequeue()] == [1, 2, 3]
    assert len(q) == 0
    assert not q


def test_wraparound_then_growth_keeps_order():
    q = NodeQueue(capacity=2)
    q.enqueue("a")
    q.enqueue("b")
    assert q.dequeue() == "a"
    q.enqueue("c")  # wraps into slot 0
    q.enqueue("d")  # full ring: unrolled into a larger buffer
    assert list(q) == ["b", "c", "d"]
    assert q._capacity == 4
    assert [q.dequeue() for _ in range(3)] == ["b", "c", "d"]


def test_many_items_through_small_ring():
    q = NodeQueue(capacity=1)
    out = []
    for i in range(100):
        q.enqueue(i)
        q.enqueue(i + 1000)
        out.append(q.dequeue())
    assert len(q) == 100
    out.extend(q.dequeue() for _ in range(len(q)))
    assert sorted(out) == sorted(list(range(100)) + [i + 1000 for i in range(100)])


def test_dequeue_from_empty():
    q = NodeQueue()
    with pytest.raises(IndexError):
        q.dequeue()


@pytest.mark.parametrize("capacity", [0, -3])
def test_non_positive_capacity_rejected(capacity):
    with pytest.raises(InvalidArgumentError):
        NodeQueue(capacity)
    with pytest.raises(ValueError):
        NodeQueue(capacity)
