import os
import sys

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import priorityheap
from priorityheap import BinaryHeap, MaxPriorityQueue, MinPriorityQueue, descending


def test_public_exports():
    for name in priorityheap.__all__:
        assert hasattr(priorityheap, name)


def test_heap_push_pop():
    h = BinaryHeap([5, 2, 9, 1])
    assert h.pop() == 9
    assert h.pop() == 5
    h.push(10)
    assert h.pop() == 10
    assert h.size() == 2


def test_min_heap_via_descending():
    h = BinaryHeap([5, 2, 9, 1], comparator=descending)
    assert h.pop() == 1
    h.push(0)
    assert h.pop() == 0


def test_priority_queue_presets():
    lo = MinPriorityQueue([4, 2, 3])
    hi = MaxPriorityQueue([4, 2, 3])
    assert (lo.pop(), hi.pop()) == (2, 4)
    assert (len(lo), len(hi)) == (2, 2)
