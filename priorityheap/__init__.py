"""Binary heap with a pluggable comparator, plus min/max priority-queue presets.

Usage example:
    from priorityheap import BinaryHeap, MinPriorityQueue

    heap = BinaryHeap()
    for x in (1, 9, 6):
        heap.push(x)
    heap.pop()  # 9

    pq = MinPriorityQueue([3, 1, 2])
    pq.pop()  # 1
"""

from .datastructures import (
    BinaryHeap,
    MaxPriorityQueue,
    MinPriorityQueue,
    ascending,
    by_key,
    descending,
)
from .errors import HeapError, HeapIndexError, InvalidComparatorError

__all__ = [
    "BinaryHeap",
    "MinPriorityQueue",
    "MaxPriorityQueue",
    "ascending",
    "descending",
    "by_key",
    "HeapError",
    "HeapIndexError",
    "InvalidComparatorError",
]
