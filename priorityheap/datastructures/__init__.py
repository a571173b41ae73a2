from .comparators import ascending, by_key, descending
from .heap import BinaryHeap
from .priority_queue import MaxPriorityQueue, MinPriorityQueue

__all__ = [
    "BinaryHeap",
    "MinPriorityQueue",
    "MaxPriorityQueue",
    "ascending",
    "descending",
    "by_key",
]
