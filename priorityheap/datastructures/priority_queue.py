"""Priority-queue presets over :class:`BinaryHeap`.

They only pick the comparator; push/pop/size behave exactly as on the heap.
A custom comparator can still be passed in, or assigned later.
"""

from __future__ import annotations
from typing import Iterable, Optional, TypeVar

from .comparators import Comparator, ascending, descending
from .heap import BinaryHeap

T = TypeVar("T")


class MinPriorityQueue(BinaryHeap[T]):
    """pop() returns the smallest element first."""

    __slots__ = ()

    def __init__(
        self,
        it: Optional[Iterable[T]] = None,
        comparator: Optional[Comparator] = None,
    ) -> None:
        super().__init__(it, comparator if comparator is not None else descending)


class MaxPriorityQueue(BinaryHeap[T]):
    """pop() returns the largest element first."""

    __slots__ = ()

    def __init__(
        self,
        it: Optional[Iterable[T]] = None,
        comparator: Optional[Comparator] = None,
    ) -> None:
        super().__init__(it, comparator if comparator is not None else ascending)
