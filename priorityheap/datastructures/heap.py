from __future__ import annotations
from typing import Any, Generic, Iterable, Iterator, List, Optional, TypeVar

from ..errors import HeapIndexError, InvalidComparatorError
from .comparators import Comparator, ascending

T = TypeVar("T")


class BinaryHeap(Generic[T]):
    """A binary heap ordered by a replaceable comparator.

    The element with the greatest comparator value sits at the root, so the
    default (ascending) comparator gives a max-heap and ``descending`` gives a
    min-heap.

    Storage is 1-indexed: slot 0 of ``_data`` is a sentinel that never holds an
    element, which keeps parent(k) = k // 2 and children(k) = 2k, 2k + 1.
    """

    __slots__ = ("_data", "_comparator")

    def __init__(
        self,
        it: Optional[Iterable[T]] = None,
        comparator: Optional[Comparator] = None,
    ) -> None:
        self._data: List[Any] = [None]
        self._comparator: Comparator = ascending
        if comparator is not None:
            self.comparator = comparator
        if it is not None:
            self._data.extend(it)
            self._heapify()  # Bulk build in O(n) instead of repeated pushes

    # -----------------------------
    # Ordering
    # -----------------------------
    @property
    def comparator(self) -> Comparator:
        return self._comparator

    @comparator.setter
    def comparator(self, fn: Comparator) -> None:
        """Replace the ordering. Existing elements are NOT reordered."""
        if not callable(fn):
            raise InvalidComparatorError(f"invalid comparator function: {fn!r}")
        self._comparator = fn

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _less(self, i: int, j: int) -> bool:
        """True if slot ``i`` orders strictly before slot ``j``."""
        n = len(self._data) - 1
        if not (1 <= i <= n and 1 <= j <= n):
            raise HeapIndexError(f"_less: invalid heap index (i={i}, j={j}, size={n})")
        return self._comparator(self._data[i], self._data[j]) < 0

    def _swap(self, i: int, j: int) -> None:
        data = self._data
        data[i], data[j] = data[j], data[i]

    @staticmethod
    def _parent(k: int) -> int:
        return k >> 1

    def _swim(self, k: int) -> None:
        """Move slot ``k`` up while its parent orders before it."""
        while k > 1:
            parent = self._parent(k)
            if not self._less(parent, k):
                break
            self._swap(parent, k)
            k = parent

    def _sink(self, k: int) -> None:
        """Move slot ``k`` down while one of its children orders after it."""
        n = len(self._data) - 1
        while 2 * k <= n:
            j = 2 * k
            if j < n and self._less(j, j + 1):
                j += 1
            if not self._less(k, j):
                break
            self._swap(k, j)
            k = j

    def _heapify(self) -> None:
        """Transform the current storage into a heap in-place in O(n) time."""
        for k in range(self.size() // 2, 0, -1):
            self._sink(k)

    # -----------------------------
    # Public API
    # -----------------------------
    def size(self) -> int:
        """Number of elements in the heap (O(1))."""
        return len(self._data) - 1

    def push(self, item: T) -> None:
        """Push item onto the heap (O(log n))."""
        self._data.append(item)
        self._swim(self.size())

    def pop(self) -> Optional[T]:
        """Remove and return the root element, or None if the heap is empty (O(log n))."""
        n = self.size()
        if n == 0:
            return None
        data = self._data
        top = data[1]
        last = data.pop()
        if n > 1:
            data[1] = last
            self._sink(1)
        return top

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return self.size() > 0

    def to_list(self) -> List[T]:
        return self._data[1:]

    def __iter__(self) -> Iterator[T]:
        # Iterate over the internal array (heap order, not sorted order)
        return iter(self._data[1:])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data[1:]!r})"
