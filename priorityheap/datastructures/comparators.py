from __future__ import annotations
from typing import Any, Callable

from ..errors import InvalidComparatorError

# A comparator returns a negative int, zero or a positive int, like cmp() in Python 2.
Comparator = Callable[[Any, Any], int]


def ascending(a: Any, b: Any) -> int:
    """Natural order: negative if a < b, zero if equal, positive if a > b."""
    return (a > b) - (a < b)


def descending(a: Any, b: Any) -> int:
    """Reverse of :func:`ascending`."""
    return (b > a) - (b < a)


def by_key(key: Callable[[Any], Any], reverse: bool = False) -> Comparator:
    """Build a comparator that orders elements by ``key(element)``.

    >>> cmp = by_key(len)
    >>> cmp("ab", "abc") < 0
    True
    """
    if not callable(key):
        raise InvalidComparatorError(f"key must be callable, got {key!r}")

    if reverse:
        def compare(a: Any, b: Any) -> int:
            return descending(key(a), key(b))
    else:
        def compare(a: Any, b: Any) -> int:
            return ascending(key(a), key(b))

    return compare
