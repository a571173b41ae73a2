"""Exception types raised by the heap and its priority-queue presets."""


class HeapError(Exception):
    """Base class for every error raised by this package."""


class InvalidComparatorError(HeapError, TypeError):
    """Raised when a comparator (or key function) is not callable."""


class HeapIndexError(HeapError, IndexError):
    """Raised when a comparison touches a slot that holds no element.

    This only happens if the sift-up/sift-down index arithmetic is wrong,
    so it is never caught inside the package.
    """
