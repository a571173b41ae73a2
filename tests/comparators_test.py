import os
import sys

import pytest

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from priorityheap.datastructures.comparators import ascending, by_key, descending
from priorityheap.errors import InvalidComparatorError


@pytest.mark.parametrize("a, b, expected", [(1, 2, -1), (2, 2, 0), (3, 2, 1), ("a", "b", -1)])
def test_ascending(a, b, expected):
    assert ascending(a, b) == expected
    assert descending(a, b) == -expected


def test_ascending_works_on_floats_and_tuples():
    assert ascending(0.5, 0.25) == 1
    assert ascending((1, "b"), (1, "a")) == 1


def test_by_key_orders_on_extracted_key():
    cmp = by_key(len)
    assert cmp("ab", "abc") < 0
    assert cmp("abc", "xyz") == 0
    assert cmp("abcd", "a") > 0


def test_by_key_reverse():
    cmp = by_key(abs, reverse=True)
    assert cmp(-5, 2) < 0
    assert cmp(1, -3) > 0


def test_by_key_rejects_non_callable():
    with pytest.raises(InvalidComparatorError):
        by_key("price")
