"""
Public entry point: every sort, the shared helpers and a name -> function registry.
"""

from typing import List, Optional

from distribution_sorts import counting_sort, radix_sort
from elementary_sorts import binary_insertion_sort, insertion_sort, selection_sort
from heap_sort import build_heap, heap_sort, max_heapify, min_heapify
from merge_sort import INSERTION_SORT_THRESHOLD, merge, merge_sort
from quick_sort import partition, quick_sort
from sort_errors import DomainError, InvariantError, RangeError, SortError
from sort_utils import Order, OrderLike, display, get_max, swap


def counting_sort_by_value(
    A: List[int], high: Optional[int] = None, low: int = 0, order: OrderLike = Order.ASCENDING
) -> None:
    """``counting_sort`` with the common ``(A, high, low, order)`` shape (value buckets, ``exp=0``)."""
    counting_sort(A, high, low, order=order)


ALGORITHMS = {
    "insertion": insertion_sort,
    "binary_insertion": binary_insertion_sort,
    "selection": selection_sort,
    "merge": merge_sort,
    "quick": quick_sort,
    "heap": heap_sort,
    "counting": counting_sort_by_value,
    "radix": radix_sort,
}

# Only defined for non-negative ints
INTEGER_ONLY = frozenset({"counting", "radix"})

# Sorts that keep equal elements in their original relative order
STABLE = frozenset({"insertion", "binary_insertion", "merge", "counting", "radix"})

__all__ = [
    "ALGORITHMS",
    "INSERTION_SORT_THRESHOLD",
    "INTEGER_ONLY",
    "STABLE",
    "DomainError",
    "InvariantError",
    "Order",
    "RangeError",
    "SortError",
    "binary_insertion_sort",
    "build_heap",
    "counting_sort",
    "counting_sort_by_value",
    "display",
    "get_max",
    "heap_sort",
    "insertion_sort",
    "max_heapify",
    "merge",
    "merge_sort",
    "min_heapify",
    "partition",
    "quick_sort",
    "radix_sort",
    "selection_sort",
    "swap",
]
