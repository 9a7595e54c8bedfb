"""
Quick sort with a random pivot (Lomuto partition scheme).
"""

from __future__ import annotations

import random
from typing import Any, List, Optional

from sort_errors import InvariantError, RangeError
from sort_utils import Order, OrderLike, as_order, precedes, resolve_range, swap


def partition(A: List[Any], low: int, high: int, order: OrderLike = Order.ASCENDING) -> int:
    """Partition ``A[low..high]`` around a random pivot and return its final index.

    Everything left of the returned index strictly precedes the pivot under
    ``order``; everything right of it does not.
    """
    low, high = resolve_range(A, high, low)
    if low > high:
        raise RangeError("cannot partition an empty range")
    return _partition(A, low, high, as_order(order))


def _partition(A: List[Any], low: int, high: int, order: Order) -> int:
    if low == high:
        return low

    pivot_index = low + random.randrange(high - low)
    if not low <= pivot_index < high:
        raise InvariantError(f"pivot index {pivot_index} drawn outside [{low}, {high})")

    pivot = A[pivot_index]
    swap(A, pivot_index, high)

    j = low
    for i in range(low, high):
        if precedes(A[i], pivot, order):
            swap(A, i, j)
            j += 1

    swap(A, high, j)
    return j


def quick_sort(A: List[Any], high: Optional[int] = None, low: int = 0, order: OrderLike = Order.ASCENDING) -> None:
    low, high = resolve_range(A, high, low)
    _quick_sort(A, low, high, as_order(order))


def _quick_sort(A: List[Any], low: int, high: int, order: Order) -> None:
    # Recurse into the smaller side and loop over the larger one so the
    # stack stays O(log n) deep.
    while low < high:
        pivot = _partition(A, low, high, order)
        if pivot - low < high - pivot:
            _quick_sort(A, low, pivot - 1, order)
            low = pivot + 1
        else:
            _quick_sort(A, pivot + 1, high, order)
            high = pivot - 1
