"""
Quadratic in-place sorts: insertion, binary insertion and selection.

Each takes ``(A, high=None, low=0, order=Order.ASCENDING)`` and sorts
``A[low..high]`` in place. Any element type ordered by ``<`` works.
"""

from __future__ import annotations

from typing import Any, List, Optional

from sort_utils import Order, OrderLike, as_order, precedes, resolve_range, swap


def insertion_sort(A: List[Any], high: Optional[int] = None, low: int = 0, order: OrderLike = Order.ASCENDING) -> None:
    """Stable insertion sort of ``A[low..high]``."""
    low, high = resolve_range(A, high, low)
    order = as_order(order)

    for i in range(low + 1, high + 1):
        key = A[i]
        j = i
        # Shift everything the key strictly precedes one slot to the right
        while j > low and precedes(key, A[j - 1], order):
            A[j] = A[j - 1]
            j -= 1
        A[j] = key


def binary_insertion_sort(
    A: List[Any], high: Optional[int] = None, low: int = 0, order: OrderLike = Order.ASCENDING
) -> None:
    """Insertion sort that finds each insertion point with a binary search.

    The search returns the upper bound, so keys equal to the one being
    inserted stay in front of it and the sort remains stable. Elements are
    still moved one adjacent swap at a time.
    """
    low, high = resolve_range(A, high, low)
    order = as_order(order)

    for i in range(low + 1, high + 1):
        key = A[i]
        lo, hi = low, i
        while lo < hi:
            mid = lo + (hi - lo) // 2
            if precedes(key, A[mid], order):
                hi = mid
            else:
                lo = mid + 1

        for j in range(i, lo, -1):
            swap(A, j - 1, j)


def selection_sort(A: List[Any], high: Optional[int] = None, low: int = 0, order: OrderLike = Order.ASCENDING) -> None:
    low, high = resolve_range(A, high, low)
    order = as_order(order)

    for i in range(low, high):
        best = i
        for j in range(i + 1, high + 1):
            if precedes(A[j], A[best], order):
                best = j
        if best != i:
            swap(A, i, best)
