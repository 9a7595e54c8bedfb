"""
Top-down merge sort with an insertion-sort cutoff.

When the left half of a split holds fewer than ``INSERTION_SORT_THRESHOLD``
elements, both halves are insertion-sorted in place and then merged instead
of recursing further.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from elementary_sorts import insertion_sort
from sort_errors import RangeError
from sort_utils import Order, OrderLike, as_order, precedes, resolve_range

INSERTION_SORT_THRESHOLD = 100


def merge(A: List[Any], low: int, mid: int, high: int, order: OrderLike = Order.ASCENDING) -> None:
    """Merge the sorted runs ``A[low..mid]`` and ``A[mid+1..high]``.

    A right element is taken only when it strictly precedes the left one, so
    ties keep the left run first and the merge is stable.
    """
    low, high = resolve_range(A, high, low)
    if low > high:
        return
    if not low <= mid <= high:
        raise RangeError(f"mid={mid} is outside [{low}, {high}]")
    _merge(A, low, mid, high, as_order(order))


def _merge(A: List[Any], low: int, mid: int, high: int, order: Order) -> None:
    B: List[Any] = []
    i, j = low, mid + 1
    while i <= mid and j <= high:
        if precedes(A[j], A[i], order):
            B.append(A[j])
            j += 1
        else:
            B.append(A[i])
            i += 1

    # At most one run still has elements left
    B.extend(A[i : mid + 1])
    B.extend(A[j : high + 1])

    A[low : high + 1] = B


def merge_sort(A: List[Any], high: Optional[int] = None, low: int = 0, order: OrderLike = Order.ASCENDING) -> None:
    low, high = resolve_range(A, high, low)
    _merge_sort(A, low, high, as_order(order))


def _merge_sort(A: List[Any], low: int, high: int, order: Order) -> None:
    if low >= high:
        return

    mid = low + (high - low) // 2
    if mid - low < INSERTION_SORT_THRESHOLD:
        logging.debug("Merge sort: insertion sort on [%d, %d] and [%d, %d]", low, mid, mid + 1, high)
        insertion_sort(A, mid, low, order)
        insertion_sort(A, high, mid + 1, order)
    else:
        _merge_sort(A, low, mid, order)
        _merge_sort(A, mid + 1, high, order)
    _merge(A, low, mid, high, order)
