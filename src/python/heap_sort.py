"""
Heap sort over an arbitrary sub-range.

The heap is laid out over ``A[low..high]`` with the root at ``low``, so the
children of ``pos`` sit at ``2 * (pos - low) + low + 1`` and ``+ 2``.
Ascending order uses a max-heap, descending order a min-heap.
"""

from __future__ import annotations

from typing import Any, List, Optional

from sort_errors import RangeError
from sort_utils import Order, OrderLike, as_order, precedes, resolve_range, swap


def _heapify(A: List[Any], low: int, high: int, pos: int, order: Order) -> None:
    left = 2 * (pos - low) + low + 1
    right = left + 1
    top = pos

    if left <= high and precedes(A[top], A[left], order):
        top = left
    if right <= high and precedes(A[top], A[right], order):
        top = right

    if top != pos:
        swap(A, pos, top)
        _heapify(A, low, high, top, order)


def _check_node(A: List[Any], low: int, high: int, pos: int) -> None:
    resolve_range(A, high, low)
    if not low <= pos <= high:
        raise RangeError(f"pos={pos} is outside [{low}, {high}]")


def max_heapify(A: List[Any], low: int, high: int, pos: int) -> None:
    """Sift ``A[pos]`` down until no child is larger, assuming both subtrees are max-heaps."""
    _check_node(A, low, high, pos)
    _heapify(A, low, high, pos, Order.ASCENDING)


def min_heapify(A: List[Any], low: int, high: int, pos: int) -> None:
    """Sift ``A[pos]`` down until no child is smaller, assuming both subtrees are min-heaps."""
    _check_node(A, low, high, pos)
    _heapify(A, low, high, pos, Order.DESCENDING)


def build_heap(A: List[Any], low: int, high: int, order: OrderLike = Order.ASCENDING) -> None:
    low, high = resolve_range(A, high, low)
    _build_heap(A, low, high, as_order(order))


def _build_heap(A: List[Any], low: int, high: int, order: Order) -> None:
    # Last internal node of a heap holding high - low + 1 elements
    last_parent = low + (high - low + 1) // 2 - 1
    for pos in range(last_parent, low - 1, -1):
        _heapify(A, low, high, pos, order)


def heap_sort(A: List[Any], high: Optional[int] = None, low: int = 0, order: OrderLike = Order.ASCENDING) -> None:
    low, high = resolve_range(A, high, low)
    order = as_order(order)

    _build_heap(A, low, high, order)
    for end in range(high, low, -1):
        swap(A, low, end)
        _heapify(A, low, end - 1, low, order)
