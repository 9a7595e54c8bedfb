"""
Integer-only distribution sorts: counting sort and LSD radix sort.

Both accept non-negative ints only. Anything else raises ``DomainError``.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from sort_errors import DomainError
from sort_utils import Order, OrderLike, as_order, get_max, resolve_range


def _check_keys(A: List[int], low: int, high: int) -> None:
    for i in range(low, high + 1):
        v = A[i]
        if not isinstance(v, int):
            raise DomainError(f"A[{i}] = {v!r} is not an integer")
        if v < 0:
            raise DomainError(f"A[{i}] = {v} is negative")


def counting_sort(
    A: List[int], high: Optional[int] = None, low: int = 0, exp: int = 0, order: OrderLike = Order.ASCENDING
) -> None:
    """Stable counting sort of ``A[low..high]``.

    With ``exp == 0`` elements are bucketed by value (one bucket per value up
    to the maximum). Otherwise they are bucketed by the decimal digit
    ``(v // exp) % 10``, which is the pass radix sort runs per digit.
    """
    low, high = resolve_range(A, high, low)
    order = as_order(order)
    if isinstance(exp, bool) or not isinstance(exp, int):
        raise TypeError(f"exp must be an int, got {exp!r}")
    if exp < 0:
        raise DomainError(f"exp must be non-negative, got {exp}")
    if low > high:
        return
    _check_keys(A, low, high)
    _count_sort(A, low, high, exp, order)


def _count_sort(A: List[int], low: int, high: int, exp: int, order: Order) -> None:
    key: Callable[[int], int]
    if exp:
        size = 9
        key = lambda v: (v // exp) % 10
    else:
        size = get_max(A, high, low)
        key = lambda v: v

    C = [0] * (size + 1)
    output = [0] * (high - low + 1)

    # 1) Count frequency of each key
    for i in range(low, high + 1):
        C[key(A[i])] += 1

    # 2) Convert count to cumulative count (from the top for descending)
    if order is Order.DESCENDING:
        for k in range(size - 1, -1, -1):
            C[k] += C[k + 1]
    else:
        for k in range(1, size + 1):
            C[k] += C[k - 1]

    # 3) Build the output array (RIGHT -> LEFT for stability)
    for i in range(high, low - 1, -1):
        k = key(A[i])
        output[C[k] - 1] = A[i]
        C[k] -= 1

    # 4) Copy back to A
    A[low : high + 1] = output


def radix_sort(A: List[int], high: Optional[int] = None, low: int = 0, order: OrderLike = Order.ASCENDING) -> None:
    low, high = resolve_range(A, high, low)
    order = as_order(order)
    if low > high:
        return
    _check_keys(A, low, high)

    max_value = get_max(A, high, low)

    exp = 1
    while max_value // exp > 0:
        logging.debug("Radix sort pass: exp=%d (max=%d)", exp, max_value)
        _count_sort(A, low, high, exp, order)
        exp *= 10
