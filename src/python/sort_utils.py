"""
Helpers shared by every sort in this repo.

All sorts work in place on an inclusive range ``[low, high]`` of a list and
take an ``order`` flag. ``high`` defaults to the last index, ``low`` to 0 and
``order`` to ascending.
"""

from __future__ import annotations

import enum
import sys
from typing import Any, List, Optional, TextIO, Tuple, Union

from sort_errors import RangeError


class Order(enum.Enum):
    """Sort direction. The values match the plain boolean flag (True = descending)."""

    ASCENDING = False
    DESCENDING = True


OrderLike = Union[Order, bool, int]


def as_order(order: OrderLike) -> Order:
    """Normalise an ``Order`` or the plain 0/1 flag; anything else is rejected."""
    if isinstance(order, Order):
        return order
    if not isinstance(order, int):
        raise TypeError(f"order must be an Order or a bool, got {order!r}")
    if order not in (0, 1):
        raise ValueError(f"order flag must be 0 or 1, got {order}")
    return Order(bool(order))


def precedes(a: Any, b: Any, order: Order) -> bool:
    """True when ``a`` must come strictly before ``b`` under ``order``."""
    if order is Order.DESCENDING:
        return b < a
    return a < b


def resolve_range(A: List[Any], high: Optional[int], low: int = 0) -> Tuple[int, int]:
    """Fill in the default ``high`` and check both bounds against ``A``.

    A range with ``low > high`` is empty and valid; callers treat it as a no-op.
    """
    n = len(A)
    if high is None:
        high = n - 1
    if not -1 <= high < n:
        raise RangeError(f"high={high} is outside a buffer of length {n}")
    if not 0 <= low <= n:
        raise RangeError(f"low={low} is outside a buffer of length {n}")
    return low, high


def swap(A: List[Any], i: int, j: int) -> None:
    A[i], A[j] = A[j], A[i]


def get_max(A: List[int], high: int, low: int = 0) -> int:
    """Largest value in ``A[low..high]``."""
    low, high = resolve_range(A, high, low)
    if low > high:
        raise RangeError("cannot take the maximum of an empty range")
    max_value = A[low]
    for i in range(low + 1, high + 1):
        if A[i] > max_value:
            max_value = A[i]
    return max_value


def display(A: List[Any], high: Optional[int] = None, low: int = 0, file: Optional[TextIO] = None) -> None:
    low, high = resolve_range(A, high, low)
    print(" ".join(str(v) for v in A[low : high + 1]), file=file or sys.stdout)
