"""Exceptions raised at the public boundary of the sorting routines."""


class SortError(Exception):
    """Base class for every error raised by the sorting routines."""


class RangeError(SortError, IndexError):
    """``low``/``high`` do not describe a range inside the buffer."""


class DomainError(SortError, ValueError):
    """A key the integer distribution sorts cannot bucket (non-int or negative)."""


class InvariantError(SortError, AssertionError):
    """An internal invariant was broken, e.g. a pivot drawn outside ``[low, high)``."""
