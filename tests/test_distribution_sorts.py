import logging
import random

import pytest

from distribution_sorts import counting_sort, radix_sort
from sort_errors import DomainError, RangeError
from sort_utils import Order


class TaggedInt(int):
    def __new__(cls, value, tag):
        obj = int.__new__(cls, value)
        obj.tag = tag
        return obj


def test_counting_sort_example():
    A = [4, 2, 2, 8, 3, 3, 1]
    counting_sort(A)
    assert A == [1, 2, 2, 3, 3, 4, 8]


def test_counting_sort_descending():
    A = [4, 2, 2, 8, 3, 3, 1, 0]
    counting_sort(A, order=Order.DESCENDING)
    assert A == [8, 4, 3, 3, 2, 2, 1, 0]


def test_counting_sort_by_digit():
    A = [170, 45, 75, 90, 802, 24, 2, 66]
    counting_sort(A, exp=1)
    assert A == [170, 90, 802, 2, 24, 45, 75, 66]

    counting_sort(A, exp=10, order=Order.DESCENDING)
    assert A == [90, 170, 75, 66, 45, 24, 802, 2]


@pytest.mark.parametrize("order", list(Order))
@pytest.mark.parametrize("exp", [0, 1])
def test_counting_sort_stability(order, exp):
    keys = [3, 1, 3, 0, 1, 3, 0, 2]
    A = [TaggedInt(k, i) for i, k in enumerate(keys)]
    counting_sort(A, exp=exp, order=order)
    sign = -1 if order is Order.DESCENDING else 1
    expected = sorted(enumerate(keys), key=lambda p: sign * p[1])
    assert [(v.tag, int(v)) for v in A] == expected


def test_counting_sort_sub_range():
    A = [9, 5, 1, 4, 0, 7]
    counting_sort(A, 4, 1)
    assert A == [9, 0, 1, 4, 5, 7]


def test_radix_sort_example():
    A = [170, 45, 75, 90, 802, 24, 2, 66]
    radix_sort(A)
    assert A == [2, 24, 45, 66, 75, 90, 170, 802]


def test_radix_sort_descending():
    A = [170, 45, 75, 90, 802, 24, 2, 66]
    radix_sort(A, order=True)
    assert A == [802, 170, 90, 75, 66, 45, 24, 2]


@pytest.mark.parametrize("order", list(Order))
def test_radix_sort_large_values(order):
    rng = random.Random(9)
    A = [rng.randint(0, 10**9) for _ in range(300)]
    expected = sorted(A, reverse=order is Order.DESCENDING)
    radix_sort(A, order=order)
    assert A == expected


@pytest.mark.parametrize(
    "order, tags", [(Order.ASCENDING, [3, 6, 1, 4, 0, 2, 5]), (Order.DESCENDING, [5, 0, 2, 1, 4, 3, 6])]
)
def test_radix_sort_stability(order, tags):
    keys = [21, 11, 21, 5, 11, 105, 5]
    A = [TaggedInt(k, i) for i, k in enumerate(keys)]
    radix_sort(A, order=order)
    assert [v.tag for v in A] == tags


def test_radix_sort_all_zero():
    A = [0, 0, 0]
    radix_sort(A)
    assert A == [0, 0, 0]


def test_radix_sort_logs_each_pass(caplog):
    with caplog.at_level(logging.DEBUG):
        radix_sort([5, 123, 42])
    passes = [r for r in caplog.records if "Radix sort pass" in r.getMessage()]
    assert len(passes) == 3


@pytest.mark.parametrize("sort", [counting_sort, radix_sort])
def test_trivial_ranges(sort):
    A = []
    sort(A)
    assert A == []

    B = [-1, 7, -3]
    sort(B, 1, 1)
    assert B == [-1, 7, -3]


@pytest.mark.parametrize("sort", [counting_sort, radix_sort])
def test_negative_values_rejected(sort):
    with pytest.raises(DomainError):
        sort([3, -1, 2])


@pytest.mark.parametrize("sort", [counting_sort, radix_sort])
def test_non_integers_rejected(sort):
    with pytest.raises(DomainError):
        sort([3, 1.5, 2])
    with pytest.raises(ValueError):
        sort(["b", "a"])


def test_negative_outside_range_is_ignored():
    A = [-5, 3, 1, 2, -9]
    counting_sort(A, 3, 1)
    assert A == [-5, 1, 2, 3, -9]


def test_negative_exp_rejected():
    with pytest.raises(DomainError):
        counting_sort([1, 2], exp=-10)


def test_out_of_range():
    with pytest.raises(RangeError):
        radix_sort([1, 2], 2)


@pytest.mark.parametrize("exp", [Order.DESCENDING, True, 1.0])
def test_exp_must_be_a_plain_int(exp):
    with pytest.raises(TypeError):
        counting_sort([3, 1, 2], 2, 0, exp)
