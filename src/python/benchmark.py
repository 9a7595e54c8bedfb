"""
Benchmark and demo driver for the sorting routines.

Run with something like:
    python benchmark.py --algorithm merge --n 10000 --n 100000 --verify
    python benchmark.py --sample --seed 7
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from typing import Callable, List, Optional, Sequence, Tuple

from sort_utils import Order, display
from sorting import ALGORITHMS

DEFAULT_SIZES = [1_000, 10_000]
SAMPLE_SIZE = 20


def time_sort(func: Callable[..., None], data: List[int], order: Order) -> Tuple[List[int], float]:
    """Sort a copy of ``data`` and return it with the elapsed wall time."""
    A = list(data)
    start = time.perf_counter()
    func(A, order=order)
    end = time.perf_counter()
    return A, end - start


def benchmark(names: Sequence[str], sizes: Sequence[int], max_value: int, order: Order, verify: bool) -> None:
    """Performance profiling of each algorithm for increasing input sizes."""
    print(f"\n=== Sort Performance ({order.name.lower()}) ===")
    for n in sizes:
        data = [random.randint(0, max_value) for _ in range(n)]
        for name in names:
            logging.info("Running %s sort on %d integers", name, n)
            result, elapsed = time_sort(ALGORITHMS[name], data, order)
            print(f"{name:<22} n = {n:>10,}  ->  time = {elapsed:.3f} s")
            if verify and result != sorted(data, reverse=order is Order.DESCENDING):
                raise AssertionError("Result is not sorted correctly")


def sample(names: Sequence[str], order: Order) -> None:
    """Sort one small random sample with every algorithm and show before/after."""
    data = [random.randint(0, 999) for _ in range(SAMPLE_SIZE)]
    print(f"\n=== Sample of {SAMPLE_SIZE} integers ===")
    print("Unsorted:", end=" ")
    display(data)
    for name in names:
        A = list(data)
        ALGORITHMS[name](A, order=order)
        print(f"{name + ':':<18}", end=" ")
        display(A)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark the in-place sorting algorithms")
    parser.add_argument(
        "--algorithm",
        choices=sorted(ALGORITHMS) + ["all"],
        default="all",
        help="Algorithm to run (default: all of them).",
    )
    parser.add_argument(
        "--n",
        type=int,
        action="append",
        dest="sizes",
        help="Number of random integers to sort. Repeat for several sizes.",
    )
    parser.add_argument("--max-value", type=int, default=10**6, help="Largest random value generated.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility.")
    parser.add_argument("--descending", action="store_true", help="Sort in non-increasing order.")
    parser.add_argument("--verify", action="store_true", help="Check every result against sorted().")
    parser.add_argument("--sample", action="store_true", help="Print a 20 integer sample instead of timing.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)
    if args.sizes is None:
        args.sizes = list(DEFAULT_SIZES)
    if any(n < 0 for n in args.sizes):
        parser.error("--n must be non-negative")
    if args.max_value < 0:
        parser.error("--max-value must be non-negative")
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        format="%(asctime)s %(levelname)s:%(message)s",
        level=logging.DEBUG if args.verbose else logging.INFO,
        datefmt="%H:%M:%S",
    )

    if args.seed is not None:
        random.seed(args.seed)

    names = list(ALGORITHMS) if args.algorithm == "all" else [args.algorithm]
    order = Order.DESCENDING if args.descending else Order.ASCENDING

    if args.sample:
        sample(names, order)
    else:
        benchmark(names, args.sizes, args.max_value, order, args.verify)
    return 0


if __name__ == "__main__":
    sys.exit(main())
