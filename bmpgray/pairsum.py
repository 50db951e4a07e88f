"""Sum adjacent pairs of a sequence and time it."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence

DEFAULT_COUNT = 300000


def pair_sums(values: Sequence[int]) -> list[int]:
    """Sum each element at an even index with the one after it."""
    if len(values) % 2:
        raise ValueError("pair_sums needs an even number of values")
    return [a + b for a, b in zip(values[0::2], values[1::2])]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Time summing adjacent pairs of 0..count-1.")
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT)
    args = parser.parse_args(argv)
    if args.count < 0 or args.count % 2:
        parser.error("--count must be a non-negative even number")

    values = list(range(args.count))
    total = sum(values)

    start = time.perf_counter()
    sums = pair_sums(values)
    elapsed_us = int((time.perf_counter() - start) * 1_000_000)

    print(f"{total}----------{sum(sums)}")
    print(f"TOTAL RUNNING TIME: {elapsed_us} microseconds....")
    return 0


if __name__ == "__main__":
    sys.exit(main())