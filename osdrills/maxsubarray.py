"""Maximum subarray sum in linear, quadratic and cubic time."""

from __future__ import annotations

import random
import re
import sys
from collections.abc import Iterable, Sequence

MIN_ELEMENT = -25
MAX_ELEMENT = 74

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")


def max_sub_array_linear(values: Iterable[int]) -> int:
    """Best subarray sum (empty subarray counts as 0), one pass."""
    best = current = 0
    for value in values:
        current = max(value, current + value)
        best = max(best, current)
    return best


def max_sub_array_quadratic(values: Sequence[int]) -> int:
    """Best subarray sum by extending each start point."""
    best = 0
    for start in range(len(values)):
        running = 0
        for value in values[start:]:
            running += value
            best = max(best, running)
    return best


def max_sub_array_cubic(values: Sequence[int]) -> int:
    """Best subarray sum by summing every subarray."""
    best = 0
    size = len(values)
    for start in range(size):
        for end in range(start, size):
            best = max(best, sum(values[start : end + 1]))
    return best


def generate_random_array(seed: int, n: int) -> list[int]:
    """Return ``n`` seeded random values in [MIN_ELEMENT, MAX_ELEMENT]."""
    if n < 0:
        raise ValueError("array length must not be negative")
    rng = random.Random(seed)
    return [rng.randint(MIN_ELEMENT, MAX_ELEMENT) for _ in range(n)]


def _scan_int(text: str) -> int | None:
    match = _INT_PREFIX.match(text)
    return int(match.group()) if match else None


def main(argv: list[str] | None = None) -> int:
    """Generate a random array from a seed and print its maximum subarray sum."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Usage: maxsubarray <seed> <n>")
        return 1

    seed = _scan_int(args[0])
    if seed is None:
        print("Error: seed should be an integer")
        return 1

    n = _scan_int(args[1])
    if n is None:
        print("Error: n should be an integer")
        return 1

    try:
        values = generate_random_array(seed, n)
    except ValueError:
        print("Error while allocating memory for the array")
        return 1

    print(f"The maximum subarray sum is {max_sub_array_linear(values)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())