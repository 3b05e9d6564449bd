"""Poisson distribution: probability mass function and a small command line tool."""

from __future__ import annotations

import math
import re
import sys

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)

_TABLE_ROWS = (
    ("       2       |       1       |", 1, 2),
    ("       2       |       10      |", 10, 2),
    ("       2       |       2       |", 2, 2),
    ("       3       |       3       |", 3, 3),
    ("      100      |       3       |", 3, 100),
)


def factorial(n: int) -> int:
    """Return n! (1 for n <= 0)."""
    return math.prod(range(1, n + 1))


def poisson(k: int, lam: float) -> float:
    """Return P(X = k) for a Poisson variable with rate ``lam``."""
    try:
        return math.pow(lam, k) / factorial(k) * math.exp(-lam)
    except OverflowError:
        if lam <= 0:
            return 0.0
        return math.exp(k * math.log(lam) - math.lgamma(k + 1) - lam)


def format_table() -> str:
    """Return the fixed table of sample Poisson values."""
    lines = [
        "",
        "~~~~~~~~~~~~ Poisson distribution ~~~~~~~~~~~~",
        "",
        "       \U0001d6cc       |       k       |     P_X(k) ",
        "---------------|---------------|---------------",
    ]
    lines.extend(f"{prefix}{poisson(k, lam):.12f}" for prefix, k, lam in _TABLE_ROWS)
    return "\n".join(lines) + "\n"


def _scan_int(text: str) -> int | None:
    match = _INT_PREFIX.match(text)
    return int(match.group()) if match else None


def _scan_float(text: str) -> float | None:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group()) if match else None


def main(argv: list[str] | None = None) -> int:
    """Print P_X(k) for the rate and k given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Usage: ./Poisson <\U0001d6cc> <k>")
        return 1

    lam = _scan_float(args[0])
    if lam is None:
        print("\U0001d6cc need to be a number")
        return 1

    k = _scan_int(args[1])
    as_float = _scan_float(args[1])
    if k is None or as_float is None or as_float != k:
        print("k need to be an integer")
        return 1

    print(f"P_X({k}) = {poisson(k, lam):.10f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())