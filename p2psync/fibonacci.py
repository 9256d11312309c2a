"""Fibonacci numbers computed three ways, limited to unsigned 64-bit results."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence

U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1


def _check_index(n: int) -> None:
    if not 0 <= n <= U32_MAX:
        raise ValueError(f"index must be between 0 and {U32_MAX}, got {n}")


def _checked(value: int) -> int:
    if value > U64_MAX:
        raise OverflowError("Fibonacci number does not fit in 64 bits")
    return value


def fibonacci_recursive(n: int) -> int:
    """Return the n-th Fibonacci number by plain recursion (exponential time)."""
    _check_index(n)
    if n < 2:
        return n
    return _checked(fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2))


def fibonacci_iterative(n: int) -> int:
    """Return the n-th Fibonacci number in linear time."""
    _check_index(n)
    if n == 0:
        return 0
    a, b = 0, 1
    for _ in range(1, n):
        a, b = b, _checked(a + b)
    return b


def fibonacci_formula(n: int) -> int:
    """Return the n-th Fibonacci number from Binet's formula.

    Floating-point precision limits accuracy for large n; results beyond
    the 64-bit range saturate at the largest unsigned 64-bit value.
    """
    _check_index(n)
    sqrt5 = math.sqrt(5.0)
    phi = (1.0 + sqrt5) / 2.0
    try:
        value = (phi**n - (1.0 - phi) ** n) / sqrt5
    except OverflowError:
        return U64_MAX
    if not math.isfinite(value):
        return U64_MAX
    rounded = math.floor(value + 0.5)
    if rounded > U64_MAX:
        return U64_MAX
    return max(0, rounded)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the first ten Fibonacci numbers."""
    parser = argparse.ArgumentParser(description="Print the first ten Fibonacci numbers.")
    parser.parse_args(argv)
    print("First 10 Fibonacci numbers:")
    for i in range(10):
        print(f"fibonacci({i}) = {fibonacci_iterative(i)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())