"""Factorial and running-sum helpers with a small interactive front end."""

import math
import sys
from collections.abc import Sequence


def factorial(n: int) -> int:
    """Product of 2..n; 1 for any n below 2."""
    return math.prod(range(2, n + 1))


def sum_to(n: int) -> int:
    """Sum of 1..n; 0 for any n below 1."""
    if n <= 0:
        return 0
    return n * (n + 1) // 2


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for n and print its factorial and the sum 1..n."""
    out = sys.stdout
    out.write("n? ")
    out.flush()
    words = sys.stdin.read().split()
    try:
        n = int(words[0])
    except (IndexError, ValueError):
        print("error: expected an integer", file=sys.stderr)
        return 1
    out.write(f"factorial({n}) = {factorial(n)}\n")
    out.write(f"sum_to({n}) = {sum_to(n)}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())