"""Small numeric helpers: summaries, sign/parity and generated datasets."""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Summary:
    """Total, maximum and mean of a sequence of integers."""

    total: int
    maximum: int
    average: float


def summarize(values: Iterable[int]) -> Summary:
    """Summarize ``values``; raises ValueError when there are none."""
    items = list(values)
    if not items:
        raise ValueError("cannot summarize an empty sequence")
    total = sum(items)
    return Summary(total=total, maximum=max(items), average=total / len(items))


def describe_integer(x: int) -> tuple[str, str]:
    """Describe the sign and the parity of ``x``."""
    if x > 0:
        sign = "X is positive"
    elif x < 0:
        sign = "X is negative"
    else:
        sign = "X is 0"
    parity = "X is even" if x % 2 == 0 else "X is odd"
    return sign, parity


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError("count must be non-negative")


def make_dataset(n: int) -> list[int]:
    """The squares of 0..n-1."""
    _check_count(n)
    return [i * i for i in range(n)]


def make_samples(n: int) -> list[int]:
    """The multiples of ten 0, 10, ..., 10*(n-1)."""
    _check_count(n)
    return [i * 10 for i in range(n)]