"""Four-function calculator with an interactive read-evaluate loop."""

import operator
import re
import sys
from collections.abc import Sequence

_OPERATIONS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}

_NUMBER = r"[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?"
_EXPRESSION = re.compile(rf"\s*({_NUMBER})\s*(\S)\s*({_NUMBER})")


class CalculatorError(ValueError):
    """Raised when an expression cannot be evaluated."""


def calculate(a: float, op: str, b: float) -> float:
    """Apply ``op`` (one of + - * /) to ``a`` and ``b``."""
    try:
        operation = _OPERATIONS[op]
    except KeyError:
        raise CalculatorError("Unknown operator") from None
    if op == "/" and b == 0:
        raise CalculatorError("Division by zero")
    return operation(a, b)


def _read_answer() -> str | None:
    for line in sys.stdin:
        stripped = line.strip()
        if stripped:
            return stripped[0]
    return None


def main(argv: Sequence[str] | None = None) -> int:
    """Evaluate ``number op number`` lines until the user declines another."""
    out = sys.stdout
    while True:
        out.write("Enter a number, an operand and a number ")
        out.flush()
        line = sys.stdin.readline()
        if not line:
            return 0
        match = _EXPRESSION.match(line)
        if match is None:
            out.write("Input error - expected: number op number\n")
            continue
        a, op, b = float(match[1]), match[2], float(match[3])
        try:
            out.write(f"Result:{calculate(a, op, b):g}\n")
        except CalculatorError as exc:
            out.write(f"{exc}\n")

        out.write("Another? (y/n): ")
        out.flush()
        if _read_answer() not in ("y", "Y"):
            return 0


if __name__ == "__main__":
    sys.exit(main())