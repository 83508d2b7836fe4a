"""Bridge repair: find calibration equations that operators can make true."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from enum import IntEnum
from itertools import product
from pathlib import Path


class Operator(IntEnum):
    """Operators applied strictly left to right."""

    ADD = 0
    MULTIPLY = 1
    CONCATENATE = 2


def _to_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def evaluate(numbers: Sequence[str], operators: Iterable[Operator]) -> int:
    """Combine the number tokens left to right with the given operators.

    Tokens that are not integers count as 0. Concatenation joins the decimal
    form of the running result with the next token as written.
    """
    if not numbers:
        raise ValueError("an equation needs at least one number")
    result = _to_int(numbers[0])
    for token, operator in zip(numbers[1:], operators):
        if operator is Operator.ADD:
            result += _to_int(token)
        elif operator is Operator.MULTIPLY:
            result *= _to_int(token)
        else:
            result = _to_int(f"{result}{token}")
    return result


def calibration_value(test_value: int, numbers: Sequence[str], operator_count: int) -> int:
    """The test value if some choice of operators reaches it, otherwise 0.

    Only the first ``operator_count`` operators (add, multiply, concatenate)
    are tried.
    """
    if not 1 <= operator_count <= len(Operator):
        raise ValueError(f"operator_count must be between 1 and {len(Operator)}")
    available = list(Operator)[:operator_count]
    for operators in product(available, repeat=len(numbers) - 1):
        if evaluate(numbers, operators) == test_value:
            return test_value
    return 0


def total_calibration(text: str, operator_count: int) -> int:
    """Sum of the calibration values of every equation in the puzzle input."""
    total = 0
    for line in text.split("\n"):
        if not line.strip():
            continue
        target, separator, rest = line.partition(":")
        if not separator:
            raise ValueError(f"missing ':' in line {line!r}")
        total += calibration_value(_to_int(target), rest.split(), operator_count)
    return total


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Check calibration equations.")
    parser.add_argument("input", nargs="?", default="input2", help="puzzle input file")
    args = parser.parse_args(argv)

    text = Path(args.input).read_text()
    print("Day1: ", total_calibration(text, 2))
    print("Day2: ", total_calibration(text, 3))


if __name__ == "__main__":
    main()