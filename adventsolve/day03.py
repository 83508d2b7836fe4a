"""Mull it over: sum the multiplication instructions in corrupted memory."""

from __future__ import annotations

import argparse
import re
from collections.abc import Sequence
from pathlib import Path

_MUL = re.compile(r"mul\(([0-9]{1,3}),([0-9]{1,3})\)")
_INSTRUCTION = re.compile(r"(don't\(\))|(do\(\))|mul\(([0-9]{1,3}),([0-9]{1,3})\)")


def sum_multiplications(text: str) -> int:
    """Sum the products of every well-formed mul(x,y) instruction."""
    return sum(int(x) * int(y) for x, y in _MUL.findall(text))


def sum_enabled_multiplications(text: str) -> int:
    """Sum mul(x,y) products, honouring do() and don't() switches."""
    enabled = True
    total = 0
    for match in _INSTRUCTION.finditer(text):
        dont, do, x, y = match.groups()
        if dont:
            enabled = False
        elif do:
            enabled = True
        elif enabled:
            total += int(x) * int(y)
    return total


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Sum multiplications in memory.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)

    text = Path(args.input).read_text()
    print("Part 1 - Sum of all uncorrupted mul instructions is ", sum_multiplications(text))
    print(
        "Part2 - Sum of all uncorrupted mul instructions is ",
        sum_enabled_multiplications(text),
    )


if __name__ == "__main__":
    main()