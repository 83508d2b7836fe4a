"""Red-nosed reports: safety checks on sequences of levels."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from itertools import pairwise
from pathlib import Path

_MIN_STEP = 1
_MAX_STEP = 3


def parse_report(line: str) -> list[int]:
    """Parse the space-separated levels of a report, skipping anything non-numeric."""
    levels = []
    for token in line.split(" "):
        try:
            levels.append(int(token))
        except ValueError:
            continue
    return levels


def is_safe(levels: Sequence[int]) -> bool:
    """True when levels change monotonically by 1 to 3 at every step."""
    steps = [b - a for a, b in pairwise(levels)]
    return all(_MIN_STEP <= s <= _MAX_STEP for s in steps) or all(
        -_MAX_STEP <= s <= -_MIN_STEP for s in steps
    )


def is_safe_dampened(levels: Sequence[int]) -> bool:
    """True when the report is safe, or becomes safe with one level removed."""
    if is_safe(levels):
        return True
    return any(
        is_safe([*levels[:index], *levels[index + 1 :]])
        for index in reversed(range(len(levels)))
    )


def count_safe(reports: Iterable[Sequence[int]]) -> tuple[int, int]:
    """Count safe reports without and with the problem dampener."""
    safe = dampened = 0
    for levels in reports:
        if is_safe(levels):
            safe += 1
            dampened += 1
        elif is_safe_dampened(levels):
            dampened += 1
    return safe, dampened


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Count safe reactor reports.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)

    reports = [parse_report(line) for line in Path(args.input).read_text().splitlines()]
    safe, dampened = count_safe(reports)
    print("The number of reports which are safe is ", safe)
    print(
        "The number of reports which are safe using the Problem Dampener is: ",
        dampened,
    )


if __name__ == "__main__":
    main()