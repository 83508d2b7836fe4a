"""Historian hysteria: distance and similarity between two location lists."""

from __future__ import annotations

import argparse
from collections import Counter
from collections.abc import Iterable, Sequence
from pathlib import Path

_SEPARATOR = "   "


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Split the puzzle input into its left and right columns of integers."""
    left: list[int] = []
    right: list[int] = []
    for line in text.splitlines():
        fields = line.split(_SEPARATOR)
        if len(fields) < 2:
            raise ValueError(f"expected two columns in line {line!r}")
        left.append(int(fields[0]))
        right.append(int(fields[1]))
    return left, right


def total_distance(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum of distances between the lists paired up in sorted order.

    Lists of different lengths cannot be paired and give a distance of 0.
    """
    if len(left) != len(right):
        return 0
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity_score(left: Iterable[int], right: Iterable[int]) -> int:
    """Sum of each distinct left value times its number of occurrences on the right.

    Each right-hand occurrence is consumed once, so a value repeated on the
    left contributes only for its first appearance.
    """
    counts = Counter(right)
    return sum(value * counts[value] for value in set(left))


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Compare two location lists.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)

    left, right = parse_lists(Path(args.input).read_text())
    print(
        "total distance between the left list and the right list is: ",
        total_distance(left, right),
    )
    print("similarity score is: ", similarity_score(left, right))


if __name__ == "__main__":
    main()