"""Print queue, solved by sorting with the rules as a comparator."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from functools import cmp_to_key
from pathlib import Path


def solve(text: str, ordered: bool) -> int:
    """Sum middle pages of updates that are (or are not) already in order.

    Unordered updates are sorted before their middle page is taken.
    """
    sections = text.strip().split("\n\n")
    if len(sections) < 2:
        raise ValueError("input needs a rules section and an updates section")
    rules = {tuple(rule.split("|", 1)) for rule in sections[0].split()}

    def compare(a: str, b: str) -> int:
        """Order two pages by the rules; unrelated pages compare equal."""
        if (a, b) in rules:
            return -1
        if (b, a) in rules:
            return 1
        return 0

    total = 0
    for line in sections[1].split():
        pages = line.split(",")
        in_order = all(compare(b, a) >= 0 for a, b in zip(pages, pages[1:]))
        if in_order == ordered:
            pages.sort(key=cmp_to_key(compare))
            total += int(pages[len(pages) // 2])
    return total


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Check print queue orderings.")
    parser.add_argument("input", nargs="?", default="input2", help="puzzle input file")
    args = parser.parse_args(argv)

    text = Path(args.input).read_text()
    print(solve(text, True))
    print(solve(text, False))


if __name__ == "__main__":
    main()