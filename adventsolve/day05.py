"""Print queue: check and repair page orderings against precedence rules."""

from __future__ import annotations

import argparse
import re
from collections.abc import Mapping, Sequence
from functools import cmp_to_key
from pathlib import Path

Rules = Mapping[int, Sequence[int]]

_RULE = re.compile(r"([0-9]{1,2})\|([0-9]{1,2})")


def _to_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def parse_input(text: str) -> tuple[dict[int, list[int]], list[list[int]]]:
    """Read the ordering rules and the updates from the puzzle input.

    Rules map a page to the pages that must come after it.
    """
    rules: dict[int, list[int]] = {}
    updates: list[list[int]] = []
    for line in text.splitlines():
        if not line:
            continue
        match = _RULE.search(line)
        if match:
            before, after = (int(group) for group in match.groups())
            rules.setdefault(before, []).append(after)
        else:
            updates.append([_to_int(page) for page in line.split(",")])
    return rules, updates


def _first_violation(update: Sequence[int], rules: Rules) -> tuple[int, int] | None:
    """Find, scanning from the end, a page preceded by a page it must precede.

    Returns the index of that page and the index of the earliest offending page.
    """
    for index in reversed(range(len(update))):
        rule = rules.get(update[index])
        if rule is None:
            continue
        for target, page in enumerate(update[:index]):
            if page in rule:
                return index, target
    return None


def is_ordered(update: Sequence[int], rules: Rules) -> bool:
    """True when no page appears after a page it must precede."""
    return _first_violation(update, rules) is None


def fix_order(update: Sequence[int], rules: Rules) -> list[int]:
    """Return the update reordered by moving offending pages forward until valid."""
    pages = list(update)
    while (violation := _first_violation(pages, rules)) is not None:
        index, target = violation
        pages.insert(target, pages.pop(index))
    return pages


def middle(update: Sequence[int]) -> int:
    """The page in the middle of an update."""
    return update[len(update) // 2]


def sum_middles(rules: Rules, updates: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Sum of middle pages of ordered updates, and of the repaired unordered ones."""
    ordered_sum = fixed_sum = 0
    for update in updates:
        if is_ordered(update, rules):
            ordered_sum += middle(update)
        else:
            fixed_sum += middle(fix_order(update, rules))
    return ordered_sum, fixed_sum


def alternative_answer(rules: Rules, updates: Sequence[Sequence[int]]) -> tuple[int, int]:
    """The same sums, computed by sorting each update with the rules as comparator."""

    def compare(a: int, b: int) -> int:
        if b in rules.get(a, ()):
            return -1
        if a in rules.get(b, ()):
            return 1
        return 0

    ordered_sum = fixed_sum = 0
    for update in updates:
        sorted_update = sorted(update, key=cmp_to_key(compare))
        if list(update) == sorted_update:
            ordered_sum += middle(update)
        else:
            fixed_sum += middle(sorted_update)
    return ordered_sum, fixed_sum


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Check print queue orderings.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)

    rules, updates = parse_input(Path(args.input).read_text())
    alt_ordered, alt_fixed = alternative_answer(rules, updates)
    print(alt_ordered, alt_fixed)

    ordered_sum, fixed_sum = sum_middles(rules, updates)
    print("The sum of the middle page numbers for ordered updates is: ", ordered_sum)
    print(
        "The sum of the middle page numbers after correctly ordering is: ",
        fixed_sum,
    )


if __name__ == "__main__":
    main()