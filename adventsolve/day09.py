"""Disk fragmenter: compact file blocks into free space and checksum the disk."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from itertools import zip_longest
from pathlib import Path


def _digit(char: str | None) -> int:
    return int(char) if char is not None and char.isdigit() else 0


def build_blocks(disk_map: str) -> list[int | None]:
    """Expand a dense disk map into blocks: file ids, with None for free space.

    Characters that are not digits, including a missing final free-space
    length, count as 0.
    """
    blocks: list[int | None] = []
    chars = iter(disk_map)
    for file_id, (length, free) in enumerate(zip_longest(chars, chars)):
        blocks.extend([file_id] * _digit(length))
        blocks.extend([None] * _digit(free))
    return blocks


def compact_checksum(disk_map: str) -> int:
    """Checksum after moving blocks from the end into the leftmost free space."""
    blocks = build_blocks(disk_map)
    checksum = 0
    last = len(blocks) - 1
    position = 0
    while position < len(blocks):
        block = blocks[position]
        if block is not None:
            checksum += position * block
        else:
            while blocks and blocks[-1] is None:
                blocks.pop()
            if blocks:
                last = len(blocks) - 1
                checksum += position * blocks.pop()
        if position == last:
            break
        position += 1
    return checksum


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Compact a disk and checksum it.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)

    print("day9")
    checksum = compact_checksum(Path(args.input).read_text())
    print()
    print("part1: ", checksum)


if __name__ == "__main__":
    main()