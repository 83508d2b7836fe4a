"""Resonant collinearity: antinodes cast by pairs of same-frequency antennas."""

from __future__ import annotations

import argparse
from collections.abc import Mapping, Sequence
from itertools import combinations
from pathlib import Path

Point = tuple[int, int]


def parse_antennas(text: str) -> tuple[dict[Point, str], dict[str, list[Point]]]:
    """Read the map as a point-to-character grid and antenna positions by frequency."""
    grid: dict[Point, str] = {}
    antennas: dict[str, list[Point]] = {}
    for y, row in enumerate(text.split()):
        for x, char in enumerate(row):
            grid[(x, y)] = char
            if char != ".":
                antennas.setdefault(char, []).append((x, y))
    return grid, antennas


def find_antinodes(
    grid: Mapping[Point, str],
    antennas: Mapping[str, Sequence[Point]],
    resonant: bool,
) -> set[Point]:
    """Antinode positions inside the grid.

    Without resonance each pair casts one antinode beyond each antenna; with
    it, antinodes repeat along the line to the edge and cover the antennas too.
    """
    antinodes: set[Point] = set()
    for positions in antennas.values():
        for a, b in combinations(positions, 2):
            if resonant:
                antinodes.update((a, b))
            for origin, (dx, dy) in (
                (a, (a[0] - b[0], a[1] - b[1])),
                (b, (b[0] - a[0], b[1] - a[1])),
            ):
                point = (origin[0] + dx, origin[1] + dy)
                while point in grid:
                    antinodes.add(point)
                    if not resonant:
                        break
                    point = (point[0] + dx, point[1] + dy)
    return antinodes


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Count antenna antinodes.")
    parser.add_argument("input", nargs="?", default="input2", help="puzzle input file")
    args = parser.parse_args(argv)

    grid, antennas = parse_antennas(Path(args.input).read_text())
    print("Part1: ", len(find_antinodes(grid, antennas, False)))
    print("Part2: ", len(find_antinodes(grid, antennas, True)))


if __name__ == "__main__":
    main()