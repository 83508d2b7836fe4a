"""Guard gallivant: trace a guard's patrol and find obstructions that trap it."""

from __future__ import annotations

import argparse
from collections.abc import Mapping, Sequence
from pathlib import Path

Point = tuple[int, int]

# Up, right, down, left: each turn is a step to the next entry.
_DELTAS: tuple[Point, ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))


def parse_map(text: str) -> tuple[dict[Point, str], Point]:
    """Read the lab map as a point-to-character grid and the guard's start."""
    grid: dict[Point, str] = {}
    start: Point = (0, 0)
    for y, row in enumerate(text.split()):
        for x, char in enumerate(row):
            if char == "^":
                start = (x, y)
            grid[(x, y)] = char
    return grid, start


def patrol(
    grid: Mapping[Point, str], start: Point, obstruction: Point | None = None
) -> set[Point] | None:
    """Positions the guard visits before leaving the map, or None if it loops.

    An optional extra obstruction is treated like a wall.
    """
    position, heading = start, 0
    states: set[tuple[Point, int]] = set()
    visited: set[Point] = set()
    while position in grid:
        state = (position, heading)
        if state in states:
            return None
        states.add(state)
        visited.add(position)
        dx, dy = _DELTAS[heading]
        ahead = (position[0] + dx, position[1] + dy)
        if grid.get(ahead) == "#" or ahead == obstruction:
            heading = (heading + 1) % len(_DELTAS)
        else:
            position = ahead
    return visited


def count_visited(grid: Mapping[Point, str], start: Point) -> int:
    """Number of distinct positions on the guard's route."""
    route = patrol(grid, start)
    return len(route) if route is not None else 0


def count_loop_positions(grid: Mapping[Point, str], start: Point) -> int:
    """Number of positions on the route where one obstruction traps the guard."""
    route = patrol(grid, start) or set()
    return sum(1 for point in route if patrol(grid, start, point) is None)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Trace the guard's patrol.")
    parser.add_argument("input", nargs="?", default="input2", help="puzzle input file")
    args = parser.parse_args(argv)

    grid, start = parse_map(Path(args.input).read_text())
    print(count_visited(grid, start))
    print(count_loop_positions(grid, start))


if __name__ == "__main__":
    main()