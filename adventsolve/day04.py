"""Ceres search: find XMAS words and X-shaped MAS crosses in a letter grid."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

_WORD = "XMAS"
_DIRECTIONS = [(-1, 0), (0, 1), (1, 0), (0, -1), (-1, 1), (1, 1), (1, -1), (-1, -1)]
_MS = {"M", "S"}


def parse_grid(text: str) -> list[str]:
    """Split the puzzle input into grid rows."""
    return text.splitlines()


def _xmas_from(grid: Sequence[str], row: int, col: int, height: int, width: int) -> int:
    found = 0
    last = len(_WORD) - 1
    for dr, dc in _DIRECTIONS:
        end_row, end_col = row + dr * last, col + dc * last
        if not (0 <= end_row < height and 0 <= end_col < width):
            continue
        if all(
            grid[row + dr * k][col + dc * k] == letter
            for k, letter in enumerate(_WORD)
        ):
            found += 1
    return found


def count_xmas(grid: Sequence[str]) -> int:
    """Count XMAS in all eight directions, overlaps included."""
    if not grid:
        return 0
    height, width = len(grid), len(grid[0])
    return sum(
        _xmas_from(grid, row, col, height, width)
        for row, line in enumerate(grid)
        for col, letter in enumerate(line[:width])
        if letter == "X"
    )


def _is_cross(grid: Sequence[str], row: int, col: int, height: int, width: int) -> bool:
    # The row index is bounded by the grid width as well as its height.
    if not (1 <= row and 1 <= col and row + 1 < width and col + 1 < width and row + 1 < height):
        return False
    falling = {grid[row - 1][col - 1], grid[row + 1][col + 1]}
    rising = {grid[row - 1][col + 1], grid[row + 1][col - 1]}
    return falling == _MS and rising == _MS


def count_x_mas(grid: Sequence[str]) -> int:
    """Count A cells at the centre of two crossing MAS diagonals."""
    if not grid:
        return 0
    height, width = len(grid), len(grid[0])
    return sum(
        _is_cross(grid, row, col, height, width)
        for row, line in enumerate(grid)
        for col, letter in enumerate(line[:width])
        if letter == "A"
    )


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Search a word grid for XMAS.")
    parser.add_argument("input", nargs="?", default="input", help="puzzle input file")
    args = parser.parse_args(argv)

    grid = parse_grid(Path(args.input).read_text())
    print("\nXMAS appear ", count_xmas(grid), " times.")
    print("\nMAX appears in the shape of an X ", count_x_mas(grid), " times.")


if __name__ == "__main__":
    main()