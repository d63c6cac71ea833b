"""Find the tree with the best scenic score in a height grid."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence

DEFAULT_INPUT = "puzzle-08-input.txt"

_DIGITS = frozenset("0123456789")

Grid = list[list[int]]


def parse_grid(lines: Iterable[str]) -> Grid:
    """Turn lines of digits into rows of tree heights."""
    rows = [line.rstrip("\r\n") for line in lines]
    rows = [row for row in rows if row]
    if not rows:
        return []
    width = len(rows[0])
    grid: Grid = []
    for row in rows:
        if len(row) != width:
            raise ValueError(f"row {row!r} is not {width} trees wide")
        if not set(row) <= _DIGITS:
            raise ValueError(f"row {row!r} holds a non-digit")
        grid.append([int(height) for height in row])
    return grid


def _viewing_distance(trees: Iterable[int], height: int) -> int:
    distance = 0
    for tree in trees:
        distance += 1
        if tree >= height:
            break
    return distance


def scenic_score(grid: Sequence[Sequence[int]], row: int, col: int) -> int:
    """Product of the viewing distances in the four directions."""
    if not (0 <= row < len(grid) and 0 <= col < len(grid[row])):
        raise IndexError(f"no tree at ({row}, {col})")
    height = grid[row][col]
    line = grid[row]
    column = [cells[col] for cells in grid]
    views = (
        reversed(line[:col]),
        line[col + 1 :],
        reversed(column[:row]),
        column[row + 1 :],
    )
    score = 1
    for trees in views:
        score *= _viewing_distance(trees, height)
    return score


def max_scenic_score(grid: Sequence[Sequence[int]]) -> int:
    """Highest scenic score of any tree, 0 for an empty grid."""
    return max(
        (
            scenic_score(grid, row, col)
            for row, cells in enumerate(grid)
            for col, _ in enumerate(cells)
        ),
        default=0,
    )


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("-f", dest="file_name", default=DEFAULT_INPUT)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    try:
        with open(args.file_name, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError:
        print(f"ERROR: Could not open file {args.file_name}")
        return 1
    try:
        grid = parse_grid(lines)
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return 1
    print(f"Max score: {max_scenic_score(grid)}")
    return 0