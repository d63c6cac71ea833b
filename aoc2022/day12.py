"""Find the shortest climb from S to E across a heightmap."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterable
from typing import NamedTuple

DEFAULT_INPUT = "p12-input.txt"

Point = tuple[int, int]

_RED = "\033[31;1;1m"
_RESET = "\033[0m"


class Heightmap(NamedTuple):
    """Heights 0 (a) to 25 (z) by row, with start and end as (x, y)."""

    heights: tuple[tuple[int, ...], ...]
    start: Point
    end: Point

    @property
    def width(self) -> int:
        return len(self.heights[0]) if self.heights else 0

    @property
    def depth(self) -> int:
        return len(self.heights)


def _height(mark: str) -> int:
    letter = {"S": "a", "E": "z"}.get(mark, mark)
    if not ("a" <= letter <= "z"):
        raise ValueError(f"not a height: {mark!r}")
    return ord(letter) - ord("a")


def parse_heightmap(lines: Iterable[str]) -> Heightmap:
    """Read rows of letters; S counts as a, E as z."""
    rows = [line.rstrip("\r\n") for line in lines]
    rows = [row for row in rows if row]
    if not rows:
        raise ValueError("empty heightmap")
    width = len(rows[0])
    start = end = None
    heights = []
    for y, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(f"row {y} is not {width} wide")
        for x, mark in enumerate(row):
            if mark == "S":
                start = (x, y)
            elif mark == "E":
                end = (x, y)
        heights.append(tuple(_height(mark) for mark in row))
    if start is None:
        raise ValueError("no start (S) in heightmap")
    if end is None:
        raise ValueError("no end (E) in heightmap")
    return Heightmap(tuple(heights), start, end)


def _neighbours(grid: Heightmap, point: Point) -> Iterable[Point]:
    x, y = point
    here = grid.heights[y][x]
    for nx, ny in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
        if 0 <= nx < grid.width and 0 <= ny < grid.depth:
            if abs(grid.heights[ny][nx] - here) <= 1:
                yield nx, ny


def shortest_path(grid: Heightmap) -> list[Point] | None:
    """Fewest-steps path from start to end, moving at most one height up or down."""
    previous: dict[Point, Point | None] = {grid.start: None}
    queue = deque([grid.start])
    while queue:
        point = queue.popleft()
        if point == grid.end:
            path = []
            step: Point | None = point
            while step is not None:
                path.append(step)
                step = previous[step]
            path.reverse()
            return path
        for neighbour in _neighbours(grid, point):
            if neighbour not in previous:
                previous[neighbour] = point
                queue.append(neighbour)
    return None


def shortest_path_length(grid: Heightmap) -> int | None:
    """Number of steps on the shortest path, or None when E cannot be reached."""
    path = shortest_path(grid)
    return None if path is None else len(path) - 1


def _draw(rows: list[str], path: list[Point]) -> str:
    on_path = set(path)
    return "\n".join(
        "".join(
            f"{_RED}{mark}{_RESET}" if (x, y) in on_path else mark
            for x, mark in enumerate(row)
        )
        for y, row in enumerate(rows)
    )


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("-f", dest="file_name", default=DEFAULT_INPUT)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    try:
        with open(args.file_name, encoding="utf-8") as handle:
            rows = [row for row in handle.read().splitlines() if row]
    except OSError:
        print(f"ERROR: Could not open file {args.file_name}")
        return 1

    try:
        grid = parse_heightmap(rows)
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return 1

    path = shortest_path(grid)
    if path is None:
        print("No path from S to E")
        return 1
    print(_draw(rows, path))
    print(f"Count: {len(path) - 1}")
    return 0