"""Follow a rope's knots across a grid and count where the tail has been."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable, Iterator, Sequence

DEFAULT_INPUT = "puzzle-09-input.txt"
ORIGIN = (0, 0)

Point = tuple[int, int]
Move = tuple[str, int]

_DIRECTIONS: dict[str, Point] = {"R": (1, 0), "L": (-1, 0), "U": (0, 1), "D": (0, -1)}
_MOVE = re.compile(r"\s*(\S)\s+(\d+)\s*$")


def adjacent(head: Point, tail: Point) -> bool:
    """True if the two knots overlap or touch, diagonals included."""
    return abs(head[0] - tail[0]) <= 1 and abs(head[1] - tail[1]) <= 1


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def follow(head: Point, tail: Point) -> Point:
    """Return where ``tail`` moves to keep up with ``head``."""
    if adjacent(head, tail):
        return tail
    return tail[0] + _sign(head[0] - tail[0]), tail[1] + _sign(head[1] - tail[1])


def parse_moves(lines: Iterable[str]) -> list[Move]:
    """Parse lines such as ``R 4`` into (direction, steps) pairs."""
    moves: list[Move] = []
    for line in lines:
        if not line.strip():
            continue
        match = _MOVE.match(line)
        if not match:
            raise ValueError(f"malformed move: {line!r}")
        direction, steps = match.group(1), int(match.group(2))
        if direction not in _DIRECTIONS:
            raise ValueError(f"unknown direction: {direction!r}")
        moves.append((direction, steps))
    return moves


def _simulate(moves: Iterable[Move], knots: int) -> Iterator[tuple[Point, ...]]:
    """Yield the rope's knots, head first, after every single step."""
    if knots < 2:
        raise ValueError(f"a rope needs at least two knots, got {knots}")
    rope: tuple[Point, ...] = (ORIGIN,) * knots
    for direction, steps in moves:
        if direction not in _DIRECTIONS:
            raise ValueError(f"unknown direction: {direction!r}")
        dx, dy = _DIRECTIONS[direction]
        for _ in range(steps):
            head = (rope[0][0] + dx, rope[0][1] + dy)
            moved = [head]
            for knot in rope[1:]:
                moved.append(follow(moved[-1], knot))
            rope = tuple(moved)
            yield rope


def visited_by_tail(moves: Iterable[Move], knots: int) -> set[Point]:
    """Return every position the last knot occupies, the starting point included."""
    visited = {ORIGIN}
    visited.update(rope[-1] for rope in _simulate(moves, knots))
    return visited


def _bounds(points: Sequence[Point]) -> tuple[int, int, int, int]:
    xs = [x for x, _ in points]
    ys = [y for _, y in points]
    return max(xs), min(xs), max(ys), min(ys)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("-f", dest="file_name", default=DEFAULT_INPUT)
    parser.add_argument("-n", dest="knots", type=int, default=2)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    print(f"Starting at: [{ORIGIN[0]}:{ORIGIN[1]}]")
    try:
        with open(args.file_name, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError:
        print(f"ERROR: Could not open file {args.file_name}")
        return 1

    try:
        moves = parse_moves(lines)
        visited = {ORIGIN}
        heads = [ORIGIN]
        for rope in _simulate(moves, args.knots):
            visited.add(rope[-1])
            heads.append(rope[0])
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return 1

    max_x, min_x, max_y, min_y = _bounds(heads)
    print(f"Amount: {len(visited)}")
    print(f"max_head_x: {max_x}")
    print(f"min_head_x: {min_x}")
    print(f"max_head_y: {max_y}")
    print(f"min_head_y: {min_y}")
    return 0