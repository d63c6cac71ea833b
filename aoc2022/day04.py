"""Count overlapping section assignment pairs."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable, Iterator

DEFAULT_INPUT = "puzzle-04-input.txt"

Range = tuple[int, int]

_PAIR = re.compile(r"\s*([+-]?\d+)-\s*([+-]?\d+),\s*([+-]?\d+)-\s*([+-]?\d+)")


def parse_pair(line: str) -> tuple[Range, Range]:
    """Parse ``a-b,c-d`` into two (start, end) ranges."""
    match = _PAIR.match(line)
    if not match:
        raise ValueError(f"malformed section assignment: {line!r}")
    a, b, c, d = map(int, match.groups())
    return (a, b), (c, d)


def fully_contains(first: Range, second: Range) -> bool:
    """True if either range lies completely within the other."""
    (min_1, max_1), (min_2, max_2) = first, second
    return (min_1 >= min_2 and max_1 <= max_2) or (min_2 >= min_1 and max_2 <= max_1)


def overlaps(first: Range, second: Range) -> bool:
    """True unless one range lies wholly before or after the other."""
    (min_1, max_1), (min_2, max_2) = first, second
    separate = (min_1 < min_2 and max_1 < min_2) or (max_1 > max_2 and min_1 > max_2)
    return not separate


_CHECKS = {1: fully_contains, 2: overlaps}


def _matching_pairs(lines: Iterable[str], mode: int) -> Iterator[int]:
    if mode not in _CHECKS:
        raise ValueError(f"Wrong mode: {mode}")
    check = _CHECKS[mode]
    for number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        if check(*parse_pair(line)):
            yield number


def count_pairs(lines: Iterable[str], mode: int) -> int:
    """Count pairs where one contains the other (mode 1) or that overlap (mode 2)."""
    return sum(1 for _ in _matching_pairs(lines, mode))


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("-f", dest="file_name", default=DEFAULT_INPUT)
    parser.add_argument("-v", dest="verbose", action="store_true")
    parser.add_argument("-m", dest="mode", type=int, default=1)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    mode = 1
    if args.mode in _CHECKS:
        mode = args.mode
    else:
        print(f"ERROR. Wrong mode: {mode}")

    print(f"Finding overlapping section assignements {args.file_name} mode {mode}")
    try:
        with open(args.file_name, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError:
        print(f"ERROR: Could not open file {args.file_name}")
        return 1

    count = 0
    try:
        for number in _matching_pairs(lines, mode):
            count += 1
            if args.verbose:
                print(f"Found overlap in section assignment pair {number}")
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return 1

    if args.verbose:
        print()
    print("------------------ Summary ------------------")
    print(f"Total overlapping section assignments: {count} mode {mode}")
    return 0