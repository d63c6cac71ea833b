"""Find the Elves carrying the most calories."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

MAX_ELVES = 10
DEFAULT_INPUT = "p1-input.txt"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Elf:
    """One Elf's inventory total and the row of the blank line closing it."""

    number: int
    calories: int
    row: int


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _elves(lines: Iterable[str]) -> Iterator[Elf]:
    """Yield each Elf whose inventory is closed by a blank line."""
    calories = 0
    number = 1
    for row, line in enumerate(lines, start=1):
        if line.rstrip("\r\n") == "":
            yield Elf(number, calories, row)
            calories = 0
            number += 1
        else:
            calories += _atoi(line)


def _insert(ranking: list[Elf], elf: Elf, top: int) -> int | None:
    """Insert ``elf`` into the descending ranking; return its place index."""
    for place in range(top):
        current = ranking[place].calories if place < len(ranking) else 0
        if elf.calories > current:
            ranking.insert(place, elf)
            del ranking[top:]
            return place
    return None


def top_calories(lines: Iterable[str], top: int) -> list[Elf]:
    """Return up to ``top`` (at most ten) Elves with the most calories, best first."""
    top = min(top, MAX_ELVES)
    ranking: list[Elf] = []
    for elf in _elves(lines):
        _insert(ranking, elf, top)
    return ranking


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("-f", dest="file_name", default=DEFAULT_INPUT)
    parser.add_argument("-v", dest="verbose", action="store_true")
    parser.add_argument("-t", dest="top", type=_atoi, default=1)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    top = min(args.top, MAX_ELVES)
    print(f"Finding maximum calory Elf/Elves (top {top}) in {args.file_name}")

    try:
        with open(args.file_name, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError:
        print(f"ERROR: Could not open file {args.file_name}")
        return 1

    ranking: list[Elf] = []
    for elf in _elves(lines):
        place = _insert(ranking, elf, top)
        if args.verbose:
            message = f"Elf {elf.number} has {elf.calories} calories"
            if place is not None:
                message += f" (updated {place + 1}) Row: {elf.row}"
            print(message)

    leader = ranking[0] if ranking else Elf(0, 0, 0)
    print("------------------ Summary ------------------")
    print(f"Elf {leader.number} has maximum calories: {leader.calories}")
    if top > 1:
        total = leader.calories
        for place in range(1, top):
            calories = ranking[place].calories if place < len(ranking) else 0
            print(f"Place {place + 1} has calories: {calories}")
            total += calories
        print(f"Total calories: {total}")
    return 0