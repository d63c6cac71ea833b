"""Find misplaced items and group badges in rucksacks."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence

DEFAULT_INPUT = "puzzle-03-input.txt"


def priority(item: str) -> int:
    """Return 1-26 for a-z and 27-52 for A-Z."""
    if len(item) == 1 and item.isascii():
        if item.islower():
            return ord(item) - ord("a") + 1
        if item.isupper():
            return ord(item) - ord("A") + 27
    raise ValueError(f"not an item letter: {item!r}")


def misplaced_item(rucksack: str) -> str:
    """Return the first item of the first compartment also found in the second."""
    content = rucksack.rstrip("\r\n")
    if len(content) % 2:
        raise ValueError(f"odd number of items ({len(content)})")
    half = len(content) // 2
    second = set(content[half:])
    for item in content[:half]:
        if item in second:
            return item
    raise ValueError("no duplicate item")


def sum_misplaced_priorities(lines: Iterable[str]) -> int:
    """Sum the priorities of every rucksack's misplaced item."""
    return sum(priority(misplaced_item(line)) for line in lines)


def group_badge(group: Sequence[str]) -> str | None:
    """Return the item common to all three rucksacks, or None."""
    first, second, third = (rucksack.rstrip("\r\n") for rucksack in group)
    for item in third:
        if item in first and item in second:
            return item
    return None


def _groups(lines: Iterable[str]) -> Iterable[tuple[str, str, str]]:
    rucksacks = iter(lines)
    return zip(rucksacks, rucksacks, rucksacks)


def sum_badge_priorities(lines: Iterable[str]) -> int:
    """Sum badge priorities over complete groups of three rucksacks."""
    return sum(
        priority(badge)
        for badge in map(group_badge, _groups(lines))
        if badge is not None
    )


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("-f", dest="file_name", default=DEFAULT_INPUT)
    parser.add_argument("-v", dest="verbose", action="store_true")
    parser.add_argument("-m", dest="part", type=int, choices=(1, 2), default=1)
    return parser


def _misplaced_total(lines: list[str], verbose: bool) -> int:
    total = 0
    for number, line in enumerate(lines, start=1):
        try:
            item = misplaced_item(line)
            value = priority(item)
        except ValueError as exc:
            print(f"ERROR in rucksack {number}: {exc}")
            break
        if verbose:
            print(f"{number:4d} {item} {ord(item)} {value}")
        total += value
    return total


def _badge_total(lines: list[str], verbose: bool) -> int:
    total = 0
    for number, group in enumerate(_groups(lines), start=1):
        badge = group_badge(group)
        if badge is None:
            continue
        value = priority(badge)
        if verbose:
            print(f"Group: {number} Badge: {badge} Prio: {value}")
        total += value
    return total


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    print(f"Finding misplaced rucksacks in {args.file_name}")
    try:
        with open(args.file_name, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError:
        print(f"ERROR: Could not open file {args.file_name}")
        return 1

    try:
        if args.part == 1:
            total = _misplaced_total(lines, args.verbose)
        else:
            total = _badge_total(lines, args.verbose)
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return 1

    if args.verbose:
        print()
    print("------------------ Summary ------------------")
    print(f"Total priorities: {total}")
    return 0