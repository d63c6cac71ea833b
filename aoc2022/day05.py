"""Rearrange stacks of crates according to a list of moves."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable, Sequence

DEFAULT_INPUT = "puzzle-05-example-input.txt"
MAX_STACKS = 9

_BARRIER = " 1   2   3   4   5   6   7   8   9 "
_MOVE = re.compile(r"move\s+(\d+)\s+from\s+(\d+)\s+to\s+(\d+)")

Stacks = list[list[str]]


def _check_count(stack_count: int) -> None:
    if not 1 <= stack_count <= MAX_STACKS:
        raise ValueError(f"number of stacks must be 1-{MAX_STACKS}, got {stack_count}")


def _is_barrier(line: str, stack_count: int) -> bool:
    return line.startswith(_BARRIER[: stack_count * 3])


def parse_stacks(lines: Iterable[str], stack_count: int) -> Stacks:
    """Read the crate drawing up to the numbered line; each stack is bottom first."""
    _check_count(stack_count)
    stacks: Stacks = [[] for _ in range(stack_count)]
    for line in lines:
        if _is_barrier(line, stack_count):
            break
        for index, stack in enumerate(stacks):
            entry = line[index * 4 : index * 4 + 4]
            if len(entry) >= 2 and entry[0] == "[":
                stack.append(entry[1])
    for stack in stacks:
        stack.reverse()
    return stacks


def _move(stacks: Stacks, count: int, source: int, target: int, mode: int) -> None:
    for number in (source, target):
        if not 1 <= number <= len(stacks):
            raise ValueError(f"no stack number {number}")
    origin = stacks[source - 1]
    if count > len(origin):
        raise ValueError(f"stack {source} holds {len(origin)} crates, cannot move {count}")
    cut = len(origin) - count
    moved = origin[cut:]
    del origin[cut:]
    if mode == 1:
        moved.reverse()
    stacks[target - 1].extend(moved)


def apply_moves(stacks: Sequence[Sequence[str]], lines: Iterable[str], mode: int) -> Stacks:
    """Return new stacks after the moves; mode 1 moves one crate at a time, mode 2 all at once."""
    if mode not in (1, 2):
        raise ValueError(f"Wrong mode: {mode}")
    result = [list(stack) for stack in stacks]
    for line in lines:
        match = _MOVE.match(line)
        if match:
            count, source, target = map(int, match.groups())
            _move(result, count, source, target, mode)
    return result


def top_crates(text: str, stack_count: int, mode: int) -> str:
    """Parse drawing and moves from ``text`` and return the top crate of each stack."""
    _check_count(stack_count)
    lines = text.splitlines()
    split = next(
        (index for index, line in enumerate(lines) if _is_barrier(line, stack_count)),
        len(lines),
    )
    stacks = parse_stacks(lines[:split], stack_count)
    stacks = apply_moves(stacks, lines[split + 1 :], mode)
    return "".join(stack[-1] if stack else " " for stack in stacks)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("-f", dest="file_name", default=DEFAULT_INPUT)
    parser.add_argument("-m", dest="mode", type=int, default=1)
    parser.add_argument("-n", dest="stacks", type=int, default=3)
    parser.add_argument("-v", dest="verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    mode = 1
    if args.mode in (1, 2):
        mode = args.mode
    else:
        print(f"ERROR. Wrong mode: {mode}")

    print(f"Rearranging stacks in {args.file_name} mode {mode}")
    try:
        with open(args.file_name, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print(f"ERROR: Could not open file {args.file_name}")
        return 1

    try:
        top = top_crates(text, args.stacks, mode)
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return 1

    print("------------------ Summary ------------------")
    print("Top stack:")
    print(top)
    return 0