"""Find the first start-of-packet or start-of-message marker."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

DEFAULT_INPUT = "puzzle-06-example-input.txt"


def find_marker(data: Sequence, length: int) -> int | None:
    """Return the count of characters read when the last ``length`` are all distinct."""
    if length < 1:
        raise ValueError(f"marker length must be positive, got {length}")
    for end in range(length, len(data) + 1):
        if len(set(data[end - length : end])) == length:
            return end
    return None


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("-f", dest="file_name", default=DEFAULT_INPUT)
    parser.add_argument("-l", dest="length", type=int, default=4)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    print(f"Finding markers {args.file_name}")
    try:
        with open(args.file_name, "rb") as handle:
            data = handle.read()
    except OSError:
        print(f"ERROR: Could not open file {args.file_name}")
        return 1

    try:
        position = find_marker(data, args.length)
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return 1
    if position is not None:
        print(f"Marker found after {position} characters")
    return 0