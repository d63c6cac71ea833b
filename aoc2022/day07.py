"""Rebuild a file system from a terminal session and size its directories."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

DEFAULT_INPUT = "puzzle-07-example-input.txt"
DISK_SIZE = 70_000_000
NEEDED_SPACE = 30_000_000
SMALL_LIMIT = 100_000

_CD = re.compile(r"\$ cd\s+(\S+)")
_DIR = re.compile(r"dir\s+(\S+)")
_FILE = re.compile(r"\s*([+-]?\d+)\s+(\S+)")


@dataclass(eq=False)
class Directory:
    """A directory holding files (name to size) and subdirectories."""

    name: str
    parent: Directory | None = field(default=None, repr=False)
    dirs: dict[str, Directory] = field(default_factory=dict, repr=False)
    files: dict[str, int] = field(default_factory=dict, repr=False)

    def total_size(self) -> int:
        """Size of all files below this directory."""
        return sum(self.files.values()) + sum(d.total_size() for d in self.dirs.values())

    def walk(self) -> Iterator[Directory]:
        """Yield this directory and every directory below it."""
        yield self
        for child in self.dirs.values():
            yield from child.walk()


def _change_directory(root: Directory, current: Directory, target: str) -> Directory:
    if target.startswith(".."):
        return current.parent or current
    if target == "/":
        return root
    return current.dirs.get(target, current)


def build_tree(lines: Iterable[str]) -> Directory:
    """Replay ``cd`` and ``ls`` output and return the root directory."""
    root = Directory("/")
    current = root
    listing = False
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line.startswith("$"):
            listing = line.startswith("$ ls")
            if not listing and (match := _CD.match(line)):
                current = _change_directory(root, current, match.group(1))
            continue
        if not listing:
            continue
        if match := _DIR.match(line):
            name = match.group(1)
            current.dirs.setdefault(name, Directory(name, current))
        elif match := _FILE.match(line):
            current.files[match.group(2)] = int(match.group(1))
    return root


def small_directories_total(root: Directory, limit: int) -> int:
    """Sum the sizes of directories whose size is at most ``limit``."""
    return sum(size for size in (d.total_size() for d in root.walk()) if size <= limit)


def smallest_to_free(root: Directory, disk_size: int, needed: int) -> int | None:
    """Size of the smallest directory whose removal frees enough space, or None."""
    to_free = needed - (disk_size - root.total_size())
    return min(
        (size for size in (d.total_size() for d in root.walk()) if size > to_free),
        default=None,
    )


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("-f", dest="file_name", default=DEFAULT_INPUT)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    try:
        with open(args.file_name, encoding="utf-8") as handle:
            root = build_tree(handle.read().splitlines())
    except OSError:
        print(f"ERROR: Could not open file {args.file_name}")
        return 1

    grand_total = root.total_size()
    to_free = NEEDED_SPACE - (DISK_SIZE - grand_total)
    print(f"Grand total size: {grand_total}")
    print(f"Total of small directories: {small_directories_total(root, SMALL_LIMIT)}")
    print(f"Now we need to free up {to_free}")
    closest = smallest_to_free(root, DISK_SIZE, NEEDED_SPACE)
    print(f"Size of the directory is: {closest if closest is not None else 'none'}")
    return 0