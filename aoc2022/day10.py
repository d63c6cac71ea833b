"""Run the CPU program: sample signal strength and draw the CRT."""

from __future__ import annotations

import argparse
import time
from collections.abc import Iterable, Iterator

DEFAULT_INPUT = "puzzle-10-input.txt"
SAMPLE_CYCLES = (20, 60, 100, 140, 180, 220)
SCREEN_WIDTH = 40
SCREEN_HEIGHT = 6


def _instructions(lines: Iterable[str]) -> Iterator[tuple[int, int]]:
    """Yield (cycles taken, change to X) for each instruction."""
    for line in lines:
        parts = line.split()
        if not parts:
            continue
        if parts == ["noop"]:
            yield 1, 0
        elif parts[0] == "addx" and len(parts) == 2:
            try:
                yield 2, int(parts[1])
            except ValueError:
                raise ValueError(f"bad addx argument: {line!r}") from None
        else:
            raise ValueError(f"unknown instruction: {line!r}")


def cycle_values(lines: Iterable[str]) -> Iterator[tuple[int, int]]:
    """Yield (cycle, X during that cycle), cycles counted from 1."""
    x = 1
    cycle = 1
    for duration, delta in _instructions(lines):
        for _ in range(duration):
            yield cycle, x
            cycle += 1
        x += delta


def signal_strength(lines: Iterable[str]) -> int:
    """Sum of cycle times X at the sampled cycles."""
    return sum(cycle * x for cycle, x in cycle_values(lines) if cycle in SAMPLE_CYCLES)


def _check_screen(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"screen must be positive, got {width}x{height}")


def _rows(pixels: list[str], width: int) -> list[str]:
    return ["".join(pixels[start : start + width]) for start in range(0, len(pixels), width)]


def _lit(position: int, x: int, width: int) -> bool:
    return abs(position % width - x) <= 1


def render(lines: Iterable[str], width: int, height: int) -> list[str]:
    """Draw the CRT: '#' where the sprite covers the pixel being drawn, else '.'."""
    _check_screen(width, height)
    pixels = ["."] * (width * height)
    for cycle, x in cycle_values(lines):
        position = cycle - 1
        if position >= len(pixels):
            break
        if _lit(position, x, width):
            pixels[position] = "#"
    return _rows(pixels, width)


def _animate(lines: list[str], delay: float) -> None:
    size = SCREEN_WIDTH * SCREEN_HEIGHT
    pixels = ["."] * size
    for cycle, x in cycle_values(lines):
        position = cycle - 1
        if position >= size:
            break
        if _lit(position, x, SCREEN_WIDTH):
            pixels[position] = "#"
        sprite = ["."] * size
        for spot in (x - 1, x, x + 1):
            if 0 <= spot < size:
                sprite[spot] = "X"
        sprite[position] = "#"

        print("\033c", end="")
        print("0        10        20        30       39")
        print("↓         ↓         ↓         ↓        ↓")
        print("\n".join(_rows(sprite, SCREEN_WIDTH)))
        print()
        print(f"cycle: [{position}]  X: [{x}]")
        print()
        print("\n".join(_rows(pixels, SCREEN_WIDTH)))
        time.sleep(delay)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("-f", dest="file_name", default=DEFAULT_INPUT)
    parser.add_argument("--animate", action="store_true")
    parser.add_argument("--delay", type=float, default=0.2)
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
        if args.animate:
            _animate(lines, args.delay)
            return 0
        total = signal_strength(lines)
        screen = render(lines, SCREEN_WIDTH, SCREEN_HEIGHT)
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return 1

    print(f"Sample total value: {total}")
    print("\n".join(screen))
    return 0