"""Score a rock-paper-scissors strategy guide."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from enum import Enum
from typing import NamedTuple

DEFAULT_INPUT = "puzzle-02-input.txt"

_OPPONENT_SHAPES = {"A": 1, "B": 2, "C": 3}
_MY_CODES = {"X": 0, "Y": 1, "Z": 2}


class Outcome(Enum):
    WIN = "win"
    DRAW = "draw"
    LOSS = "lost"


class RoundScore(NamedTuple):
    opponent: int
    me: int
    outcome: Outcome


class Totals(NamedTuple):
    me: int
    opponent: int


_OUTCOME_POINTS = {
    Outcome.WIN: (0, 6),
    Outcome.DRAW: (3, 3),
    Outcome.LOSS: (6, 0),
}


def round_scores(opponent: str, me: str, mode: int) -> RoundScore:
    """Score one round; mode 1 reads X/Y/Z as shapes, mode 2 as outcomes."""
    if mode not in (1, 2):
        raise ValueError(f"Wrong mode: {mode}")
    if opponent not in _OPPONENT_SHAPES:
        raise ValueError(f"Wrong input opponent_move: {opponent!r}")
    if me not in _MY_CODES:
        raise ValueError(f"Wrong input my_move: {me!r}")

    opponent_shape = _OPPONENT_SHAPES[opponent]
    code = _MY_CODES[me]
    if mode == 1:
        my_shape = code + 1
        outcome = {0: Outcome.DRAW, 1: Outcome.WIN, 2: Outcome.LOSS}[
            (my_shape - opponent_shape) % 3
        ]
    else:
        outcome = (Outcome.LOSS, Outcome.DRAW, Outcome.WIN)[code]
        my_shape = (opponent_shape - 1 + code - 1) % 3 + 1

    opponent_points, my_points = _OUTCOME_POINTS[outcome]
    return RoundScore(opponent_shape + opponent_points, my_shape + my_points, outcome)


def _parse_line(line: str) -> tuple[str, str]:
    text = line.rstrip("\r\n")
    if not text:
        raise ValueError(f"ERROR in data: {line!r}")
    rest = text[1:].lstrip()
    if not rest:
        raise ValueError(f"ERROR in data: {line!r}")
    return text[0], rest[0]


def _rounds(lines: Iterable[str], mode: int) -> Iterator[tuple[str, str, RoundScore]]:
    for line in lines:
        opponent, me = _parse_line(line)
        yield opponent, me, round_scores(opponent, me, mode)


def total_scores(lines: Iterable[str], mode: int) -> Totals:
    """Return my total score and the opponent's over all rounds."""
    me = opponent = 0
    for _, _, score in _rounds(lines, mode):
        me += score.me
        opponent += score.opponent
    return Totals(me, opponent)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("-f", dest="file_name", default=DEFAULT_INPUT)
    parser.add_argument("-v", dest="verbose", action="store_true")
    parser.add_argument("-m", dest="mode", type=int, default=1)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    mode = 1
    if args.mode in (1, 2):
        mode = args.mode
    else:
        print(f"ERROR. Wrong mode: {mode}")

    print(f"Calculating maximum total score in {args.file_name}")
    try:
        with open(args.file_name, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError:
        print(f"ERROR: Could not open file {args.file_name}")
        return 1

    me = opponent = 0
    try:
        for opponent_move, my_move, score in _rounds(lines, mode):
            me += score.me
            opponent += score.opponent
            if args.verbose:
                print(
                    f"{opponent_move} {my_move} : {score.outcome.value}: "
                    f"{score.opponent} {score.me}"
                )
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return 1

    print("------------------ Summary ------------------")
    print(f"Total score: {me} Total score opponent: {opponent}")
    return 0