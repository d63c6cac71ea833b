"""Simulate monkeys passing items around and measure the monkey business."""

from __future__ import annotations

import argparse
import math
import re
from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import NamedTuple

DEFAULT_INPUT = "p11-input.txt"
RELIEF_ROUNDS = 20
WORRY_ROUNDS = 10_000

# Inspections of the first four monkeys in the worked example, by round,
# when worry is not divided by three.
EXAMPLE_CHECKPOINTS: dict[int, tuple[int, int, int, int]] = {
    1: (2, 4, 3, 6),
    20: (99, 97, 8, 103),
    1000: (5204, 4792, 199, 5192),
    2000: (10419, 9577, 392, 10391),
    3000: (15638, 14358, 587, 15593),
    4000: (20858, 19138, 780, 20797),
    5000: (26075, 23921, 974, 26000),
    6000: (31294, 28702, 1165, 31204),
    7000: (36508, 33488, 1360, 36400),
    8000: (41728, 38268, 1553, 41606),
    9000: (46945, 43051, 1746, 46807),
    10000: (52166, 47830, 1938, 52013),
}

_HEADER = re.compile(r"\s*Monkey\s+(\d+)\s*:")
_ITEMS = re.compile(r"\s*Starting items:(.*)$")
_OPERATION = re.compile(r"\s*Operation:\s*new\s*=\s*old\s*([+*])\s*(old|\d+)\s*$")
_TEST = re.compile(r"\s*Test:\s*divisible by\s+(\d+)")
_IF_TRUE = re.compile(r"\s*If true:\s*throw to monkey\s+(\d+)")
_IF_FALSE = re.compile(r"\s*If false:\s*throw to monkey\s+(\d+)")


@dataclass(eq=False)
class Monkey:
    """A monkey's items, its worry operation and its throwing rule."""

    number: int
    items: deque[int]
    operation: str
    operand: int | None
    divisor: int
    if_true: int
    if_false: int
    inspections: int = 0

    def inspect(self, worry: int) -> int:
        """Apply the operation; an operand of None stands for the old value."""
        argument = worry if self.operand is None else self.operand
        if self.operation == "+":
            return worry + argument
        return worry * argument

    def target(self, worry: int) -> int:
        """Number of the monkey the item with this worry level goes to."""
        return self.if_true if worry % self.divisor == 0 else self.if_false


class Throw(NamedTuple):
    monkey: int
    worry: int
    inspected: int
    relieved: int
    target: int


def _match(pattern: re.Pattern[str], line: str) -> re.Match[str]:
    match = pattern.match(line)
    if not match:
        raise ValueError(f"Parse ERROR: {line!r}")
    return match


def _parse_block(lines: Sequence[str]) -> Monkey:
    if len(lines) < 6:
        raise ValueError(f"Parse ERROR: incomplete monkey {lines[0]!r}")
    number = int(_match(_HEADER, lines[0]).group(1))
    items_text = _match(_ITEMS, lines[1]).group(1)
    try:
        items = deque(int(token) for token in re.split(r"[ ,]+", items_text.strip()) if token)
    except ValueError:
        raise ValueError(f"Parse ERROR: {lines[1]!r}") from None
    operation = _match(_OPERATION, lines[2])
    operand = None if operation.group(2) == "old" else int(operation.group(2))
    divisor = int(_match(_TEST, lines[3]).group(1))
    if divisor == 0:
        raise ValueError("Parse ERROR: divisor must not be zero")
    if_true = int(_match(_IF_TRUE, lines[4]).group(1))
    if_false = int(_match(_IF_FALSE, lines[5]).group(1))
    return Monkey(number, items, operation.group(1), operand, divisor, if_true, if_false)


def parse_monkeys(text: str) -> list[Monkey]:
    """Parse the monkey notes; monkeys must be numbered 0, 1, 2 and so on."""
    blocks = [block for block in re.split(r"\n[ \t\r]*\n", text.strip()) if block.strip()]
    monkeys = [_parse_block(block.splitlines()) for block in blocks]
    for index, monkey in enumerate(monkeys):
        if monkey.number != index:
            raise ValueError(f"Parse ERROR: expected monkey {index}, got {monkey.number}")
    for monkey in monkeys:
        for target in (monkey.if_true, monkey.if_false):
            if not 0 <= target < len(monkeys):
                raise ValueError(f"Parse ERROR: monkey {monkey.number} throws to {target}")
    return monkeys


def _round(monkeys: Sequence[Monkey], relief: bool) -> Iterator[Throw]:
    """Play one round, yielding every throw as it happens."""
    modulus = math.prod(monkey.divisor for monkey in monkeys)
    for monkey in monkeys:
        while monkey.items:
            worry = monkey.items.popleft()
            inspected = monkey.inspect(worry)
            relieved = inspected // 3 if relief else inspected % modulus
            target = monkey.target(relieved)
            monkeys[target].items.append(relieved)
            monkey.inspections += 1
            yield Throw(monkey.number, worry, inspected, relieved, target)


def play(monkeys: Sequence[Monkey], rounds: int, relief: bool) -> Sequence[Monkey]:
    """Play rounds in place; with relief worry is divided by 3, else kept small by modulus."""
    for _ in range(rounds):
        for _ in _round(monkeys, relief):
            pass
    return monkeys


def monkey_business(monkeys: Sequence[Monkey]) -> int:
    """Most inspections times the largest inspection count different from it."""
    counts = [monkey.inspections for monkey in monkeys]
    first = max(counts, default=0)
    second = max((count for count in counts if count != first), default=0)
    return first * second


def _trace_round(monkeys: Sequence[Monkey], number: int) -> None:
    print(f"Round: {number}")
    current = None
    for throw in _round(monkeys, relief=True):
        if throw.monkey != current:
            current = throw.monkey
            print(f"Monkey: {current}")
        monkey = monkeys[throw.monkey]
        argument = throw.worry if monkey.operand is None else monkey.operand
        print(f"Monkey inspects an item with a worry level of {throw.worry}.")
        if monkey.operation == "+":
            print(f"Worry level increases by {argument} to {throw.inspected}.")
        else:
            print(f"Worry level is multiplied by {argument} to {throw.inspected}.")
        print(f"Monkey gets bored with item. Worry level is divided by 3 to {throw.relieved}.")
        negation = "" if throw.relieved % monkey.divisor == 0 else "not "
        print(f"Current worry level is {negation}divisible by {monkey.divisor}")
        print(f"Item with worry level {throw.relieved} is thrown to monkey {throw.target}.")
        print()
    print()


def _check(monkeys: Sequence[Monkey]) -> bool:
    correct = True
    for number in range(1, WORRY_ROUNDS + 1):
        play(monkeys, 1, relief=False)
        expected = EXAMPLE_CHECKPOINTS.get(number)
        if expected is None:
            continue
        print(f"Comparing round {number}")
        for index, wanted in enumerate(expected):
            actual = monkeys[index].inspections if index < len(monkeys) else 0
            print(f"[{index}] (Actual): {actual:08d} <==> {wanted:08d} (Expected)")
            if actual != wanted:
                correct = False
        if not correct:
            print("Not correct")
            break
    return correct


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("-f", dest="file_name", default=DEFAULT_INPUT)
    parser.add_argument("-p", dest="part", type=int, choices=(1, 2), default=2)
    parser.add_argument("-v", dest="verbose", action="store_true")
    parser.add_argument("--check", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    try:
        with open(args.file_name, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print(f"ERROR: Could not open file {args.file_name}")
        return 1

    try:
        monkeys = parse_monkeys(text)
    except ValueError as exc:
        print(exc)
        return 1

    if args.check:
        correct = _check(monkeys)
        print(f"Monkey business: {monkey_business(monkeys)}")
        return 0 if correct else 1

    if args.part == 1:
        if args.verbose:
            for number in range(1, RELIEF_ROUNDS + 1):
                _trace_round(monkeys, number)
        else:
            play(monkeys, RELIEF_ROUNDS, relief=True)
    else:
        play(monkeys, WORRY_ROUNDS, relief=False)

    print(f"Monkey business: {monkey_business(monkeys)}")
    return 0