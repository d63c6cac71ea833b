# aoc2022

Solvers for the 2022 Advent of Code puzzles, days 1 to 12. Each day is a
module in the `aoc2022` package (`aoc2022.day01` to `aoc2022.day12`). Each
module has plain functions that you can call from your own code, and a command
that reads a puzzle input file and prints a summary.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Commands

Every command takes `-f FILE` for the input file. If the file cannot be
opened, or the input is malformed, the command prints an `ERROR` line and
exits with status 1.

| Command         | Puzzle and options |
|-----------------|--------------------|
| `aoc2022-day01` | Elves carrying the most calories. `-t N` reports the top N (capped at 10) and their total. `-v` prints each Elf. Default file `p1-input.txt`. |
| `aoc2022-day02` | Rock–paper–scissors scores. `-m 1` reads X/Y/Z as shapes. `-m 2` reads them as outcomes. `-v` prints each round. Default file `puzzle-02-input.txt`. |
| `aoc2022-day03` | Rucksack priorities. `-m 1` sums misplaced items. `-m 2` sums group badges. `-v` prints each item. Default file `puzzle-03-input.txt`. |
| `aoc2022-day04` | Section assignment pairs. `-m 1` counts pairs where one contains the other. `-m 2` counts pairs that overlap. `-v` prints each match. Default file `puzzle-04-input.txt`. |
| `aoc2022-day05` | Top crates after the crane moves. `-m 1` moves one crate at a time. `-m 2` moves them all at once. `-n N` sets the number of stacks (1–9, default 3). Default file `puzzle-05-example-input.txt`. |
| `aoc2022-day06` | Position of the first marker. `-l N` sets the marker length (default 4). Default file `puzzle-06-example-input.txt`. |
| `aoc2022-day07` | Directory sizes from a terminal log. Prints the grand total, the total of directories of at most 100000, and the smallest directory whose deletion frees enough space. Default file `puzzle-07-example-input.txt`. |
| `aoc2022-day08` | Highest scenic score in the tree grid. Default file `puzzle-08-input.txt`. |
| `aoc2022-day09` | Positions visited by the tail of a rope. `-n N` sets the number of knots (default 2). Also prints the bounds of the head's movement. Default file `puzzle-09-input.txt`. |
| `aoc2022-day10` | CPU signal strength and the 40×6 CRT image. `--animate` redraws the screen each cycle, pausing `--delay` seconds (default 0.2). Default file `puzzle-10-input.txt`. |
| `aoc2022-day11` | Monkey business. `-p 1` plays 20 rounds with worry divided by 3, and `-v` traces every throw. `-p 2` (the default) plays 10000 rounds. `--check` compares inspection counts with the worked example's checkpoints. Default file `p11-input.txt`. |
| `aoc2022-day12` | Fewest steps from S to E. Prints the map with the path in red and the step count. Default file `p12-input.txt`. |

For days 2, 4 and 5, an unknown `-m` value prints an error and the command
carries on in mode 1.

Example:

```
aoc2022-day01 -f p1-input.txt -t 3
```

## Library use

The solvers take lines or text, so you do not need an input file:

```python
from aoc2022 import day01, day04, day06

lines = ["1000", "2000", "", "4000", ""]
print(day01.top_calories(lines, 1))   # list of Elf(number, calories, row)

print(day04.count_pairs(["2-8,3-7", "5-7,7-9"], 1))

print(day06.find_marker("mjqjpqmgbljsphdztnvjfqwrcgsmlb", 4))
```

Other entry points:

- `day02.round_scores(opponent, me, mode)` and `day02.total_scores(lines, mode)`
- `day03.priority(item)`, `day03.misplaced_item(rucksack)`,
  `day03.group_badge(group)`, `day03.sum_misplaced_priorities(lines)` and
  `day03.sum_badge_priorities(lines)`
- `day04.parse_pair(line)`, `day04.fully_contains(first, second)` and
  `day04.overlaps(first, second)`
- `day05.parse_stacks(lines, stack_count)`,
  `day05.apply_moves(stacks, lines, mode)` and
  `day05.top_crates(text, stack_count, mode)`
- `day07.build_tree(lines)`, which returns a `Directory` with `total_size()`
  and `walk()`, plus `day07.small_directories_total(root, limit)` and
  `day07.smallest_to_free(root, disk_size, needed)`
- `day08.parse_grid(lines)`, `day08.scenic_score(grid, row, col)` and
  `day08.max_scenic_score(grid)`
- `day09.adjacent(head, tail)`, `day09.follow(head, tail)`,
  `day09.parse_moves(lines)` and `day09.visited_by_tail(moves, knots)`
- `day10.cycle_values(lines)`, `day10.signal_strength(lines)` and
  `day10.render(lines, width, height)`
- `day11.parse_monkeys(text)` and `day11.play(monkeys, rounds, relief)`, then
  `day11.monkey_business(monkeys)`
- `day12.parse_heightmap(lines)`, `day12.shortest_path(grid)` and
  `day12.shortest_path_length(grid)`

Functions raise `ValueError` on malformed input or an unknown mode.

## What is not included

The package covers days 1 to 12 only. It has no solver for later days. It
does not download puzzle inputs.