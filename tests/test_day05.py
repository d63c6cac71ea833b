import pytest

from aoc2022.day05 import apply_moves, main, parse_stacks, top_crates

EXAMPLE = (
    "    [D]    \n"
    "[N] [C]    \n"
    "[Z] [M] [P]\n"
    " 1   2   3 \n"
    "\n"
    "move 1 from 2 to 1\n"
    "move 3 from 1 to 3\n"
    "move 2 from 2 to 1\n"
    "move 1 from 1 to 2\n"
)


def test_parse_stacks_bottom_first_and_stops_at_numbers():
    stacks = parse_stacks(EXAMPLE.splitlines(), 3)
    assert stacks == [["Z", "N"], ["M", "C", "D"], ["P"]]


def test_top_crates_example():
    assert top_crates(EXAMPLE, 3, 1) == "CMZ"
    assert top_crates(EXAMPLE, 3, 2) == "MCD"


def test_modes_mirror_each_other_and_input_untouched():
    stacks = [["A", "B", "C"], ["D"]]
    one = apply_moves(stacks, ["move 2 from 1 to 2"], 1)
    two = apply_moves(stacks, ["move 2 from 1 to 2"], 2)
    assert one[0] == two[0] == ["A"]
    assert one[1][0] == two[1][0] == "D"
    assert one[1][1:] == two[1][1:][::-1]
    assert stacks == [["A", "B", "C"], ["D"]]


@pytest.mark.parametrize("mode", [1, 2])
def test_crates_are_conserved(mode):
    lines = EXAMPLE.splitlines()
    stacks = parse_stacks(lines, 3)
    result = apply_moves(stacks, lines[4:], mode)
    assert sorted(sum(result, [])) == sorted(sum(stacks, []))


def test_non_move_lines_ignored():
    stacks = [["A"], ["B"]]
    assert apply_moves(stacks, ["", "garbage"], 1) == stacks


def test_moving_too_many_crates_raises():
    with pytest.raises(ValueError):
        apply_moves([["A"], []], ["move 2 from 1 to 2"], 1)


def test_unknown_stack_raises():
    with pytest.raises(ValueError):
        apply_moves([["A"], []], ["move 1 from 4 to 1"], 2)


def test_wrong_mode_raises():
    with pytest.raises(ValueError):
        apply_moves([["A"]], [], 3)


@pytest.mark.parametrize("count", [0, 10])
def test_stack_count_limits(count):
    with pytest.raises(ValueError):
        parse_stacks([], count)


def test_main_prints_top(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main(["-f", str(path), "-m", "2"]) == 0
    out = capsys.readouterr().out
    assert top_crates(EXAMPLE, 3, 2) in out.splitlines()


def test_main_missing_file(tmp_path, capsys):
    assert main(["-f", str(tmp_path / "missing.txt")]) == 1
    assert "ERROR: Could not open file" in capsys.readouterr().out