import pytest

from aoc2022.day01 import MAX_ELVES, main, top_calories

EXAMPLE = [
    "1000", "2000", "3000", "",
    "4000", "",
    "5000", "6000", "",
    "7000", "8000", "9000", "",
    "10000", "",
]


def test_top_elf_of_example():
    ranking = top_calories(EXAMPLE, 1)
    assert [(elf.number, elf.calories) for elf in ranking] == [(4, 24000)]


def test_top_three_total():
    ranking = top_calories(EXAMPLE, 3)
    assert sum(elf.calories for elf in ranking) == 45000


def test_ranking_is_descending_and_bounded():
    ranking = top_calories(EXAMPLE, 4)
    assert len(ranking) == 4
    calories = [elf.calories for elf in ranking]
    assert calories == sorted(calories, reverse=True)


def test_top_is_clamped():
    lines = []
    for value in range(1, 13):
        lines += [str(value), ""]
    ranking = top_calories(lines, 20)
    assert len(ranking) == MAX_ELVES
    assert ranking[0].number == 12


def test_group_without_closing_blank_line_is_ignored():
    ranking = top_calories(["100", "", "999999"], 2)
    assert [(elf.number, elf.calories) for elf in ranking] == [(1, 100)]


def test_ties_keep_earlier_elf_first():
    ranking = top_calories(["5", "", "5", ""], 2)
    assert [elf.number for elf in ranking] == [1, 2]


def test_row_is_blank_line_row():
    ranking = top_calories(["7", "", "9", "1", ""], 1)
    assert ranking[0].row == 5


def test_main_prints_summary(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE) + "\n")
    assert main(["-f", str(path), "-t", "3"]) == 0
    out = capsys.readouterr().out
    assert "Elf 4 has maximum calories: 24000" in out
    assert "Total calories: 45000" in out


def test_main_missing_file(tmp_path, capsys):
    assert main(["-f", str(tmp_path / "missing.txt")]) == 1
    assert "ERROR: Could not open file" in capsys.readouterr().out


@pytest.mark.parametrize("top", [1, 2, 5])
def test_result_never_exceeds_top(top):
    assert len(top_calories(EXAMPLE, top)) <= top