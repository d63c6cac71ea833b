import pytest

from aoc2022.day06 import find_marker, main

SAMPLE = "mjqjpqmgbljsphdztnvjfqwrcgsmsb"


def test_known_examples():
    assert find_marker(SAMPLE, 4) == 7
    assert find_marker(SAMPLE, 14) == 19
    assert find_marker("bvwbjplbgvbhsrlpgdmjqwftvncz", 4) == 5


@pytest.mark.parametrize("length", [2, 4, 14])
def test_window_is_distinct_and_first(length):
    position = find_marker(SAMPLE, length)
    window = SAMPLE[position - length : position]
    assert len(set(window)) == length
    assert find_marker(SAMPLE[: position - 1], length) is None


def test_marker_at_end_of_short_input():
    assert find_marker("abcd", 4) == len("abcd")


def test_no_marker():
    assert find_marker("aaaaaa", 2) is None
    assert find_marker("abc", 4) is None


def test_bytes_and_str_agree():
    assert find_marker(SAMPLE.encode(), 4) == find_marker(SAMPLE, 4)


def test_invalid_length():
    with pytest.raises(ValueError):
        find_marker(SAMPLE, 0)


def test_main_reports_marker(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE)
    assert main(["-f", str(path), "-l", "14"]) == 0
    out = capsys.readouterr().out
    assert f"Marker found after {find_marker(SAMPLE, 14)} characters" in out


def test_main_missing_file(tmp_path, capsys):
    assert main(["-f", str(tmp_path / "missing.txt")]) == 1
    assert "ERROR: Could not open file" in capsys.readouterr().out