import pytest

from aoc2022.day09 import adjacent, follow, main, parse_moves, visited_by_tail

SMALL = ["R 4", "U 4", "L 3", "D 1", "R 4", "D 1", "L 5", "R 2"]
LARGE = ["R 5", "U 8", "L 8", "D 3", "R 17", "D 10", "L 25", "U 20"]


@pytest.mark.parametrize(
    "tail",
    [(3, 3), (2, 3), (2, 2), (3, 2), (4, 2), (4, 3), (4, 4), (3, 4), (2, 4)],
)
def test_adjacent_neighbourhood(tail):
    assert adjacent((3, 3), tail) is True


@pytest.mark.parametrize("tail", [(5, 3), (1, 3), (3, 5), (3, 1), (5, 5), (1, 2)])
def test_not_adjacent(tail):
    assert adjacent((3, 3), tail) is False


def test_follow_stays_when_touching():
    assert follow((3, 3), (2, 2)) == (2, 2)


@pytest.mark.parametrize(
    "head,tail",
    [((5, 3), (3, 3)), ((3, 5), (3, 3)), ((5, 4), (3, 3)), ((1, 1), (2, 3)), ((5, 5), (3, 3))],
)
def test_follow_catches_up(head, tail):
    moved = follow(head, tail)
    assert adjacent(head, moved)
    assert abs(moved[0] - tail[0]) <= 1 and abs(moved[1] - tail[1]) <= 1


def test_parse_moves():
    assert parse_moves(["R 4", "", "U 12"]) == [("R", 4), ("U", 12)]


@pytest.mark.parametrize("line", ["X 3", "R", "R four"])
def test_parse_moves_rejects_bad_lines(line):
    with pytest.raises(ValueError):
        parse_moves([line])


def test_small_example_two_knots():
    assert len(visited_by_tail(parse_moves(SMALL), 2)) == 13


def test_small_example_ten_knots():
    assert visited_by_tail(parse_moves(SMALL), 10) == {(0, 0)}


def test_large_example_ten_knots():
    assert len(visited_by_tail(parse_moves(LARGE), 10)) == 36


def test_no_moves_only_origin():
    assert visited_by_tail([], 2) == {(0, 0)}


def test_more_knots_never_visit_more():
    moves = parse_moves(LARGE)
    assert len(visited_by_tail(moves, 10)) <= len(visited_by_tail(moves, 2))


def test_single_knot_rejected():
    with pytest.raises(ValueError):
        visited_by_tail([("R", 1)], 1)


def test_main_prints_amount(tmp_path, capsys):
    path = tmp_path / "moves.txt"
    path.write_text("\n".join(SMALL) + "\n", encoding="utf-8")
    assert main(["-f", str(path)]) == 0
    assert "Amount: 13" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main(["-f", str(tmp_path / "absent.txt")]) == 1
    assert "ERROR: Could not open file" in capsys.readouterr().out