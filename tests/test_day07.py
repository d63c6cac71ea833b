from aoc2022.day07 import build_tree, main, small_directories_total, smallest_to_free

EXAMPLE = [
    "$ cd /",
    "$ ls",
    "dir a",
    "14848514 b.txt",
    "8504156 c.dat",
    "dir d",
    "$ cd a",
    "$ ls",
    "dir e",
    "29116 f",
    "2557 g",
    "62596 h.lst",
    "$ cd e",
    "$ ls",
    "584 i",
    "$ cd ..",
    "$ cd ..",
    "$ cd d",
    "$ ls",
    "4060174 j",
    "8033020 d.log",
    "5626152 d.ext",
    "7214296 k",
]


def _find(root, name):
    return next(d for d in root.walk() if d.name == name)


def test_tree_structure():
    root = build_tree(EXAMPLE)
    assert {d.name for d in root.walk()} == {"/", "a", "e", "d"}
    assert _find(root, "e").total_size() == 584
    assert _find(root, "e").parent is _find(root, "a")


def test_example_totals():
    root = build_tree(EXAMPLE)
    assert root.total_size() == 48381165
    assert small_directories_total(root, 100000) == 95437
    assert smallest_to_free(root, 70000000, 30000000) == 24933642


def test_root_size_is_sum_of_children_and_files():
    root = build_tree(EXAMPLE)
    children = sum(d.total_size() for d in root.dirs.values())
    assert root.total_size() == children + sum(root.files.values())


def test_zero_limit_gives_zero():
    assert small_directories_total(build_tree(EXAMPLE), 0) == 0


def test_nothing_can_free_enough():
    root = build_tree(EXAMPLE)
    assert smallest_to_free(root, 100, 10**9) is None


def test_nothing_needed_picks_smallest_directory():
    root = build_tree(EXAMPLE)
    smallest = min(d.total_size() for d in root.walk())
    assert smallest_to_free(root, 10**9, 0) == smallest


def test_cd_up_at_root_stays():
    root = build_tree(["$ cd /", "$ cd ..", "$ ls", "10 f"])
    assert root.files == {"f": 10}


def test_cd_unknown_directory_stays():
    root = build_tree(["$ cd nowhere", "$ ls", "5 g"])
    assert root.files == {"g": 5}


def test_output_outside_listing_ignored():
    assert build_tree(["7 stray"]).total_size() == 0


def test_repeated_listing_not_double_counted():
    once = build_tree(EXAMPLE)
    twice = build_tree(EXAMPLE + ["$ cd /", "$ ls", "14848514 b.txt", "dir a"])
    assert twice.total_size() == once.total_size()


def test_main_output(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE) + "\n")
    assert main(["-f", str(path)]) == 0
    out = capsys.readouterr().out
    root = build_tree(EXAMPLE)
    assert f"Grand total size: {root.total_size()}" in out
    assert f"Total of small directories: {small_directories_total(root, 100000)}" in out
    assert f"Size of the directory is: {smallest_to_free(root, 70000000, 30000000)}" in out


def test_main_missing_file(tmp_path, capsys):
    assert main(["-f", str(tmp_path / "missing.txt")]) == 1
    assert "ERROR: Could not open file" in capsys.readouterr().out