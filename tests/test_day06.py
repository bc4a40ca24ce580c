import pytest

from advent24.day06 import part_a, part_b, part_c

EXAMPLE = """....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""

OPEN = "..\n^.\n"


@pytest.fixture
def write(tmp_path):
    def _write(text):
        path = tmp_path / "input.txt"
        path.write_text(text)
        return path

    return _write


def test_part_a_example(write):
    assert part_a(write(EXAMPLE)) == 41


def test_part_b_example(write):
    assert part_b(write(EXAMPLE)) == 6


def test_part_c_example(write):
    assert part_c(write(EXAMPLE)) == 6


def test_part_a_walks_out_of_a_small_grid(write):
    assert part_a(write(OPEN)) == 2


@pytest.mark.parametrize("solve", [part_a, part_b, part_c])
def test_empty_grid_gives_nothing(write, solve):
    assert solve(write("")) == 0


def test_part_a_bounded_by_grid_size(write):
    path = write(EXAMPLE)
    cells = sum(len(line) for line in EXAMPLE.splitlines())
    assert 0 < part_a(path) <= cells


def test_part_c_bounded_by_empty_cells(write):
    path = write(EXAMPLE)
    assert part_c(path) <= EXAMPLE.count(".")


def test_no_loop_possible_in_open_grid(write):
    path = write(OPEN)
    assert part_b(path) == part_c(path) == 0


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        part_a(tmp_path / "absent.txt")