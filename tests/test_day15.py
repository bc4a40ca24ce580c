from pathlib import Path

import pytest

from advent24.day15 import part_a, part_b

SMALL_EXAMPLE = """\
########
#..O.O.#
##@.O..#
#...O..#
#.#.O..#
#...O..#
#......#
########

<^^>>>vv<v>>v<<
"""

ROW_MAP = "#####\n#@O.#\n#####\n"
WIDE_ROW_MAP = "#######\n#@O...#\n#######\n"
COLUMN_MAP = "#####\n#...#\n#.O.#\n#.@.#\n#####\n"
STACK_MAP = "#####\n#...#\n#.O.#\n#.O.#\n#.@.#\n#####\n"


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "input.txt"
    path.write_text(text)
    return path


def _with_moves(tmp_path: Path, grid: str, moves: str) -> Path:
    return _write(tmp_path, f"{grid}\n{moves}\n")


def test_part_a_small_example(tmp_path):
    assert part_a(_write(tmp_path, SMALL_EXAMPLE)) == 2028


def test_part_a_push_moves_box_one_column(tmp_path):
    still = part_a(_write(tmp_path, ROW_MAP))
    pushed = part_a(_with_moves(tmp_path, ROW_MAP, ">"))
    assert pushed == still + 1


def test_part_a_box_stops_at_wall(tmp_path):
    once = part_a(_with_moves(tmp_path, ROW_MAP, ">"))
    many = part_a(_with_moves(tmp_path, ROW_MAP, ">>>>"))
    assert many == once


def test_part_a_moves_into_wall_change_nothing(tmp_path):
    still = part_a(_write(tmp_path, ROW_MAP))
    assert part_a(_with_moves(tmp_path, ROW_MAP, "^v<")) == still


def test_part_b_sideways_push(tmp_path):
    still = part_b(_write(tmp_path, WIDE_ROW_MAP))
    pushed = part_b(_with_moves(tmp_path, WIDE_ROW_MAP, ">>"))
    assert pushed == still + 1


def test_part_b_vertical_push_and_wall(tmp_path):
    still = part_b(_write(tmp_path, COLUMN_MAP))
    once = part_b(_with_moves(tmp_path, COLUMN_MAP, "^"))
    twice = part_b(_with_moves(tmp_path, COLUMN_MAP, "^^"))
    assert once == still - 100
    assert twice == once


def test_part_b_push_from_right_half(tmp_path):
    still = part_b(_write(tmp_path, COLUMN_MAP))
    assert part_b(_with_moves(tmp_path, COLUMN_MAP, ">^")) == still - 100


def test_part_b_pushes_stacked_boxes(tmp_path):
    still = part_b(_write(tmp_path, STACK_MAP))
    assert part_b(_with_moves(tmp_path, STACK_MAP, "^")) == still - 200


def test_unknown_move_raises(tmp_path):
    with pytest.raises(ValueError):
        part_a(_with_moves(tmp_path, ROW_MAP, ">?"))
    with pytest.raises(ValueError):
        part_b(_with_moves(tmp_path, ROW_MAP, "x"))


def test_missing_map_raises(tmp_path):
    with pytest.raises(ValueError):
        part_a(_write(tmp_path, "\n<>\n"))