import pytest

from advent24.day07 import part_a, part_a_brute_force, part_b

EXAMPLE = """\
190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20
"""


@pytest.fixture
def example(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    return path


def _write(tmp_path, text):
    path = tmp_path / "custom.txt"
    path.write_text(text)
    return path


def test_part_a_example(example):
    assert part_a(example) == 3749


def test_part_a_brute_force_example(example):
    assert part_a_brute_force(example) == 3749


def test_part_b_example(example):
    assert part_b(example) == 11387


def test_part_a_and_brute_force_agree_on_example(example):
    assert part_a(example) == part_a_brute_force(example)


def test_single_true_equation_counts_its_value(tmp_path):
    path = _write(tmp_path, "190: 10 19\n")
    assert part_a(path) == 190
    assert part_a_brute_force(path) == 190
    assert part_b(path) == 190


def test_concatenation_only_counts_in_part_b(tmp_path):
    path = _write(tmp_path, "7290: 6 8 6 15\n")
    assert part_a(path) == 0
    assert part_b(path) == 7290


def test_missing_separator_raises(tmp_path):
    path = _write(tmp_path, "190 10 19\n")
    with pytest.raises(ValueError):
        part_a(path)


def test_part_b_without_numbers_raises(tmp_path):
    path = _write(tmp_path, "5: \n")
    with pytest.raises(ValueError):
        part_b(path)


def test_brute_force_without_numbers_raises(tmp_path):
    path = _write(tmp_path, "5: \n")
    with pytest.raises(ValueError):
        part_a_brute_force(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        part_a(tmp_path / "absent.txt")