import pytest

from advent24.day17 import part_a, part_b

QUINE = "2,4,1,3,7,5,1,5,0,3,4,1,5,5,3,0"


def _write(tmp_path, a, b, c, program):
    path = tmp_path / "input.txt"
    path.write_text(
        f"Register A: {a}\nRegister B: {b}\nRegister C: {c}\n\nProgram: {program}\n"
    )
    return path


def test_example_program(tmp_path):
    assert part_a(_write(tmp_path, 729, 0, 0, "0,1,5,4,3,0")) == "4,6,3,5,6,3,5,2,1,0"


def test_program_without_output(tmp_path):
    assert part_a(_write(tmp_path, 0, 0, 9, "2,6")) == ""


def test_outputs_register_digits(tmp_path):
    assert part_a(_write(tmp_path, 10, 0, 0, "5,0,5,1,5,4")) == "0,1,2"


def test_loop_until_a_is_zero(tmp_path):
    result = part_a(_write(tmp_path, 2024, 0, 0, "0,1,5,4,3,0"))
    assert result == "4,2,5,6,7,7,7,7,3,1,0"


def test_output_digits_are_octal(tmp_path):
    result = part_a(_write(tmp_path, 123456, 7, 3, "2,4,1,3,7,5,1,5,0,3,4,1,5,5,3,0"))
    digits = [int(part) for part in result.split(",")]
    assert digits
    assert all(0 <= digit < 8 for digit in digits)


def test_part_a_register_too_large(tmp_path):
    with pytest.raises(ValueError):
        part_a(_write(tmp_path, 234142032285293, 0, 0, QUINE))


def test_odd_program_rejected(tmp_path):
    with pytest.raises(ValueError):
        part_a(_write(tmp_path, 1, 0, 0, "0,1,5"))


def test_missing_separator(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("Register A 5\nRegister B: 0\nRegister C: 0\n\nProgram: 5,4\n")
    with pytest.raises(ValueError):
        part_a(path)


def test_part_b_quine(tmp_path):
    assert part_b(_write(tmp_path, 0, 0, 0, QUINE)) == QUINE


def test_part_b_prints_search_results(tmp_path, capsys):
    part_b(_write(tmp_path, 0, 0, 0, QUINE))
    out = capsys.readouterr().out
    assert "result: " in out


def test_part_b_other_program(tmp_path):
    assert part_b(_write(tmp_path, 729, 0, 0, "0,1,5,4,3,0")) == QUINE