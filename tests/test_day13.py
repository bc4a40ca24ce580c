import pytest

from advent24.day13 import part_a, part_b

MACHINES = [
    "Button A: X+94, Y+34\nButton B: X+22, Y+67\nPrize: X=8400, Y=5400\n",
    "Button A: X+26, Y+66\nButton B: X+67, Y+21\nPrize: X=12748, Y=12176\n",
    "Button A: X+17, Y+86\nButton B: X+84, Y+37\nPrize: X=7870, Y=6450\n",
    "Button A: X+69, Y+23\nButton B: X+27, Y+71\nPrize: X=18641, Y=10279\n",
]


@pytest.fixture
def example(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(MACHINES))
    return path


def _machine_files(tmp_path):
    paths = []
    for index, machine in enumerate(MACHINES):
        path = tmp_path / f"machine{index}.txt"
        path.write_text(machine)
        paths.append(path)
    return paths


def test_part_a_example(example):
    assert part_a(example) == 480


def test_part_b_example(example):
    assert part_b(example) == 875318608908


@pytest.mark.parametrize("solver", [part_a, part_b])
def test_total_is_sum_of_machines(example, tmp_path, solver):
    paths = _machine_files(tmp_path)
    assert solver(example) == sum(solver(path) for path in paths)


def test_parallel_buttons_win_nothing(tmp_path):
    path = tmp_path / "parallel.txt"
    path.write_text("Button A: X+1, Y+1\nButton B: X+2, Y+2\nPrize: X=3, Y=3\n")
    assert part_a(path) == 0


def test_prize_without_numbers_raises(tmp_path):
    path = tmp_path / "broken.txt"
    path.write_text("Button A: X+1, Y+1\nButton B: X+2, Y+3\nPrize: X=\n")
    with pytest.raises(ValueError):
        part_a(path)