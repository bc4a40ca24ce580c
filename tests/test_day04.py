from advent24.day04 import part_a, part_b

EXAMPLE = """MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSAMASM
MSAMXAMAMM
MXMXAXMASX
MXMXAXMASX
"""

EXAMPLE_EXACT = """MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSAMASM
MSAMXAMAMM
MXMXAXMASX
"""


def _write(tmp_path, content: str, name: str = "input.txt"):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_part_a_word_and_reverse_count_the_same(tmp_path):
    forward = _write(tmp_path, "..XMAS..\n", "forward.txt")
    backward = _write(tmp_path, "..SAMX..\n", "backward.txt")
    assert part_a(forward) == part_a(backward) == 1


def test_part_a_transposed_grid_counts_the_same(tmp_path):
    rows = EXAMPLE_EXACT.split()
    columns = ["".join(column) for column in zip(*rows)]
    original = _write(tmp_path, EXAMPLE_EXACT, "original.txt")
    transposed = _write(tmp_path, "\n".join(columns) + "\n", "transposed.txt")
    assert part_a(original) == part_a(transposed)


def test_part_a_word_cut_off_at_edge_is_not_counted(tmp_path):
    assert part_a(_write(tmp_path, "XMA\n")) == 0


def test_part_b_cross_on_first_row_is_not_counted(tmp_path):
    assert part_b(_write(tmp_path, "MAS\n")) == 0


def test_part_b_single_cross(tmp_path):
    grid = "M.S\n.A.\nM.S\n"
    assert part_b(_write(tmp_path, grid)) == 1


def test_part_b_same_letters_on_a_diagonal_do_not_cross(tmp_path):
    grid = "M.M\n.A.\nM.M\n"
    assert part_b(_write(tmp_path, grid)) == 0


def test_extra_row_only_adds_matches(tmp_path):
    shorter = _write(tmp_path, EXAMPLE_EXACT, "shorter.txt")
    longer = _write(tmp_path, EXAMPLE, "longer.txt")
    assert part_a(longer) >= part_a(shorter)
    assert part_b(longer) >= part_b(shorter)