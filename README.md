# advent24

Solutions to a series of daily programming puzzles. Each day has its own module,
`advent24.dayNN`. The functions in a module take the path of a puzzle input file
and return the answer. Many of them also print progress or pictures to standard
output as they work.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Usage

Call the solver for a day and pass it the path of your input file:

```python
from advent24 import day01, day14, day18

print(day01.part_a("inputs/day01.txt"))
print(day01.part_b("inputs/day01.txt"))

# Some days need the size of the grid as well.
print(day14.part_a("inputs/day14.txt", 101, 103))
print(day18.part_a("inputs/day18.txt", 70, 1024))
```

The modules and their functions:

| Module | Functions | Returns |
| --- | --- | --- |
| `day00` | `run(path)` | sums of each key's numbers, as a dict |
| `day01` | `part_a(path)`, `part_b(path)` | total distance; similarity score |
| `day02` | `part_a(path)`, `part_b(path)`, `part_c(path)` | count of safe reports (`part_c` only tries removals near the first failure) |
| `day03` | `part_a(path)`, `part_b(path)` | sum of `mul` products; sum with `do()`/`don't()` |
| `day04` | `part_a(path)`, `part_b(path)` | count of XMAS; count of crossed MAS |
| `day05` | `part_a(path)`, `part_b(path)` | sum of middle pages of ordered; of reordered updates |
| `day06` | `part_a(path)`, `part_b(path)`, `part_c(path)` | cells visited; loop counts by two methods |
| `day07` | `part_a(path)`, `part_a_brute_force(path)`, `part_b(path)` | sum of solvable test values |
| `day08` | `part_a(path)`, `part_b(path)` | set of antinode positions as `(row, column)` |
| `day13` | `part_a(path)`, `part_b(path)` | tokens needed to win the prizes |
| `day14` | `part_a(path, width, height)`, `render_at(path, seconds, width=101, height=103)` | safety factor; picture or `None` |
| `day15` | `part_a(path)`, `part_b(path)` | sum of box GPS coordinates |
| `day16` | `part_a(path)`, `part_b(path)` | lowest maze score; count of two-step racetrack cheats saving at least 100 |
| `day17` | `part_a(path)`, `part_b(path)` | program output as a comma separated string |
| `day18` | `part_a(path, grid_size, fallen)`, `part_b(path, grid_size, fallen)` | fewest steps to the exit |
| `day19` | `part_a(path)`, `part_b(path)` | count of possible designs; total arrangements |
| `day20` | `part_a(path)`, `part_b(path)` | count of cheats of 2 and of up to 20 steps saving at least 100 |
| `day21` | `part_a(path)`, `part_b(path)` | always `0` |

`advent24.inputs.read_lines(path)` reads an input file into a list of lines
without their line endings.

Malformed input raises `ValueError`; a missing file raises `OSError`.

## What the package does not do

- `day21` does not solve its puzzle: both parts print the codes in the input and
  return `0`.
- `day17.part_b` does not return the register value it searches for. It prints
  every value found as `result: N` and returns the decoded program's output for
  a fixed, known register value.
- `day18.part_b` does not search for the first blocking byte; it returns the
  shortest path after `fallen` bytes and prints the position of the next one.
- `day14.render_at` checks a single moment; finding the right one is left to the
  caller.

## Command line

```
advent24
```

This prints a greeting. It does not run any solver.