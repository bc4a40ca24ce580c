"""Day 6: a patrolling guard and the obstructions that trap it in a loop."""

from __future__ import annotations

import os

from advent24.inputs import read_lines

_DIRECTIONS = ((-1, 0), (0, 1), (1, 0), (0, -1))

Grid = list[str]


def _find_start(grid: Grid) -> tuple[int, int]:
    """Position of the guard, scanning rows until both coordinates are non-zero."""
    y = x = 0
    for row_index, row in enumerate(grid):
        col = row.find("^")
        if col >= 0:
            y, x = row_index, col
        if x != 0 and y != 0:
            break
    return y, x


def _inside(grid: Grid, y: int, x: int) -> bool:
    return 0 <= y < len(grid) and 0 <= x < len(grid[y])


def _blocked(grid: Grid, y: int, x: int) -> bool:
    """Whether (y, x) lies within the grid's bounds and holds an obstruction."""
    return 0 <= y < len(grid) and 0 <= x < len(grid[0]) and grid[y][x] == "#"


def _turn(direction: int) -> int:
    return (direction + 1) % len(_DIRECTIONS)


def part_a(path: str | os.PathLike[str]) -> int:
    """Count the distinct cells the guard visits before leaving the grid."""
    grid = read_lines(path)
    y, x = _find_start(grid)
    direction = 0
    visited: set[tuple[int, int]] = set()
    while _inside(grid, y, x):
        visited.add((y, x))
        dy, dx = _DIRECTIONS[direction]
        if _blocked(grid, y + dy, x + dx):
            direction = _turn(direction)
            dy, dx = _DIRECTIONS[direction]
        y, x = y + dy, x + dx
    return len(visited)


def _loops_after_turn(
    grid: Grid, y: int, x: int, direction: int, seen: set[tuple[int, int, int]]
) -> bool:
    """Whether turning right at (y, x) leads back into an already walked state."""
    states = set(seen)
    direction = _turn(direction)
    while _inside(grid, y, x):
        state = (y, x, direction)
        if state in states:
            return True
        states.add(state)
        dy, dx = _DIRECTIONS[direction]
        if _blocked(grid, y + dy, x + dx):
            direction = _turn(direction)
            dy, dx = _DIRECTIONS[direction]
        y, x = y + dy, x + dx
    return False


def part_b(path: str | os.PathLike[str]) -> int:
    """Count the steps of the walk where a right turn instead would form a loop."""
    grid = read_lines(path)
    y, x = _find_start(grid)
    direction = 0
    states: set[tuple[int, int, int]] = set()
    result = 0
    while _inside(grid, y, x):
        state = (y, x, direction)
        if state in states:
            break
        states.add(state)
        dy, dx = _DIRECTIONS[direction]
        ny, nx = y + dy, x + dx
        if 0 <= ny < len(grid) and 0 <= nx < len(grid[0]):
            if grid[ny][nx] == "#":
                direction = _turn(direction)
            elif _loops_after_turn(grid, y, x, direction, states):
                result += 1
        dy, dx = _DIRECTIONS[direction]
        y, x = y + dy, x + dx
    return result


def _loops(grid: Grid, y: int, x: int) -> bool:
    """Walk the guard from (y, x) facing up; true if it ever repeats a state."""
    direction = 0
    states: set[tuple[int, int, int]] = set()
    while _inside(grid, y, x):
        state = (y, x, direction)
        if state in states:
            return True
        states.add(state)
        dy, dx = _DIRECTIONS[direction]
        if _blocked(grid, y + dy, x + dx):
            direction = _turn(direction)
            dy, dx = _DIRECTIONS[direction]
            if _blocked(grid, y + dy, x + dx):
                direction = _turn(direction)
                dy, dx = _DIRECTIONS[direction]
        y, x = y + dy, x + dx
    return False


def part_c(path: str | os.PathLike[str]) -> int:
    """Count the empty cells where a new obstruction traps the guard in a loop."""
    grid = read_lines(path)
    y, x = _find_start(grid)
    result = 0
    for row_index, row in enumerate(grid):
        for col, char in enumerate(row):
            if char != ".":
                continue
            changed = list(grid)
            changed[row_index] = row[:col] + "#" + row[col + 1 :]
            if _loops(changed, y, x):
                result += 1
    return result