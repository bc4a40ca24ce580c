"""Day 16: the cheapest path through a reindeer maze, and racetrack shortcuts."""

from __future__ import annotations

import os
from collections.abc import Iterator

from advent24.inputs import read_lines

Position = tuple[int, int]
Heading = tuple[int, int]

_DIRECTIONS: tuple[Heading, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))
_JUMPS: tuple[Heading, ...] = ((-2, 0), (0, 2), (2, 0), (0, -2))
_UNSET = 2**31 - 1
_STEP_COST = 1
_TURN_COST = 1000
_OPEN = {".", "X"}
_MIN_SAVING = 100


def _render(grid: list[list[str]]) -> str:
    return "\n".join("".join(row) for row in grid)


def _mark_junctions(grid: list[list[str]]) -> tuple[Position, Position]:
    """Mark inner junctions with X, clear E, and return the start and end."""
    start = end = (0, 0)
    for y in range(1, len(grid) - 1):
        for x in range(1, len(grid[0]) - 1):
            if grid[y][x] == ".":
                open_sides = sum(grid[y + dy][x + dx] == "." for dy, dx in _DIRECTIONS)
                if open_sides > 2:
                    grid[y][x] = "X"
            if grid[y][x] == "S":
                start = (y, x)
            if grid[y][x] == "E":
                end = (y, x)
                grid[y][x] = "."
    return start, end


def _moves(
    grid: list[list[str]], cost: list[list[int]], position: Position, heading: Heading
) -> Iterator[tuple[Position, Heading]]:
    """Relax the tiles reachable from ``position``, yielding each one to explore."""
    y, x = position
    here_cost = cost[y][x]
    here = grid[y][x]
    ny, nx = y + heading[0], x + heading[1]
    ahead = grid[ny][nx]
    if ahead in _OPEN and here_cost + _STEP_COST < cost[ny][nx]:
        cost[ny][nx] = here_cost + _STEP_COST
        yield (ny, nx), heading
    if here == "X" or ahead == "#":
        turned_cost = here_cost + _STEP_COST + _TURN_COST
        for turn in _DIRECTIONS:
            if turn == heading:
                continue
            ty, tx = y + turn[0], x + turn[1]
            if grid[ty][tx] in _OPEN and turned_cost < cost[ty][tx]:
                cost[ty][tx] = turned_cost
                yield (ty, tx), turn


def _explore(
    grid: list[list[str]], cost: list[list[int]], position: Position, heading: Heading
) -> None:
    """Depth-first relaxation from ``position`` without recursion limits."""
    stack = [_moves(grid, cost, position, heading)]
    while stack:
        step = next(stack[-1], None)
        if step is None:
            stack.pop()
        else:
            stack.append(_moves(grid, cost, *step))


def part_a(path: str | os.PathLike[str]) -> int:
    """Lowest score from S to E, each step costing 1 and each turn 1000."""
    lines = read_lines(path)
    if not lines:
        raise ValueError("input holds no maze")
    for line in lines:
        print(line)
    grid = [list(line) for line in lines]
    cost = [[_UNSET] * len(row) for row in grid]
    (sy, sx), (ey, ex) = _mark_junctions(grid)
    cost[sy][sx] = 0
    for heading in _DIRECTIONS:
        ny, nx = sy + heading[0], sx + heading[1]
        if grid[ny][nx] == ".":
            cost[ny][nx] = _STEP_COST + (0 if heading == (0, 1) else _TURN_COST)
            _explore(grid, cost, (ny, nx), heading)
    print(_render(grid))
    return cost[ey][ex]


def part_b(path: str | os.PathLike[str]) -> int:
    """Count two-step cheats through a wall that save at least 100 picoseconds.

    The track is a square grid with a single path from S to E.
    """
    grid = [list(line) for line in read_lines(path)]
    size = len(grid[0]) if grid else 0
    if len(grid) < size or any(len(row) < size for row in grid[:size]):
        raise ValueError("the racetrack must be a square grid")
    cost = [[_UNSET] * size for _ in range(size)]

    def tile(y: int, x: int) -> str:
        return grid[y][x] if 0 <= y < size and 0 <= x < size else "#"

    def time_at(y: int, x: int) -> int:
        return cost[y][x] if 0 <= y < size and 0 <= x < size else 0

    start = end = (0, 0)
    for y in range(size):
        for x in range(size):
            if grid[y][x] == "S":
                start = (y, x)
                cost[y][x] = 0
            if grid[y][x] == "E":
                end = (y, x)
                grid[y][x] = "."

    track: list[Position] = []
    y, x = start
    while time_at(*end) == _UNSET:
        track.append((y, x))
        here = time_at(y, x)
        for dy, dx in _DIRECTIONS:
            ny, nx = y + dy, x + dx
            if tile(ny, nx) == "." and here + 1 < time_at(ny, nx):
                cost[ny][nx] = here + 1
                y, x = ny, nx
                break
        else:
            raise ValueError("the track does not lead from S to E")

    result = 0
    for y, x in track:
        here = time_at(y, x)
        for dy, dx in _JUMPS:
            there = time_at(y + dy, x + dx)
            if there != _UNSET and there - here - 2 >= _MIN_SAVING:
                result += 1
    return result