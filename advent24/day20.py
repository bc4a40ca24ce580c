"""Day 20: cheats that shorten a single-path racetrack."""

from __future__ import annotations

import os
from dataclasses import dataclass

from advent24.inputs import read_lines

Position = tuple[int, int]

_DIRECTIONS = ((-1, 0), (0, 1), (1, 0), (0, -1))
_UNSET = 2**31 - 1
_MIN_SAVING = 100
_SHORT_CHEAT = 2
_LONG_CHEAT = 20


@dataclass
class _Race:
    """The walked track and the time at which each tile is reached."""

    track: list[Position]
    times: list[list[int]]
    size: int

    def time_at(self, y: int, x: int) -> int:
        """Time at (y, x); tiles outside the grid read as 0."""
        if 0 <= y < self.size and 0 <= x < self.size:
            return self.times[y][x]
        return 0


def _race(path: str | os.PathLike[str]) -> _Race:
    """Walk the track from S to E, timing every tile on the way.

    The grid is square, as wide as its first line.  The end tile itself
    is timed but not part of the returned track.
    """
    grid = [list(line) for line in read_lines(path)]
    size = len(grid[0]) if grid else 0
    if len(grid) < size or any(len(row) < size for row in grid[:size]):
        raise ValueError("the racetrack must be a square grid")
    race = _Race([], [[_UNSET] * size for _ in range(size)], size)

    def tile(y: int, x: int) -> str:
        return grid[y][x] if 0 <= y < size and 0 <= x < size else "#"

    start = end = (0, 0)
    for y in range(size):
        for x in range(size):
            if grid[y][x] == "S":
                start = (y, x)
                race.times[y][x] = 0
            if grid[y][x] == "E":
                end = (y, x)
                grid[y][x] = "."

    y, x = start
    while race.time_at(*end) == _UNSET:
        race.track.append((y, x))
        here = race.time_at(y, x)
        for dy, dx in _DIRECTIONS:
            ny, nx = y + dy, x + dx
            if tile(ny, nx) == "." and here + 1 < race.time_at(ny, nx):
                race.times[ny][nx] = here + 1
                y, x = ny, nx
                break
        else:
            raise ValueError("the track does not lead from S to E")
    return race


def _offsets(radius: int) -> list[Position]:
    """Every offset at a Manhattan distance from 1 to ``radius``."""
    return [
        (dy, dx)
        for dy in range(-radius, radius + 1)
        for dx in range(-radius, radius + 1)
        if 1 <= abs(dy) + abs(dx) <= radius
    ]


def _count_cheats(race: _Race, offsets: list[Position]) -> int:
    result = 0
    for y, x in race.track:
        here = race.time_at(y, x)
        for dy, dx in offsets:
            there = race.time_at(y + dy, x + dx)
            if there != _UNSET and there - here - (abs(dy) + abs(dx)) >= _MIN_SAVING:
                result += 1
    return result


def part_a(path: str | os.PathLike[str]) -> int:
    """Count two-step cheats through a wall that save at least 100 picoseconds."""
    straight = [(dy * _SHORT_CHEAT, dx * _SHORT_CHEAT) for dy, dx in _DIRECTIONS]
    return _count_cheats(_race(path), straight)


def part_b(path: str | os.PathLike[str]) -> int:
    """Count cheats of up to 20 steps that save at least 100 picoseconds."""
    return _count_cheats(_race(path), _offsets(_LONG_CHEAT))