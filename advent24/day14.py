"""Day 14: robots moving on a wrapping grid."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from advent24.inputs import read_lines

_NUMBER = re.compile(r"-?\d+")
_SECONDS = 100
_ROW_THRESHOLD = 25


@dataclass(frozen=True)
class _Robot:
    x: int
    y: int
    vx: int
    vy: int

    def position_after(self, seconds: int, width: int, height: int) -> tuple[int, int]:
        return (self.x + self.vx * seconds) % width, (self.y + self.vy * seconds) % height


def _robots(path: str | os.PathLike[str]) -> list[_Robot]:
    robots = []
    for line in read_lines(path):
        numbers = [int(match) for match in _NUMBER.findall(line)]
        if len(numbers) < 4:
            raise ValueError(f"robot line needs four numbers: {line!r}")
        robots.append(_Robot(*numbers[:4]))
    return robots


def part_a(path: str | os.PathLike[str], width: int, height: int) -> int:
    """Safety factor: product of the robot counts per quadrant after 100 seconds."""
    mid_x = (width - 1) // 2
    mid_y = (height - 1) // 2
    quadrants = [0, 0, 0, 0]
    for robot in _robots(path):
        x, y = robot.position_after(_SECONDS, width, height)
        if x == mid_x or y == mid_y:
            continue
        quadrants[(x > mid_x) + 2 * (y > mid_y)] += 1
    first, second, third, fourth = quadrants
    return first * second * third * fourth


def render_at(
    path: str | os.PathLike[str], seconds: int, width: int = 101, height: int = 103
) -> str | None:
    """Draw the robots after ``seconds`` if some row holds more than 25 of them.

    The picture marks robots with ``0`` and empty cells with ``.``.  When
    found, the seconds and the picture are printed and the picture returned;
    otherwise None is returned.
    """
    grid = [["."] * width for _ in range(height)]
    for robot in _robots(path):
        x, y = robot.position_after(seconds, width, height)
        grid[y][x] = "0"
    if not any(row.count("0") > _ROW_THRESHOLD for row in grid):
        return None
    picture = "\n".join("".join(row) for row in grid)
    print(seconds)
    print(picture)
    return picture