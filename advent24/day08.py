"""Day 8: antinodes of antennas sharing a frequency."""

from __future__ import annotations

import os
from collections import defaultdict
from dataclasses import dataclass
from itertools import combinations

from advent24.inputs import read_lines

Point = tuple[int, int]


@dataclass(frozen=True)
class _AntennaMap:
    antennas: dict[str, list[Point]]
    y_bound: int
    x_bound: int

    def contains(self, point: Point) -> bool:
        y, x = point
        return 0 <= y <= self.y_bound and 0 <= x <= self.x_bound

    def pairs(self):
        for positions in self.antennas.values():
            yield from combinations(positions, 2)


def _parse(path: str | os.PathLike[str]) -> _AntennaMap:
    """Read the antennas by frequency and the largest row and column index."""
    antennas: dict[str, list[Point]] = defaultdict(list)
    y_bound = x_bound = 0
    for y, line in enumerate(read_lines(path)):
        y_bound = y
        if x_bound == 0:
            if not line:
                raise ValueError(f"row {y} of the map is empty")
            x_bound = len(line) - 1
        for x, char in enumerate(line):
            if char != ".":
                antennas[char].append((y, x))
    return _AntennaMap(dict(antennas), y_bound, x_bound)


def part_a(path: str | os.PathLike[str]) -> set[Point]:
    """Antinodes one antenna spacing beyond each pair of equal antennas."""
    antenna_map = _parse(path)
    nodes: set[Point] = set()
    for (ay, ax), (by, bx) in antenna_map.pairs():
        dy, dx = ay - by, ax - bx
        for point in ((ay + dy, ax + dx), (by - dy, bx - dx)):
            if antenna_map.contains(point):
                nodes.add(point)
    return nodes


def part_b(path: str | os.PathLike[str]) -> set[Point]:
    """Antinodes at every multiple of the spacing along each pair's line."""
    antenna_map = _parse(path)
    nodes: set[Point] = set()
    for (ay, ax), (by, bx) in antenna_map.pairs():
        dy, dx = ay - by, ax - bx
        for step_y, step_x in ((dy, dx), (-dy, -dx)):
            point = (ay, ax)
            while antenna_map.contains(point):
                nodes.add(point)
                point = (point[0] + step_y, point[1] + step_x)
    return nodes