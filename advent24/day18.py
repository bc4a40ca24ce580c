"""Day 18: the shortest path across a memory grid as bytes fall into it."""

from __future__ import annotations

import os
from collections import deque

from advent24.inputs import read_lines

Position = tuple[int, int]

_DIRECTIONS = ((-1, 0), (0, 1), (1, 0), (0, -1))
_UNREACHABLE = 2**31 - 1


def _falling_bytes(path: str | os.PathLike[str]) -> list[Position]:
    """Each ``x,y`` line as a (row, column) position."""
    positions = []
    for line in read_lines(path):
        parts = [int(part) for part in line.split(",")]
        if len(parts) < 2:
            raise ValueError(f"byte position needs two coordinates: {line!r}")
        positions.append((parts[1], parts[0]))
    return positions


def _corrupted(
    positions: list[Position], grid_size: int, fallen: int
) -> set[Position]:
    if grid_size < 0:
        raise ValueError("grid size must not be negative")
    if not 0 <= fallen <= len(positions):
        raise ValueError(f"only {len(positions)} bytes are listed, not {fallen}")
    blocked = set(positions[:fallen])
    for y, x in blocked:
        if not (0 <= y <= grid_size and 0 <= x <= grid_size):
            raise ValueError(f"byte at {x},{y} lies outside the grid")
    return blocked


def _render(blocked: set[Position], grid_size: int) -> str:
    return "\n".join(
        "".join("#" if (y, x) in blocked else "." for x in range(grid_size + 1))
        for y in range(grid_size + 1)
    )


def _shortest(blocked: set[Position], grid_size: int) -> int:
    """Steps from the top left to the bottom right corner, or 2**31 - 1."""
    goal = (grid_size, grid_size)
    distance = {(0, 0): 0}
    queue = deque([(0, 0)])
    while queue:
        y, x = queue.popleft()
        if (y, x) == goal:
            return distance[goal]
        for dy, dx in _DIRECTIONS:
            step = (y + dy, x + dx)
            if (
                0 <= step[0] <= grid_size
                and 0 <= step[1] <= grid_size
                and step not in blocked
                and step not in distance
            ):
                distance[step] = distance[(y, x)] + 1
                queue.append(step)
    return distance.get(goal, _UNREACHABLE)


def part_a(path: str | os.PathLike[str], grid_size: int, fallen: int) -> int:
    """Fewest steps to the exit after the first ``fallen`` bytes have landed."""
    blocked = _corrupted(_falling_bytes(path), grid_size, fallen)
    print(_render(blocked, grid_size))
    return _shortest(blocked, grid_size)


def part_b(path: str | os.PathLike[str], grid_size: int, fallen: int) -> int:
    """Like part_a, also printing the position of the next byte to fall."""
    positions = _falling_bytes(path)
    blocked = _corrupted(positions, grid_size, fallen)
    if fallen >= len(positions):
        raise ValueError(f"no byte falls after the first {fallen}")
    print(_render(blocked, grid_size))
    steps = _shortest(blocked, grid_size)
    next_y, next_x = positions[fallen]
    print(f"result: ({next_x}, {next_y})")
    return steps