"""Day 15: a robot pushing boxes around a warehouse."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable

from advent24.inputs import read_lines

Position = tuple[int, int]
Step = tuple[int, int]

_MOVES: dict[str, Step] = {"^": (-1, 0), ">": (0, 1), "v": (1, 0), "<": (0, -1)}
_WIDE = {".": "..", "#": "##", "@": "@.", "O": "[]"}
_BOX_HALVES = ("[", "]")


class _Warehouse:
    """A mutable grid of warehouse tiles addressed by (row, column)."""

    def __init__(self, rows: Iterable[str]) -> None:
        self._cells = [list(row) for row in rows]

    def __getitem__(self, position: Position) -> str:
        y, x = position
        return self._cells[y][x]

    def __setitem__(self, position: Position, tile: str) -> None:
        y, x = position
        self._cells[y][x] = tile

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self._cells)

    def robot(self) -> Position:
        """Position of the last robot found scanning row by row, else (0, 0)."""
        found = (0, 0)
        for y, row in enumerate(self._cells):
            for x, tile in enumerate(row):
                if tile == "@":
                    found = (y, x)
        return found

    def gps(self, box: str) -> int:
        return sum(
            100 * y + x
            for y, row in enumerate(self._cells)
            for x, tile in enumerate(row)
            if tile == box
        )


def _parse(path: str | os.PathLike[str]) -> tuple[list[str], list[Step]]:
    """Split the input into map rows and the robot's steps.

    The map ends at the first empty line; every line after it holds moves.
    """
    rows: list[str] = []
    move_lines: list[str] = []
    in_map = True
    for line in read_lines(path):
        if not in_map:
            move_lines.append(line)
        elif line == "":
            in_map = False
        else:
            rows.append(line)
    if not rows:
        raise ValueError("input holds no warehouse map")
    steps = []
    for move in "".join(move_lines):
        if move not in _MOVES:
            raise ValueError(f"unknown move: {move!r}")
        steps.append(_MOVES[move])
    return rows, steps


def _next(position: Position, step: Step) -> Position:
    return position[0] + step[0], position[1] + step[1]


def _drive(
    warehouse: _Warehouse,
    steps: list[Step],
    shove: Callable[[_Warehouse, Position, Step], bool],
) -> None:
    print(warehouse)
    robot = warehouse.robot()
    print(f"{robot[0]} {robot[1]}")
    for step in steps:
        target = _next(robot, step)
        if warehouse[target] == "." or shove(warehouse, target, step):
            warehouse[target] = "@"
            warehouse[robot] = "."
            robot = target
    print(warehouse)


def _shove_small(warehouse: _Warehouse, position: Position, step: Step) -> bool:
    """Push a row of ``O`` boxes starting at ``position``; True if it moved."""
    if warehouse[position] != "O":
        return False
    current = position
    while True:
        current = _next(current, step)
        tile = warehouse[current]
        if tile == ".":
            warehouse[current] = "O"
            return True
        if tile != "O":
            return False


def _can_slide(warehouse: _Warehouse, position: Position, step: Step) -> bool:
    current = position
    while True:
        current = _next(current, step)
        tile = warehouse[current]
        if tile == ".":
            return True
        if tile not in _BOX_HALVES:
            return False


def _slide(warehouse: _Warehouse, position: Position, step: Step) -> None:
    chain = [position]
    while warehouse[_next(chain[-1], step)] != ".":
        chain.append(_next(chain[-1], step))
    for cell in reversed(chain):
        warehouse[_next(cell, step)] = warehouse[cell]


def _partner(position: Position, half: str) -> Position:
    return position[0], position[1] + (1 if half == "[" else -1)


def _can_lift(warehouse: _Warehouse, position: Position, step: Step) -> bool:
    here = warehouse[position]
    if here == ".":
        return True
    ahead_pos = _next(position, step)
    ahead_partner_pos = _partner(ahead_pos, here)
    ahead = warehouse[ahead_pos]
    ahead_partner = warehouse[ahead_partner_pos]
    if ahead == "." and ahead_partner == ".":
        return True
    if "#" in (ahead, ahead_partner):
        return False
    if ahead == here:
        return _can_lift(warehouse, ahead_pos, step)
    return _can_lift(warehouse, ahead_pos, step) and _can_lift(
        warehouse, ahead_partner_pos, step
    )


def _lift(warehouse: _Warehouse, position: Position, step: Step) -> None:
    here = warehouse[position]
    if here not in _BOX_HALVES:
        return
    ahead_pos = _next(position, step)
    ahead_partner_pos = _partner(ahead_pos, here)
    partner_pos = _partner(position, here)
    partner = warehouse[partner_pos]
    ahead = warehouse[ahead_pos]
    if not (ahead == "." and warehouse[ahead_partner_pos] == "."):
        _lift(warehouse, ahead_pos, step)
        if here != ahead:
            _lift(warehouse, ahead_partner_pos, step)
    warehouse[ahead_pos] = here
    warehouse[ahead_partner_pos] = partner
    warehouse[position] = "."
    warehouse[partner_pos] = "."


def _shove_wide(warehouse: _Warehouse, position: Position, step: Step) -> bool:
    """Push wide ``[]`` boxes starting at ``position``; True if they moved."""
    if warehouse[position] not in _BOX_HALVES:
        return False
    if step[0] == 0:
        if _can_slide(warehouse, position, step):
            _slide(warehouse, position, step)
            return True
        return False
    if _can_lift(warehouse, position, step):
        _lift(warehouse, position, step)
        return True
    return False


def _widen(row: str) -> str:
    return "".join(_WIDE.get(tile, "xx") for tile in row)


def part_a(path: str | os.PathLike[str]) -> int:
    """Sum of the boxes' GPS coordinates after the robot has made every move."""
    rows, steps = _parse(path)
    warehouse = _Warehouse(rows)
    _drive(warehouse, steps, _shove_small)
    return warehouse.gps("O")


def part_b(path: str | os.PathLike[str]) -> int:
    """The same on a warehouse twice as wide, where boxes are two tiles wide."""
    rows, steps = _parse(path)
    warehouse = _Warehouse(_widen(row) for row in rows)
    _drive(warehouse, steps, _shove_wide)
    return warehouse.gps("[")