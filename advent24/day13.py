"""Day 13: the fewest tokens to win prizes from claw machines."""

from __future__ import annotations

import os
import re

from advent24.inputs import read_lines

_NUMBER = re.compile(r"\d+")
_PRIZE_OFFSET = 10_000_000_000_000.0
_A_COST = 3


def _presses(a: float, b: float, e: float, c: float, d: float, f: float) -> tuple[float, float]:
    """Solve a*x + b*y = e, c*x + d*y = f; (0, 0) unless both are whole."""
    determinant = a * d - b * c
    if determinant == 0:
        return 0.0, 0.0
    x = (e * d - b * f) / determinant
    y = (a * f - e * c) / determinant
    if x.is_integer() and y.is_integer():
        return x, y
    return 0.0, 0.0


def _pair(line: str) -> tuple[float, float]:
    numbers = [float(match) for match in _NUMBER.findall(line)]
    if len(numbers) < 2:
        raise ValueError(f"line needs two numbers: {line!r}")
    return numbers[0], numbers[1]


def _tokens(path: str | os.PathLike[str], offset: float) -> int:
    a = b = c = d = 0.0
    total = 0
    for line in read_lines(path):
        if not line:
            continue
        if "Button A" in line:
            a, c = _pair(line)
        elif "Button B" in line:
            b, d = _pair(line)
        elif "Prize" in line:
            prize_x, prize_y = _pair(line)
            x, y = _presses(a, b, prize_x + offset, c, d, prize_y + offset)
            total += int(x) * _A_COST + int(y)
    return total


def part_a(path: str | os.PathLike[str]) -> int:
    """Tokens needed to win every winnable prize."""
    return _tokens(path, 0.0)


def part_b(path: str | os.PathLike[str]) -> int:
    """Tokens needed once every prize lies 10000000000000 further on each axis."""
    return _tokens(path, _PRIZE_OFFSET)