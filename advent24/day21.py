"""Day 21: keypad conundrum; the input codes are listed and nothing is solved."""

from __future__ import annotations

import os

from advent24.inputs import read_lines


def _echo(path: str | os.PathLike[str]) -> int:
    for line in read_lines(path):
        print(line)
    return 0


def part_a(path: str | os.PathLike[str]) -> int:
    """Print every code in the input and return 0."""
    return _echo(path)


def part_b(path: str | os.PathLike[str]) -> int:
    """Print every code in the input and return 0."""
    return _echo(path)