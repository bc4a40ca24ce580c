"""Day 4: word search for XMAS and for crossed MAS."""

from __future__ import annotations

import os

from advent24.inputs import read_lines

_WORDS = ("XMAS", "SAMX")
_DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))
_MAS = {"M", "S"}


def _at(lines: list[str], row: int, col: int) -> str | None:
    if row < 0 or col < 0 or row >= len(lines):
        return None
    line = lines[row]
    return line[col] if col < len(line) else None


def _spells(lines: list[str], row: int, col: int, dy: int, dx: int, word: str) -> bool:
    return all(
        _at(lines, row + dy * step, col + dx * step) == letter
        for step, letter in enumerate(word)
    )


def part_a(path: str | os.PathLike[str]) -> int:
    """Count XMAS horizontally, vertically and diagonally, either way round."""
    lines = read_lines(path)
    result = 0
    for row, line in enumerate(lines):
        for col, char in enumerate(line):
            for word in _WORDS:
                if char == word[0]:
                    result += sum(
                        _spells(lines, row, col, dy, dx, word) for dy, dx in _DIRECTIONS
                    )
    return result


def _is_cross(lines: list[str], row: int, col: int) -> bool:
    if row == 0 or col == 0:
        return False
    falling = {_at(lines, row - 1, col - 1), _at(lines, row + 1, col + 1)}
    rising = {_at(lines, row - 1, col + 1), _at(lines, row + 1, col - 1)}
    return falling == _MAS and rising == _MAS


def part_b(path: str | os.PathLike[str]) -> int:
    """Count the A's at the centre of two crossing MAS diagonals."""
    lines = read_lines(path)
    return sum(
        _is_cross(lines, row, col)
        for row, line in enumerate(lines)
        for col, char in enumerate(line)
        if char == "A"
    )