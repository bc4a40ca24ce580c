"""Day 2: which reactor reports are safe, with and without one removal."""

from __future__ import annotations

import os
from itertools import pairwise

from advent24.inputs import read_lines


def _reports(path: str | os.PathLike[str]) -> list[list[int]]:
    return [[int(part) for part in line.split(" ")] for line in read_lines(path)]


def _first_failure(levels: list[int]) -> int | None:
    """Index of the first unsafe step, or None if the report is safe.

    Every step must move in the direction of the first step, by 1 to 3.
    """
    if len(levels) < 2:
        raise ValueError(f"report needs at least two levels: {levels}")
    increasing = levels[1] > levels[0]
    for index, (current, following) in enumerate(pairwise(levels)):
        change = following - current
        if change == 0 or abs(change) > 3 or (change > 0) != increasing:
            return index
    return None


def _is_safe(levels: list[int]) -> bool:
    return _first_failure(levels) is None


def _without(levels: list[int], index: int) -> list[int]:
    return levels[:index] + levels[index + 1 :]


def part_a(path: str | os.PathLike[str]) -> int:
    """Count the safe reports."""
    return sum(_is_safe(levels) for levels in _reports(path))


def part_b(path: str | os.PathLike[str]) -> int:
    """Count reports that are safe, or become safe by removing any one level."""
    return sum(
        _is_safe(levels)
        or any(_is_safe(_without(levels, index)) for index in range(len(levels)))
        for levels in _reports(path)
    )


def part_c(path: str | os.PathLike[str]) -> int:
    """Like part_b, but only tries removing levels around the first failure."""
    result = 0
    for levels in _reports(path):
        failed_at = _first_failure(levels)
        if failed_at is None:
            result += 1
            continue
        candidates = [failed_at, failed_at + 1]
        if failed_at == 1:
            candidates.append(0)
        if any(_is_safe(_without(levels, index)) for index in candidates):
            result += 1
    return result