"""Day 1: distances and similarity between two lists of location ids."""

from __future__ import annotations

import os
from collections import Counter

from advent24.inputs import read_lines


def _columns(path: str | os.PathLike[str]) -> tuple[list[int], list[int]]:
    left: list[int] = []
    right: list[int] = []
    for line in read_lines(path):
        numbers = [int(part) for part in line.split("   ")]
        left.append(numbers[0])
        right.append(numbers[-1])
    return left, right


def part_a(path: str | os.PathLike[str]) -> int:
    """Sum the distances between the sorted left and right columns."""
    left, right = _columns(path)
    if not left:
        raise ValueError("input holds no pairs")
    return sum(abs(r - l) for l, r in zip(sorted(left), sorted(right)))


def part_b(path: str | os.PathLike[str]) -> int:
    """Sum each left number times how often it occurs on the right."""
    left, right = _columns(path)
    counts = Counter(right)
    return sum(number * counts[number] for number in left)