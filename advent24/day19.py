"""Day 19: building towel designs out of the available stripe patterns."""

from __future__ import annotations

import os

from advent24.inputs import read_lines


def _parse(path: str | os.PathLike[str]) -> tuple[set[str], list[str]]:
    """The towel patterns from the first non-empty line, then the designs."""
    towels: set[str] = set()
    designs: list[str] = []
    first = True
    for line in read_lines(path):
        if not line:
            continue
        if first:
            towels = set(line.split(", "))
            first = False
        else:
            designs.append(line)
    return towels, designs


def _arrangements(towels: set[str], design: str) -> int:
    """Number of ways to lay out ``design`` from the towel patterns."""
    ways = [0] * (len(design) + 1)
    ways[len(design)] = 1
    for start in reversed(range(len(design))):
        ways[start] = sum(
            ways[end]
            for end in range(start + 1, len(design) + 1)
            if design[start:end] in towels
        )
    return ways[0]


def part_a(path: str | os.PathLike[str]) -> int:
    """Count the designs that can be made at all."""
    towels, designs = _parse(path)
    return sum(_arrangements(towels, design) > 0 for design in designs)


def part_b(path: str | os.PathLike[str]) -> int:
    """Sum the number of ways every design can be made."""
    towels, designs = _parse(path)
    return sum(_arrangements(towels, design) for design in designs)