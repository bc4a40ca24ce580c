"""Day 7: which calibration equations can be made true with operators."""

from __future__ import annotations

import os
from collections.abc import Iterator
from itertools import product
from math import prod

from advent24.inputs import read_lines


def _equations(path: str | os.PathLike[str]) -> Iterator[tuple[int, list[int]]]:
    """Yield each line as its test value and the numbers that follow it."""
    for line in read_lines(path):
        head, sep, tail = line.partition(": ")
        if not sep:
            raise ValueError(f"line has no ': ' separator: {line!r}")
        yield int(head), [int(part) for part in tail.split()]


def _solvable(remainder: int, numbers: list[int], start: int = 0) -> bool:
    """Undo + and * from the right; ``numbers`` is in reverse order."""
    if remainder > 0 and start < len(numbers):
        number = numbers[start]
        rest = start + 1
        if remainder % number == 0 and _solvable(remainder // number, numbers, rest):
            return True
        return _solvable(remainder - number, numbers, rest)
    return remainder == 0


def _solvable_with_concat(remainder: int, numbers: list[int], start: int = 0) -> bool:
    """Undo +, * and concatenation from the right; ``numbers`` is reversed."""
    if remainder > 0 and start < len(numbers) - 1:
        number = numbers[start]
        stripped = remainder - number
        for _ in range(len(str(number))):
            if stripped > 0 and stripped % 10 == 0:
                stripped //= 10
        candidates = [remainder - number, stripped]
        if remainder % number == 0:
            candidates.insert(0, remainder // number)
        return any(
            _solvable_with_concat(candidate, numbers, start + 1)
            for candidate in candidates
        )
    return remainder == numbers[start]


def _reachable_by_brute_force(target: int, numbers: list[int]) -> bool:
    """Try every mix of + and * left to right, giving up once a value overshoots.

    Only targets below the product of all numbers are searched; a target
    equal to it counts as reachable, a larger one does not.
    """
    if not numbers:
        raise ValueError("equation has no numbers")
    total_product = prod(numbers)
    if target == total_product:
        return True
    if target > total_product:
        return False
    for operators in product("*+", repeat=len(numbers) - 1):
        value = numbers[0]
        for operator, number in zip(operators, numbers[1:]):
            if value > target:
                break
            value = value * number if operator == "*" else value + number
        if value == target:
            return True
    return False


def part_a(path: str | os.PathLike[str]) -> int:
    """Sum the test values reachable with + and *."""
    return sum(
        target
        for target, numbers in _equations(path)
        if _solvable(target, numbers[::-1])
    )


def part_a_brute_force(path: str | os.PathLike[str]) -> int:
    """Sum the test values reachable with + and *, trying every operator mix."""
    return sum(
        target
        for target, numbers in _equations(path)
        if _reachable_by_brute_force(target, numbers)
    )


def part_b(path: str | os.PathLike[str]) -> int:
    """Sum the test values reachable with +, * and concatenation."""
    result = 0
    for target, numbers in _equations(path):
        if not numbers:
            raise ValueError(f"equation for {target} has no numbers")
        if _solvable_with_concat(target, numbers[::-1]):
            result += target
    return result