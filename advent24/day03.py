"""Day 3: sum the products of well-formed mul instructions in corrupted memory."""

from __future__ import annotations

import os
import re
from math import prod

from advent24.inputs import read_lines

_MUL = re.compile(r"mul\(\d+,\d+\)")
_INSTRUCTION = re.compile(r"(mul\(\d+,\d+\))|(don't\(\))|(do\(\))")
_NUMBER = re.compile(r"\d+")


def _product(instruction: str) -> int:
    return prod(int(number) for number in _NUMBER.findall(instruction))


def part_a(path: str | os.PathLike[str]) -> int:
    """Sum the products of every mul instruction.

    Every line must hold at least one mul instruction.
    """
    result = 0
    for line in read_lines(path):
        products = [_product(match.group()) for match in _MUL.finditer(line)]
        if not products:
            raise ValueError(f"line holds no mul instruction: {line!r}")
        result += sum(products)
    return result


def part_b(path: str | os.PathLike[str]) -> int:
    """Sum the products of mul instructions enabled by do() and don't().

    The enabled state carries over from one line to the next.
    """
    result = 0
    enabled = True
    for line in read_lines(path):
        for match in _INSTRUCTION.finditer(line):
            instruction = match.group()
            if instruction == "do()":
                enabled = True
            elif instruction == "don't()":
                enabled = False
            elif enabled:
                result += _product(instruction)
    return result