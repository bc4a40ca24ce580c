"""Warm-up puzzle: sum the list of numbers given for each key."""

from __future__ import annotations

import os

from advent24.inputs import read_lines

_U16_MAX = 0xFFFF


def _parse_u16(text: str) -> int:
    if not text.isdigit():
        raise ValueError(f"not an unsigned number: {text!r}")
    value = int(text)
    if value > _U16_MAX:
        raise ValueError(f"number out of range: {text!r}")
    return value


def run(path: str | os.PathLike[str]) -> dict[str, int]:
    """Print each key with its numbers and their sum; return the sums by key.

    Each line has the form ``key: n n n``.  A later line with the same key
    replaces an earlier one.
    """
    parsed: dict[str, list[int]] = {}
    for line in read_lines(path):
        key, sep, rest = line.partition(":")
        if not sep:
            raise ValueError(f"line has no ':' separator: {line!r}")
        parsed[key] = [_parse_u16(part) for part in rest[1:].split(" ")]

    totals: dict[str, int] = {}
    for key, numbers in parsed.items():
        total = sum(numbers)
        if total > _U16_MAX:
            raise OverflowError(f"sum for {key!r} does not fit in 16 bits")
        print(f"key:{key} list:{numbers}")
        print(f"result:{total}")
        totals[key] = total
    return totals