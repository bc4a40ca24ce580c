"""Day 5: page ordering rules for safety manual updates."""

from __future__ import annotations

import os
from collections import defaultdict
from functools import cmp_to_key, partial

from advent24.inputs import read_lines

Rules = dict[int, set[int]]


def _parse(path: str | os.PathLike[str]) -> tuple[Rules, list[list[int]]]:
    """Split the input into ordering rules and updates.

    Rules come first, one ``x|y`` per line, meaning page x must come
    before page y.  An empty line ends them; every later line is an
    update, a comma separated list of pages.
    """
    rules: Rules = defaultdict(set)
    updates: list[list[int]] = []
    in_rules = True
    for line in read_lines(path):
        if not in_rules:
            updates.append([int(part) for part in line.split(",")])
        elif line == "":
            in_rules = False
        else:
            parts = [int(part) for part in line.split("|")]
            if len(parts) < 2:
                raise ValueError(f"rule needs two pages: {line!r}")
            rules[parts[0]].add(parts[1])
    return dict(rules), updates


def _is_ordered(update: list[int], rules: Rules) -> bool:
    positions = {page: index for index, page in enumerate(update)}
    return not any(
        positions[page] > positions[later]
        for page in positions
        for later in rules.get(page, ())
        if later in positions
    )


def _middle(update: list[int]) -> int:
    return update[(len(update) - 1) // 2]


def _compare(rules: Rules, first: int, second: int) -> int:
    """Order two pages by the rules: a ruled pair compares greater, else less."""
    followers = rules.get(first)
    if followers is not None and second in followers:
        return 1
    return -1


def _reorder(update: list[int], rules: Rules) -> list[int]:
    return sorted(update, key=cmp_to_key(partial(_compare, rules)))


def part_a(path: str | os.PathLike[str]) -> int:
    """Sum the middle pages of the updates that already follow the rules."""
    rules, updates = _parse(path)
    return sum(_middle(update) for update in updates if _is_ordered(update, rules))


def part_b(path: str | os.PathLike[str]) -> int:
    """Sort the updates that break the rules and sum their middle pages."""
    rules, updates = _parse(path)
    return sum(
        _middle(_reorder(update, rules))
        for update in updates
        if not _is_ordered(update, rules)
    )