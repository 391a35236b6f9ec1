"""Red-Nosed Reports: count safe level reports."""

from __future__ import annotations

from itertools import pairwise

from aoc2024.cast import to_int


def parse_input(text: str) -> list[list[int]]:
    """Return one list of levels per line."""
    return [
        [to_int(element) for element in line.split(" ")]
        for line in text.rstrip("\n").split("\n")
    ]


def is_safe(levels: list[int]) -> bool:
    """True if levels move strictly one way in steps of 1 to 3."""
    if len(levels) <= 1:
        return True
    increasing = levels[0] < levels[1]
    for a, b in pairwise(levels):
        if increasing != (a < b):
            return False
        if not 1 <= abs(a - b) <= 3:
            return False
    return True


def is_any_safe(levels: list[int]) -> bool:
    """True if the report is safe, or becomes safe by dropping one level."""
    return is_safe(levels) or any(
        is_safe(levels[:index] + levels[index + 1 :]) for index in range(len(levels))
    )


def part1(text: str) -> int:
    """Number of safe reports."""
    return sum(1 for report in parse_input(text) if is_safe(report))


def part2(text: str) -> int:
    """Number of reports that are safe with at most one level removed."""
    return sum(1 for report in parse_input(text) if is_any_safe(report))