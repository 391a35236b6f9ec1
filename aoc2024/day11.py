"""Plutonian Pebbles: count stones that split as you blink."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from aoc2024.cast import to_int_slice


def apply_rule(value: int) -> list[int]:
    """The stones a single stone turns into after one blink."""
    if value == 0:
        return [1]
    digits = str(value)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return [int(digits[:half]), int(digits[half:])]
    return [value * 2024]


def parse_input(text: str) -> list[int]:
    """Return the initial stone numbers."""
    return to_int_slice(text.rstrip("\n"))


def count_stones(stones: Iterable[int], blinks: int) -> int:
    """Number of stones after ``blinks`` blinks."""
    counts = Counter(stones)
    for _ in range(blinks):
        following: Counter[int] = Counter()
        for stone, count in counts.items():
            for new_stone in apply_rule(stone):
                following[new_stone] += count
        counts = following
    return sum(counts.values())


def part1(text: str) -> int:
    """Stones after 25 blinks."""
    return count_stones(parse_input(text), 25)


def part2(text: str) -> int:
    """Stones after 75 blinks."""
    return count_stones(parse_input(text), 75)