"""Historian Hysteria: compare two location-ID lists."""

from __future__ import annotations

from collections import Counter

from aoc2024.cast import to_int


def parse_input(text: str) -> tuple[list[int], list[int]]:
    """Return the left and right columns of the input."""
    left: list[int] = []
    right: list[int] = []
    for line in text.rstrip("\n").split("\n"):
        values = line.split("   ")
        left.append(to_int(values[0]))
        right.append(to_int(values[1]))
    return left, right


def part1(text: str) -> int:
    """Total distance between the sorted lists."""
    left, right = parse_input(text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part2(text: str) -> int:
    """Similarity score: each left value times its count in the right list."""
    left, right = parse_input(text)
    counts = Counter(right)
    return sum(value * counts[value] for value in left)